"""Utilities for reading registry credentials from the per-user config file."""

import base64
import binascii
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from dockercli.errors import RegistryConfigError
from dockercli.logging import get_logger
from dockercli.models import INDEX_SERVER, AuthConfig, RegistryConfig

logger = get_logger(__name__)

CONFIG_FILENAME = '.dockercfg'


def decode_auth(encoded: str) -> tuple[str, str]:
    """Split a base64 ``user:password`` token into its two halves."""
    try:
        decoded = base64.b64decode(encoded, validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as exc:
        msg = f'Invalid auth configuration file: {exc}'
        raise RegistryConfigError(msg) from exc

    username, sep, password = decoded.partition(':')
    if not sep:
        msg = 'Invalid auth configuration file'
        raise RegistryConfigError(msg)
    return username, password.strip('\x00')


def _parse_json_configs(data: Any) -> dict[str, AuthConfig]:
    if not isinstance(data, dict):
        msg = 'Invalid Auth config file'
        raise RegistryConfigError(msg)

    configs: dict[str, AuthConfig] = {}
    for server, raw in data.items():
        try:
            entry = AuthConfig.model_validate(raw)
        except ValidationError as exc:
            msg = f'Invalid Auth config file entry for {server}'
            raise RegistryConfigError(msg) from exc
        username, password = decode_auth(entry.auth)
        configs[server] = entry.model_copy(
            update={
                'username': username,
                'password': password,
                'auth': '',
                'server_address': server,
            },
        )
    return configs


def _split_legacy_line(line: str) -> str:
    parts = line.split(' = ')
    if len(parts) != 2:  # noqa: PLR2004 - key and value
        msg = 'Invalid Auth config file'
        raise RegistryConfigError(msg)
    return parts[1]


def _parse_legacy_configs(content: str) -> dict[str, AuthConfig]:
    """Parse the two-line ``auth = ...`` / ``email = ...`` format."""
    lines = content.split('\n')
    if len(lines) < 2:  # noqa: PLR2004 - auth and email lines
        msg = 'The Auth config file is empty'
        raise RegistryConfigError(msg)

    username, password = decode_auth(_split_legacy_line(lines[0]))
    email = _split_legacy_line(lines[1])
    return {
        INDEX_SERVER: AuthConfig(
            username=username,
            password=password,
            email=email,
            server_address=INDEX_SERVER,
        ),
    }


def load_config(root_path: Path) -> RegistryConfig:
    """Load registry credentials stored under ``root_path``.

    A missing file yields an empty configuration; anything unreadable raises
    :class:`RegistryConfigError`.
    """
    config_path = root_path / CONFIG_FILENAME
    if not config_path.exists():
        logger.debug('registry_config_missing', config=str(config_path))
        return RegistryConfig(root_path=root_path)

    logger.debug('loading_registry_config', config=str(config_path))
    try:
        content = config_path.read_text()
    except OSError as exc:
        msg = f'failed to read {config_path}: {exc}'
        raise RegistryConfigError(msg) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        configs = _parse_legacy_configs(content)
    else:
        configs = _parse_json_configs(data)

    logger.debug(
        'loaded_registry_config',
        servers=sorted(configs),
        _verbose_config=str(config_path),
    )
    return RegistryConfig(root_path=root_path, configs=configs)


__all__ = [
    'CONFIG_FILENAME',
    'decode_auth',
    'load_config',
]
