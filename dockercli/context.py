"""Shared per-process state handed to every command handler."""

import json
import os
import ssl
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from dockercli.config import load_config
from dockercli.errors import RegistryConfigError
from dockercli.logging import get_logger
from dockercli.models import RegistryConfig

logger = get_logger(__name__)


def template_json(value: Any) -> str:
    """Render ``value`` as compact JSON, the ``json`` helper for ``--format`` templates."""
    return json.dumps(value, separators=(',', ':'), default=str)


def default_template_funcs() -> dict[str, Callable[[Any], str]]:
    return {'json': template_json}


@dataclass
class ClientContext:
    """Connection settings, streams and credentials for one CLI invocation."""

    input: TextIO | None
    output: TextIO
    error: TextIO
    protocol: str
    address: str
    tls_config: ssl.SSLContext | None = None
    is_terminal: bool = False
    terminal_fd: int | None = None
    scheme: str = 'http'
    registry_config: RegistryConfig | None = None
    template_funcs: Mapping[str, Callable[[Any], str]] = field(default_factory=default_template_funcs)

    def load_config_file(self) -> RegistryConfig:
        """Load registry credentials from ``$HOME`` and cache them on the context.

        On failure a warning goes to the error stream, the previously cached
        value is kept and the error is re-raised for the caller to judge.
        """
        try:
            home = os.environ.get('HOME')
            if not home:
                msg = 'HOME environment variable is not set'
                raise RegistryConfigError(msg)
            registry_config = load_config(Path(home))
        except RegistryConfigError as exc:
            self.error.write(f'WARNING: {exc}\n')
            logger.debug('registry_config_failed', error=str(exc))
            raise

        self.registry_config = registry_config
        return registry_config


def _probe_terminal(stream: TextIO) -> int | None:
    """Return the descriptor behind ``stream`` if it is a terminal."""
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        # io.UnsupportedOperation covers in-memory streams such as StringIO.
        return None
    return fd if os.isatty(fd) else None


def new_client_context(  # noqa: PLR0913 - mirrors the client's construction parameters
    input_stream: TextIO | None,
    output: TextIO,
    error: TextIO | None,
    protocol: str,
    address: str,
    tls_config: ssl.SSLContext | None = None,
) -> ClientContext:
    """Build the client context, probing ``output`` for terminal support."""
    terminal_fd = None
    if input_stream is not None:
        terminal_fd = _probe_terminal(output)

    context = ClientContext(
        input=input_stream,
        output=output,
        error=error if error is not None else output,
        protocol=protocol,
        address=address,
        tls_config=tls_config,
        is_terminal=terminal_fd is not None,
        terminal_fd=terminal_fd,
        scheme='https' if tls_config is not None else 'http',
    )
    logger.debug(
        'client_context_created',
        protocol=protocol,
        address=address,
        scheme=context.scheme,
        is_terminal=context.is_terminal,
    )
    return context


__all__ = [
    'ClientContext',
    'new_client_context',
    'template_json',
]
