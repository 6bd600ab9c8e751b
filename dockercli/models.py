"""Pydantic models for the docker client."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

INDEX_SERVER = 'https://index.docker.io/v1/'


class GlobalOptions(BaseModel):
    """Options that precede the subcommand on the command line."""

    hosts: list[str] = Field(default_factory=list)
    debug: bool = False
    tls: bool = False
    tlsverify: bool = False
    tlscacert: Path
    tlscert: Path
    tlskey: Path
    show_help: bool = False
    show_version: bool = False

    @property
    def use_tls(self) -> bool:
        """TLS is on when either flag asks for it; verification implies TLS."""
        return self.tls or self.tlsverify


class AuthConfig(BaseModel):
    """Credentials for a single registry server."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = ''
    password: str = ''
    auth: str = ''
    email: str = ''
    server_address: str = Field(default='', alias='serveraddress')


class RegistryConfig(BaseModel):
    """Registry credentials loaded from the per-user config file."""

    root_path: Path
    configs: dict[str, AuthConfig] = Field(default_factory=dict)

    def for_server(self, server: str | None = None) -> AuthConfig | None:
        """Return credentials for ``server``, defaulting to the public index."""
        return self.configs.get(server or INDEX_SERVER)


class CommandRequest(BaseModel):
    """A parsed daemon-backed command, handed to the transport."""

    command: str
    options: dict[str, Any] = Field(default_factory=dict)
    arguments: list[str] = Field(default_factory=list)

    @field_validator('command')
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Validate that the command name is not empty."""
        if not v.strip():
            msg = 'Command name cannot be empty'
            raise ValueError(msg)
        return v.strip()
