"""Exception types raised by the docker client front-end."""


class DockerCliError(RuntimeError):
    """Base class for docker client errors."""


class RegistryDefinitionError(DockerCliError):
    """Raised when the command table is defined inconsistently."""


class RegistryConfigError(DockerCliError):
    """Raised when the registry credential file cannot be loaded."""


class HostParseError(DockerCliError):
    """Raised when a daemon address cannot be parsed."""


class TLSConfigError(DockerCliError):
    """Raised when TLS material cannot be loaded."""


class DaemonUnavailableError(DockerCliError):
    """Raised when a command needs the daemon but no transport can reach it."""


class StatusError(DockerCliError):
    """A command failure that carries the exit status the process should use."""

    def __init__(self, status: int, message: str = '') -> None:
        super().__init__(message or f'exit status {status}')
        self.status = status
        self.message = message


__all__ = [
    'DaemonUnavailableError',
    'DockerCliError',
    'HostParseError',
    'RegistryConfigError',
    'RegistryDefinitionError',
    'StatusError',
    'TLSConfigError',
]
