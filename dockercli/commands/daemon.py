"""Commands carried out by the daemon, forwarded through a transport."""

from collections.abc import Callable, Sequence

from dockercli.commands.catalog import CommandSpec
from dockercli.context import ClientContext
from dockercli.errors import DaemonUnavailableError, RegistryConfigError
from dockercli.logging import get_logger
from dockercli.models import CommandRequest

logger = get_logger(__name__)

Transport = Callable[[ClientContext, CommandRequest], int | None]

# Commands that talk to a registry and therefore want credentials loaded first.
CREDENTIAL_COMMANDS = frozenset({'login', 'pull', 'push', 'search'})


def unavailable_transport(context: ClientContext, request: CommandRequest) -> int | None:
    """Default transport for a client built without a daemon connection."""
    msg = (
        "Cannot connect to the Docker daemon. Is 'docker -d' running on this host? "
        f'({context.protocol}://{context.address}, command: {request.command})'
    )
    raise DaemonUnavailableError(msg)


class DaemonCommand:
    """Parse a daemon-backed command's flags and hand the request to the transport."""

    def __init__(self, context: ClientContext, spec: CommandSpec, transport: Transport) -> None:
        self.context = context
        self.spec = spec
        self.transport = transport

    def _load_credentials(self) -> None:
        try:
            self.context.load_config_file()
        except RegistryConfigError as exc:
            # The warning is already on the error stream; the registry may still accept anonymous access.
            logger.debug('continuing_without_credentials', command=self.spec.name, error=str(exc))

    def __call__(self, args: Sequence[str]) -> int | None:
        namespace = self.spec.build_parser(self.context).parse(args)
        options = {key: value for key, value in vars(namespace).items() if key != 'arguments'}

        if self.spec.name in CREDENTIAL_COMMANDS:
            self._load_credentials()

        request = CommandRequest(
            command=self.spec.name,
            options=options,
            arguments=namespace.arguments,
        )
        logger.debug(
            'forwarding_command',
            command=request.command,
            _verbose_request=request.model_dump(),
        )
        return self.transport(self.context, request)


__all__ = [
    'CREDENTIAL_COMMANDS',
    'DaemonCommand',
    'Transport',
    'unavailable_transport',
]
