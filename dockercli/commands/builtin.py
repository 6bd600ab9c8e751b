"""Commands answered by the client itself: ``help`` and ``version``."""

import platform
import sys
from collections.abc import Sequence

from dockercli import API_VERSION, __version__
from dockercli.commands.catalog import CATALOG, lookup_spec
from dockercli.commands.daemon import Transport
from dockercli.context import ClientContext
from dockercli.models import CommandRequest
from dockercli.parsing import DEFAULT_UNIX_SOCKET

MAIN_USAGE = (
    'Usage: docker [OPTIONS] COMMAND [arg...]\n'
    f' -H=[unix://{DEFAULT_UNIX_SOCKET}]: tcp://host:port to bind/connect to or unix://path/to/socket to use\n'
    '\n'
    'A self-sufficient runtime for linux containers.\n'
    '\n'
    'Commands:\n'
)


def format_main_usage() -> str:
    """Top-level usage with one summary line per command."""
    lines = [MAIN_USAGE]
    for name, spec in CATALOG.items():
        if name == 'help':
            continue
        lines.append(f'    {name[:10]:<10}{spec.summary}\n')
    lines.append("\nRun 'docker COMMAND --help' for more information on a command.\n")
    return ''.join(lines)


class HelpCommand:
    """``docker help [COMMAND]``."""

    def __init__(self, context: ClientContext) -> None:
        self.context = context

    def __call__(self, args: Sequence[str]) -> int:
        if args:
            spec = lookup_spec(args[0])
            if spec is None:
                self.context.error.write(f'Error: Command not found: {args[0]}\n')
            else:
                spec.build_parser(self.context).usage_exit()
        self.context.error.write(format_main_usage())
        return 0


class VersionCommand:
    """``docker version``: client details here, server details from the transport."""

    def __init__(self, context: ClientContext, transport: Transport) -> None:
        self.context = context
        self.transport = transport

    def __call__(self, args: Sequence[str]) -> int | None:
        parser = CATALOG['version'].build_parser(self.context)
        namespace = parser.parse(args)
        if namespace.arguments:
            parser.usage_exit()

        out = self.context.output
        out.write(f'Client version: {__version__}\n')
        out.write(f'Client API version: {API_VERSION}\n')
        out.write(f'Python version (client): {platform.python_version()}\n')
        out.write(f'OS/Arch (client): {sys.platform}/{platform.machine().lower()}\n')
        return self.transport(self.context, CommandRequest(command='version'))
