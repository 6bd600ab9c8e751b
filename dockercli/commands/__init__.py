"""Handlers for every docker subcommand, bound to one client context."""

from dockercli.commands.builtin import HelpCommand, VersionCommand
from dockercli.commands.catalog import CATALOG
from dockercli.commands.daemon import DaemonCommand, Transport, unavailable_transport
from dockercli.context import ClientContext
from dockercli.registry import CommandRegistry, Handler


def build_handlers(
    context: ClientContext,
    transport: Transport = unavailable_transport,
) -> list[tuple[str, Handler]]:
    """Create one handler per catalogued command."""
    handlers: list[tuple[str, Handler]] = []
    for name, spec in CATALOG.items():
        if name == 'help':
            handlers.append((name, HelpCommand(context)))
        elif name == 'version':
            handlers.append((name, VersionCommand(context, transport)))
        else:
            handlers.append((name, DaemonCommand(context, spec, transport)))
    return handlers


def build_registry(
    context: ClientContext,
    transport: Transport = unavailable_transport,
) -> CommandRegistry:
    """Build the command registry with every handler closed over ``context``."""
    return CommandRegistry(build_handlers(context, transport))


__all__ = ['build_handlers', 'build_registry']
