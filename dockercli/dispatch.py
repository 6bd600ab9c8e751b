"""Route an argument vector to the matching command handler."""

from collections.abc import Sequence

from dockercli.context import ClientContext
from dockercli.errors import RegistryDefinitionError
from dockercli.logging import get_logger
from dockercli.registry import CommandRegistry

logger = get_logger(__name__)


def dispatch(
    context: ClientContext,
    registry: CommandRegistry,
    args: Sequence[str],
) -> int | None:
    """Run the handler named by ``args[0]`` with the remaining arguments.

    Unknown commands print a diagnostic on the output stream and fall back to
    ``help`` with the tail of ``args``; no arguments at all means ``help``.
    The handler's result, or exception, is passed through untouched.
    """
    help_handler = registry.resolve('help')
    if help_handler is None:
        msg = 'command registry has no help handler'
        raise RegistryDefinitionError(msg)

    if not args:
        logger.debug('dispatching_help', reason='no_command')
        return help_handler([])

    token, rest = args[0], list(args[1:])
    handler = registry.resolve(token)
    if handler is None:
        logger.debug('command_not_found', command=token)
        context.output.write(f'Error: Command not found: {token}\n')
        return help_handler(rest)

    logger.debug('dispatching', command=token, _verbose_args=rest)
    return handler(rest)


__all__ = ['dispatch']
