"""The closed table of docker subcommands and their handlers."""

from collections.abc import Callable, Iterable, Iterator, Sequence
from types import MappingProxyType

from dockercli.errors import RegistryDefinitionError

Handler = Callable[[Sequence[str]], int | None]

KEY_PREFIX = 'Cmd'

COMMAND_NAMES = (
    'attach',
    'build',
    'commit',
    'cp',
    'diff',
    'events',
    'export',
    'help',
    'history',
    'images',
    'import',
    'info',
    'inspect',
    'kill',
    'load',
    'login',
    'logout',
    'logs',
    'pause',
    'port',
    'ps',
    'pull',
    'push',
    'restart',
    'rm',
    'rmi',
    'run',
    'save',
    'search',
    'start',
    'stop',
    'tag',
    'top',
    'unpause',
    'version',
    'wait',
)


def canonical_key(token: str) -> str | None:
    """Normalize a command token to its lookup key, e.g. ``ps`` -> ``CmdPs``.

    The empty token has no key; it never resolves to a default command.
    """
    if not token:
        return None
    return KEY_PREFIX + token[:1].upper() + token[1:].lower()


SUPPORTED_KEYS = frozenset(canonical_key(name) for name in COMMAND_NAMES)


class CommandRegistry:
    """Immutable mapping from canonical command key to handler."""

    def __init__(self, entries: Iterable[tuple[str, Handler]]) -> None:
        table: dict[str, Handler] = {}
        for name, handler in entries:
            key = canonical_key(name)
            if key not in SUPPORTED_KEYS:
                msg = f'unsupported command in registry: {name!r}'
                raise RegistryDefinitionError(msg)
            existing = table.get(key)
            if existing is not None and existing != handler:
                msg = f'command {name!r} is mapped to more than one handler'
                raise RegistryDefinitionError(msg)
            table[key] = handler
        self._table = MappingProxyType(table)

    def resolve(self, token: str) -> Handler | None:
        """Return the handler for ``token`` or ``None`` when there is none."""
        key = canonical_key(token)
        if key is None:
            return None
        return self._table.get(key)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.resolve(token) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)


__all__ = [
    'COMMAND_NAMES',
    'CommandRegistry',
    'Handler',
    'canonical_key',
]
