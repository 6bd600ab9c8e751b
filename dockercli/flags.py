"""Per-subcommand flag parsing with the docker usage layout."""

import argparse
from collections.abc import Sequence
from typing import Any, NoReturn

from dockercli.context import ClientContext

PROGRAM_NAME = 'docker'
USAGE_EXIT_STATUS = 2
END_OF_OPTIONS = '--'


class _UsageAction(argparse.Action):
    """``-h``/``--help``: print the usage block and exit."""

    def __init__(self, option_strings: Sequence[str], dest: str = argparse.SUPPRESS, **kwargs: Any) -> None:
        kwargs.setdefault('help', argparse.SUPPRESS)
        super().__init__(option_strings=option_strings, dest=dest, default=argparse.SUPPRESS, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):  # noqa: ANN001, ANN204
        parser.usage_exit()


def _format_default(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if value is None or value == '':
        return '""'
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (list, tuple)):
        return '[' + ', '.join(str(item) for item in value) + ']'
    return str(value)


class SubcommandParser(argparse.ArgumentParser):
    """Argument parser whose usage output and exit status follow the docker CLI.

    Parsing stops at the first positional argument; everything from there on
    is collected, unparsed, in ``namespace.arguments``.
    """

    def __init__(self, context: ClientContext, name: str, signature: str, description: str) -> None:
        super().__init__(
            prog=f'{PROGRAM_NAME} {name}',
            description=description,
            add_help=False,
            allow_abbrev=False,
        )
        self.context = context
        self.name = name
        self.signature = signature
        self._deprecated: list[argparse.Action] = []
        self.add_argument('-h', '--help', action=_UsageAction)
        self.add_argument('arguments', nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    def add_flag(self, *names: str, deprecated: bool = False, **kwargs: Any) -> argparse.Action:
        """Register a flag; deprecated flags still parse but stay out of the usage text."""
        if deprecated:
            kwargs['help'] = argparse.SUPPRESS
        action = self.add_argument(*names, **kwargs)
        if deprecated:
            self._deprecated.append(action)
        return action

    def visible_flags(self) -> list[argparse.Action]:
        """Flags that count towards ``[OPTIONS]`` and appear in the defaults listing."""
        return [
            action
            for action in self._actions
            if action.option_strings
            and not isinstance(action, _UsageAction)
            and action not in self._deprecated
        ]

    def format_usage_block(self) -> str:
        options = '[OPTIONS] ' if self.visible_flags() else ''
        lines = [f'\nUsage: {self.prog} {options}{self.signature}\n\n{self.description}\n\n']
        lines.extend(self.format_defaults())
        return ''.join(lines)

    def format_defaults(self) -> list[str]:
        entries = [
            (f'{", ".join(action.option_strings)}={_format_default(action.default)}', action.help or '')
            for action in self.visible_flags()
        ]
        if not entries:
            return []
        width = max(len(flag) for flag, _ in entries) + 4
        return [f'  {flag:<{width}}{help_text}\n'.rstrip() + '\n' for flag, help_text in entries]

    def usage_exit(self) -> NoReturn:
        """Write the usage block to the error stream and exit with status 2."""
        self.context.error.write(self.format_usage_block())
        self.exit(USAGE_EXIT_STATUS)

    def error(self, message: str) -> NoReturn:
        self.context.error.write(f'{message}\n')
        self.usage_exit()

    def parse(self, args: Sequence[str]) -> argparse.Namespace:
        namespace = self.parse_args(list(args))
        # A leading `--` ends flag parsing and is not itself an argument.
        if namespace.arguments[:1] == [END_OF_OPTIONS]:
            namespace.arguments = namespace.arguments[1:]
        return namespace


def make_flag_set(
    context: ClientContext,
    name: str,
    signature: str,
    description: str,
) -> SubcommandParser:
    """Create the flag parser shared by every subcommand handler."""
    return SubcommandParser(context, name, signature, description)


__all__ = [
    'END_OF_OPTIONS',
    'PROGRAM_NAME',
    'USAGE_EXIT_STATUS',
    'SubcommandParser',
    'make_flag_set',
]
