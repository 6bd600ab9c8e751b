"""Main entry point for the docker client CLI."""

import sys
from collections.abc import Sequence
from typing import TextIO

from dockercli import __version__
from dockercli.commands import build_registry
from dockercli.commands.daemon import Transport, unavailable_transport
from dockercli.context import new_client_context
from dockercli.dispatch import dispatch
from dockercli.errors import StatusError
from dockercli.logging import configure_logging, get_logger
from dockercli.parsing import parse_args_to_model, resolve_host
from dockercli.tls import build_tls_config

logger = get_logger(__name__)


def run(
    argv: Sequence[str],
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    transport: Transport = unavailable_transport,
) -> int:
    """Parse global options, build the client context and dispatch the command.

    Returns the process exit status. Usage errors raise ``SystemExit(2)``.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    options, command_args = parse_args_to_model(argv)

    # Configure logging first
    configure_logging(verbose=options.debug)

    logger.debug(
        'starting_docker_client',
        command=command_args[0] if command_args else None,
        _verbose_options=options.model_dump(mode='json'),
    )

    if options.show_version:
        stdout.write(f'Docker version {__version__}\n')
        return 0

    try:
        protocol, address = resolve_host(options)
        tls_config = build_tls_config(options)
        context = new_client_context(stdin, stdout, stderr, protocol, address, tls_config)
        registry = build_registry(context, transport)

        if options.show_help:
            command_args = ['help']
        status = dispatch(context, registry, command_args)
    except StatusError as exc:
        logger.debug('command_failed', status=exc.status, error=str(exc))
        if exc.message:
            stderr.write(f'{exc.message}\n')
        return exc.status
    except Exception as exc:  # noqa: BLE001 - top-level CLI guard
        logger.debug('cli_operation_failed', error=str(exc), exc_info=True)
        stderr.write(f'Error: {exc}\n')
        return 1

    return status or 0


def main() -> None:
    """Main entry point for the docker CLI."""
    sys.exit(run(sys.argv[1:]))


if __name__ == '__main__':
    main()
