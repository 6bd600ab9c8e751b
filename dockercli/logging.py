import logging

import structlog
import yaml
from rich.console import Console
from rich.syntax import Syntax
from structlog.types import FilteringBoundLogger
from structlog.typing import EventDict

# Diagnostics share stderr with usage text; stdout stays reserved for command output.
console = Console(stderr=True)

# Type alias for our logger
Logger = FilteringBoundLogger

VERBOSE_PREFIXES = ('_verbose_', '_debug_', '_perf_')


def format_context_yaml(event_dict: EventDict, indent: int = 2) -> str:
    """Format the context dictionary as YAML.

    Args:
        event_dict: The context dictionary to format.
        indent: The number of spaces to use for indentation.

    Returns:
        The formatted YAML string.
    """
    if not event_dict:
        return ''
    context_yaml = yaml.safe_dump(
        event_dict,
        sort_keys=True,
        default_flow_style=False,
    )
    pad = ' ' * indent
    return '\n'.join(f'{pad}{line}' for line in context_yaml.splitlines())


def filter_context_by_prefix(event_dict: EventDict) -> EventDict:
    """Drop keys that are only meant for verbose output."""
    return {key: value for key, value in event_dict.items() if not key.startswith(VERBOSE_PREFIXES)}


def strip_prefixes_from_keys(event_dict: EventDict) -> EventDict:
    """Remove the verbosity prefixes so verbose keys render with their plain names."""
    stripped: EventDict = {}
    for key, value in event_dict.items():
        for prefix in VERBOSE_PREFIXES:
            if key.startswith(prefix):
                key = key[len(prefix) :]
                break
        stripped[key] = value
    return stripped


def _is_verbose() -> bool:
    return logging.getLogger().level <= logging.DEBUG


def cli_renderer(
    _logger: Logger,
    method_name: str,
    event_dict: EventDict,
) -> str:
    """Render log messages for CLI output using rich formatting.

    Args:
        _logger: The logger instance.
        method_name: The logging method name (e.g., 'info', 'error').
        event_dict: The event dictionary containing log data.

    Returns:
        str: An empty string, as structlog expects a string return but output is printed.
    """
    level = method_name.upper()
    event_msg = event_dict.pop('event', '')
    for key in ('timestamp', 'level', 'log_level'):
        event_dict.pop(key, None)
    exc_info = event_dict.pop('exc_info', None)

    if _is_verbose():
        event_dict = strip_prefixes_from_keys(event_dict)
    else:
        event_dict = filter_context_by_prefix(event_dict)

    context_yaml = format_context_yaml(event_dict)

    level_styles = {
        'INFO': 'blue',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'DEBUG': 'magenta',
        'CRITICAL': 'white on red',
    }
    style = level_styles.get(level, 'bold cyan')
    console.print(f'[bold {style}][{level}][/bold {style}] [{style}]{event_msg}[/{style}]')

    if context_yaml:
        syntax = Syntax(
            context_yaml,
            'yaml',
            theme='github-dark',
            background_color='default',
            line_numbers=False,
        )
        console.print(syntax)

    if exc_info and _is_verbose():
        console.print_exception()
    return ''  # structlog expects a string return, but we already printed


def configure_logging(*, verbose: bool = False) -> None:
    """Configure structlog for the docker client.

    Args:
        verbose: Enable verbose/debug output
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt='ISO', utc=False),
            structlog.stdlib.add_log_level,
            cli_renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    # Without verbose only warnings surface; info chatter would interleave with command output.
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not root_logger.handlers:
        # The renderer prints directly; keep logging's last-resort handler from echoing blank lines.
        root_logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> Logger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
