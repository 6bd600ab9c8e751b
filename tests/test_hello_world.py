"""Basic integration tests for dockercli."""

from dockercli import __version__
from dockercli.commands.builtin import format_main_usage
from dockercli.parsing import create_parser


def test_version_import() -> None:
    """Test that we can import the version."""
    assert __version__ == '0.0.0.dev0'


def test_cli_parser_creation() -> None:
    """Test that the CLI parser can be created."""
    parser = create_parser()
    assert parser.prog == 'docker'


def test_cli_help() -> None:
    """Test that the main usage can be generated without errors."""
    help_text = format_main_usage()
    assert 'docker' in help_text
    assert 'A self-sufficient runtime for linux containers.' in help_text
