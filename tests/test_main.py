"""Tests for the docker CLI entry point."""

import io
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

import dockercli.main as main_module
from dockercli import __version__
from dockercli.errors import StatusError
from dockercli.main import main, run

from .conftest import RecordingTransport, Streams


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.setenv('DOCKER_CERT_PATH', str(tmp_path / 'certs'))
    monkeypatch.delenv('DOCKER_HOST', raising=False)
    monkeypatch.delenv('DOCKER_TLS_VERIFY', raising=False)


def run_cli(args: list[str], streams: Streams, transport: RecordingTransport | None = None) -> int:
    kwargs = {} if transport is None else {'transport': transport}
    return run(args, stdin=streams.input, stdout=streams.output, stderr=streams.error, **kwargs)


class TestRun:
    """Tests for run()."""

    def test_dispatches_command(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test the ps scenario end to end."""
        assert run_cli(['ps', '-a'], streams, transport) == 0

        (request,) = transport.requests
        assert request.command == 'ps'
        assert request.options['all'] is True

    def test_no_arguments_shows_help(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test that an empty invocation prints the main usage."""
        assert run_cli([], streams, transport) == 0

        assert 'Usage: docker [OPTIONS] COMMAND [arg...]' in streams.error.getvalue()
        assert transport.requests == []

    def test_unknown_command(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test that unknown commands report on stdout and fall back to help."""
        assert run_cli(['bogus', 'x', 'y'], streams, transport) == 0

        assert streams.output.getvalue() == 'Error: Command not found: bogus\n'
        assert 'Error: Command not found: x' in streams.error.getvalue()

    def test_help_flag(self, streams: Streams) -> None:
        """Test that -h prints the main usage."""
        assert run_cli(['-h'], streams) == 0

        assert 'Commands:' in streams.error.getvalue()

    def test_version_flag(self, streams: Streams) -> None:
        """Test that -v prints the client version and stops."""
        assert run_cli(['-v'], streams) == 0

        assert streams.output.getvalue() == f'Docker version {__version__}\n'

    def test_daemon_unavailable(self, streams: Streams) -> None:
        """Test that the default transport fails with status 1."""
        assert run_cli(['ps'], streams) == 1

        assert streams.error.getvalue().startswith('Error: Cannot connect to the Docker daemon.')

    def test_status_error_sets_exit_code(self, streams: Streams) -> None:
        """Test that a StatusError's status becomes the exit status."""
        transport = RecordingTransport(error=StatusError(125, 'container failed to start'))

        assert run_cli(['start', 'abc'], streams, transport) == 125

        assert streams.error.getvalue() == 'container failed to start\n'

    def test_silent_status_error(self, streams: Streams) -> None:
        """Test that a StatusError without a message only sets the exit status."""
        transport = RecordingTransport(error=StatusError(3))

        assert run_cli(['wait', 'abc'], streams, transport) == 3

        assert streams.error.getvalue() == ''

    def test_end_of_options_before_command(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test that a leading `--` is not taken for the command name."""
        assert run_cli(['--', 'ps'], streams, transport) == 0

        assert streams.output.getvalue() == ''
        assert [request.command for request in transport.requests] == ['ps']

    def test_end_of_options_before_arguments(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test that `--` lets dash-prefixed names through to the daemon."""
        assert run_cli(['rm', '--', '-weird'], streams, transport) == 0

        (request,) = transport.requests
        assert request.command == 'rm'
        assert request.arguments == ['-weird']

    def test_handler_status_passthrough(self, streams: Streams) -> None:
        """Test that an int returned by the transport is the exit status."""
        assert run_cli(['wait', 'abc'], streams, RecordingTransport(result=3)) == 3

    def test_usage_error_exits_two(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test that flag errors exit with status 2."""
        with pytest.raises(SystemExit) as excinfo:
            run_cli(['ps', '--bogus'], streams, transport)

        assert excinfo.value.code == 2
        assert 'Usage: docker ps [OPTIONS]' in streams.error.getvalue()

    def test_multiple_hosts_rejected(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test that two -H flags are an error."""
        assert run_cli(['-H', 'tcp://a:1', '-H', 'tcp://b:2', 'ps'], streams, transport) == 1

        assert 'Please specify only one -H' in streams.error.getvalue()
        assert transport.requests == []

    def test_tls_switches_scheme(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test that --tls reaches the handler as an https context."""
        assert run_cli(['--tls', '-H', 'tcp://daemon:2376', 'info'], streams, transport) == 0

        (context,) = transport.contexts
        assert context.scheme == 'https'
        assert context.protocol == 'tcp'
        assert context.address == 'daemon:2376'

    def test_plain_connection_uses_http(self, streams: Streams, transport: RecordingTransport) -> None:
        """Test the default scheme and socket."""
        assert run_cli(['info'], streams, transport) == 0

        (context,) = transport.contexts
        assert context.scheme == 'http'
        assert (context.protocol, context.address) == ('unix', '/var/run/docker.sock')

    def test_configures_logging(self, mocker: MockerFixture, streams: Streams) -> None:
        """Test that -D turns on verbose logging."""
        configure = mocker.patch.object(main_module, 'configure_logging')

        run_cli(['-D', '-v'], streams)

        configure.assert_called_once_with(verbose=True)


def test_main_exits_with_run_status(mocker: MockerFixture) -> None:
    mocker.patch.object(main_module, 'run', return_value=7)
    mocker.patch.object(main_module.sys, 'argv', ['docker', 'ps'])

    with pytest.raises(SystemExit) as excinfo:
        main()

    assert excinfo.value.code == 7
    main_module.run.assert_called_once_with(['ps'])


def test_run_defaults_to_process_streams(mocker: MockerFixture) -> None:
    out = io.StringIO()
    mocker.patch.object(main_module.sys, 'stdout', out)

    assert run(['-v']) == 0
    assert out.getvalue().startswith('Docker version')
