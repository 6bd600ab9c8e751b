import argparse
import os
from collections.abc import Sequence
from pathlib import Path

from dockercli.errors import HostParseError
from dockercli.logging import get_logger
from dockercli.models import GlobalOptions

logger = get_logger(__name__)

DEFAULT_UNIX_SOCKET = '/var/run/docker.sock'
DEFAULT_TCP_HOST = '127.0.0.1'
DEFAULT_TCP_PORT = 2375

DEFAULT_CA_FILE = 'ca.pem'
DEFAULT_CERT_FILE = 'cert.pem'
DEFAULT_KEY_FILE = 'key.pem'


def default_cert_path() -> Path:
    """Directory holding the client TLS material (``$DOCKER_CERT_PATH`` or ``~/.docker``)."""
    cert_path = os.environ.get('DOCKER_CERT_PATH')
    if cert_path:
        return Path(cert_path)
    return Path(os.environ.get('HOME', '')) / '.docker'


def create_parser() -> argparse.ArgumentParser:
    """Create the parser for options that precede the subcommand."""
    cert_path = default_cert_path()
    parser = argparse.ArgumentParser(
        prog='docker',
        description='A self-sufficient runtime for linux containers.',
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        '-H',
        '--host',
        dest='hosts',
        action='append',
        default=[],
        help='The socket to connect to, e.g. tcp://host:port or unix://path/to/socket',
    )
    parser.add_argument(
        '-D',
        '--debug',
        action='store_true',
        help='Enable debug mode',
    )
    parser.add_argument(
        '--tls',
        action='store_true',
        help='Use TLS; implied by --tlsverify',
    )
    parser.add_argument(
        '--tlsverify',
        action='store_true',
        default=bool(os.environ.get('DOCKER_TLS_VERIFY')),
        help='Use TLS and verify the remote daemon',
    )
    parser.add_argument(
        '--tlscacert',
        type=Path,
        default=cert_path / DEFAULT_CA_FILE,
        help='Trust only remotes providing a certificate signed by the CA given here',
    )
    parser.add_argument(
        '--tlscert',
        type=Path,
        default=cert_path / DEFAULT_CERT_FILE,
        help='Path to TLS certificate file',
    )
    parser.add_argument(
        '--tlskey',
        type=Path,
        default=cert_path / DEFAULT_KEY_FILE,
        help='Path to TLS key file',
    )
    parser.add_argument(
        '-v',
        '--version',
        dest='show_version',
        action='store_true',
        help='Print version information and quit',
    )
    parser.add_argument(
        '-h',
        '--help',
        dest='show_help',
        action='store_true',
        help='Print usage',
    )
    parser.add_argument(
        'command_args',
        nargs=argparse.REMAINDER,
        help='Command and its arguments',
    )
    return parser


def parse_args_to_model(argv: Sequence[str]) -> tuple[GlobalOptions, list[str]]:
    """Parse global options into a typed model; the rest belongs to the subcommand."""
    parser = create_parser()
    raw_args = parser.parse_args(list(argv))

    options = GlobalOptions(
        hosts=raw_args.hosts,
        debug=raw_args.debug,
        tls=raw_args.tls,
        tlsverify=raw_args.tlsverify,
        tlscacert=raw_args.tlscacert,
        tlscert=raw_args.tlscert,
        tlskey=raw_args.tlskey,
        show_help=raw_args.show_help,
        show_version=raw_args.show_version,
    )
    command_args = list(raw_args.command_args)
    if command_args[:1] == ['--']:
        command_args = command_args[1:]
    return options, command_args


def _parse_tcp_address(address: str, original: str) -> str:
    host, sep, port = address.partition(':')
    if ':' in port:
        msg = f'Invalid bind address format: {original}'
        raise HostParseError(msg)

    host = host or DEFAULT_TCP_HOST
    if not sep or not port:
        return f'{host}:{DEFAULT_TCP_PORT}'
    try:
        port_number = int(port)
    except ValueError as exc:
        msg = f'Invalid bind address format: {original}'
        raise HostParseError(msg) from exc
    return f'{host}:{port_number}'


def parse_host(value: str) -> tuple[str, str]:
    """Split a daemon address into protocol and address.

    ``unix://path``, ``tcp://host:port``, ``fd://name`` and bare ``host:port``
    are accepted; an empty value means the default unix socket.
    """
    value = value.strip()
    if not value:
        return 'unix', DEFAULT_UNIX_SOCKET
    if value.startswith('unix://'):
        return 'unix', value[len('unix://') :] or DEFAULT_UNIX_SOCKET
    if value.startswith('fd://'):
        return 'fd', value[len('fd://') :]
    if value.startswith('tcp://'):
        return 'tcp', _parse_tcp_address(value[len('tcp://') :], value)
    if '://' in value:
        msg = f'Invalid bind address format: {value}'
        raise HostParseError(msg)
    return 'tcp', _parse_tcp_address(value, value)


def resolve_host(options: GlobalOptions) -> tuple[str, str]:
    """Pick the daemon address from ``-H`` or ``$DOCKER_HOST``."""
    hosts = options.hosts
    if not hosts:
        hosts = [os.environ.get('DOCKER_HOST', '')]
    if len(hosts) > 1:
        msg = 'Please specify only one -H'
        raise HostParseError(msg)

    protocol, address = parse_host(hosts[0])
    logger.debug('resolved_daemon_host', protocol=protocol, address=address)
    return protocol, address
