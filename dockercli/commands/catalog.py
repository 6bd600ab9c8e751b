"""Usage signatures, descriptions and flags for every docker subcommand."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dockercli.context import ClientContext
from dockercli.errors import RegistryDefinitionError
from dockercli.flags import SubcommandParser, make_flag_set
from dockercli.registry import COMMAND_NAMES, canonical_key


@dataclass(frozen=True)
class FlagSpec:
    """One flag; its parsing behaviour follows the type of ``default``."""

    names: tuple[str, ...]
    default: Any
    help: str
    deprecated: bool = False

    def register(self, parser: SubcommandParser) -> None:
        kwargs: dict[str, Any] = {'help': self.help, 'deprecated': self.deprecated}
        if isinstance(self.default, bool):
            kwargs['action'] = 'store_true'
        elif isinstance(self.default, list):
            kwargs['action'] = 'append'
            kwargs['default'] = list(self.default)
        elif isinstance(self.default, int):
            kwargs['type'] = int
            kwargs['default'] = self.default
        else:
            kwargs['default'] = self.default
        parser.add_flag(*self.names, **kwargs)


@dataclass(frozen=True)
class CommandSpec:
    """What a subcommand accepts and how it describes itself."""

    name: str
    signature: str
    description: str
    summary: str
    flags: tuple[FlagSpec, ...] = field(default_factory=tuple)

    def build_parser(self, context: ClientContext) -> SubcommandParser:
        parser = make_flag_set(context, self.name, self.signature, self.description)
        for flag in self.flags:
            flag.register(parser)
        return parser


def _flag(*names: str, default: Any, help: str, deprecated: bool = False) -> FlagSpec:  # noqa: A002
    return FlagSpec(names=names, default=default, help=help, deprecated=deprecated)


_NO_TRUNC = _flag('--no-trunc', default=False, help="Don't truncate output")

_SPECS = (
    CommandSpec(
        'attach',
        'CONTAINER',
        'Attach to a running container',
        'Attach to a running container',
        (_flag('--no-stdin', default=False, help='Do not attach STDIN'),),
    ),
    CommandSpec(
        'build',
        'PATH | URL | -',
        'Build a new image from the source code at PATH',
        'Build an image from a Dockerfile',
        (
            _flag(
                '-t',
                '--tag',
                default='',
                help='Repository name (and optionally a tag) to be applied to the resulting image in case of success',
            ),
            _flag('-q', '--quiet', default=False, help='Suppress the verbose output generated by the containers'),
            _flag('--no-cache', default=False, help='Do not use cache when building the image'),
            _flag(
                '--force-rm',
                default=False,
                help='Always remove intermediate containers, even after unsuccessful builds',
            ),
        ),
    ),
    CommandSpec(
        'commit',
        'CONTAINER [REPOSITORY[:TAG]]',
        "Create a new image from a container's changes",
        "Create a new image from a container's changes",
        (
            _flag('-m', '--message', default='', help='Commit message'),
            _flag('-a', '--author', default='', help='Author (e.g., "John Hannibal Smith <hannibal@a-team.com>")'),
            _flag('--run', default='', help='Config automatically applied when the image is run', deprecated=True),
        ),
    ),
    CommandSpec(
        'cp',
        'CONTAINER:PATH HOSTPATH',
        'Copy files/folders from the PATH to the HOSTPATH',
        "Copy files/folders from a container's filesystem to the host path",
    ),
    CommandSpec(
        'diff',
        'CONTAINER',
        "Inspect changes on a container's filesystem",
        "Inspect changes on a container's filesystem",
    ),
    CommandSpec(
        'events',
        '',
        'Get real time events from the server',
        'Get real time events from the server',
        (
            _flag('--since', default='', help='Show all events created since timestamp'),
            _flag('--until', default='', help='Stream events until this timestamp'),
        ),
    ),
    CommandSpec(
        'export',
        'CONTAINER',
        'Export the contents of a filesystem as a tar archive to STDOUT',
        'Stream the contents of a container as a tar archive',
    ),
    CommandSpec(
        'help',
        '[COMMAND]',
        'Show usage for the client or for one command',
        'Show usage for a command',
    ),
    CommandSpec(
        'history',
        'IMAGE',
        'Show the history of an image',
        'Show the history of an image',
        (
            _NO_TRUNC,
            _flag('-q', '--quiet', default=False, help='Only show numeric IDs'),
        ),
    ),
    CommandSpec(
        'images',
        '[NAME]',
        'List images',
        'List images',
        (
            _flag('-q', '--quiet', default=False, help='Only show numeric IDs'),
            _flag(
                '-a',
                '--all',
                default=False,
                help='Show all images (by default filter out the intermediate image layers)',
            ),
            _NO_TRUNC,
            _flag('-f', '--filter', default=[], help="Provide filter values (i.e. 'dangling=true')"),
            _flag('--tree', default=False, help='Output graph in tree format', deprecated=True),
            _flag('--viz', default=False, help='Output graph in graphviz format', deprecated=True),
        ),
    ),
    CommandSpec(
        'import',
        'URL|- [REPOSITORY[:TAG]]',
        'Create an empty filesystem image and import the contents of the tarball '
        '(.tar, .tar.gz, .tgz, .bzip, .tar.xz, .txz) into it, then optionally tag it.',
        'Create a new filesystem image from the contents of a tarball',
    ),
    CommandSpec(
        'info',
        '',
        'Display system-wide information',
        'Display system-wide information',
    ),
    CommandSpec(
        'inspect',
        'CONTAINER|IMAGE [CONTAINER|IMAGE...]',
        'Return low-level information on a container or image',
        'Return low-level information on a container',
        (_flag('-f', '--format', default='', help='Format the output using the given template.'),),
    ),
    CommandSpec(
        'kill',
        'CONTAINER [CONTAINER...]',
        'Kill a running container using SIGKILL or a specified signal',
        'Kill a running container',
        (_flag('-s', '--signal', default='KILL', help='Signal to send to the container'),),
    ),
    CommandSpec(
        'load',
        '',
        'Load an image from a tar archive on STDIN',
        'Load an image from a tar archive',
        (_flag('-i', '--input', default='', help='Read from a tar archive file, instead of STDIN'),),
    ),
    CommandSpec(
        'login',
        '[SERVER]',
        'Register or log in to a Docker registry server, if no server is specified '
        '"https://index.docker.io/v1/" is the default.',
        'Register or log in to a Docker registry server',
        (
            _flag('-e', '--email', default='', help='Email'),
            _flag('-u', '--username', default='', help='Username'),
            _flag('-p', '--password', default='', help='Password'),
        ),
    ),
    CommandSpec(
        'logout',
        '[SERVER]',
        'Log out from a Docker registry, if no server is specified "https://index.docker.io/v1/" is the default.',
        'Log out from a Docker registry server',
    ),
    CommandSpec(
        'logs',
        'CONTAINER',
        'Fetch the logs of a container',
        'Fetch the logs of a container',
        (
            _flag('-f', '--follow', default=False, help='Follow log output'),
            _flag('-t', '--timestamps', default=False, help='Show timestamps'),
            _flag(
                '--tail',
                default='all',
                help='Output the specified number of lines at the end of logs (defaults to all logs)',
            ),
        ),
    ),
    CommandSpec(
        'pause',
        'CONTAINER',
        'Pause all processes within a container',
        'Pause all processes within a container',
    ),
    CommandSpec(
        'port',
        'CONTAINER [PRIVATE_PORT[/PROTO]]',
        'List port mappings for the CONTAINER, or lookup the public-facing port that is NAT-ed to the PRIVATE_PORT',
        'Lookup the public-facing port that is NAT-ed to PRIVATE_PORT',
    ),
    CommandSpec(
        'ps',
        '',
        'List containers',
        'List containers',
        (
            _flag('-q', '--quiet', default=False, help='Only display numeric IDs'),
            _flag('-s', '--size', default=False, help='Display sizes'),
            _flag(
                '-a',
                '--all',
                default=False,
                help='Show all containers. Only running containers are shown by default.',
            ),
            _NO_TRUNC,
            _flag(
                '-l',
                '--latest',
                default=False,
                help='Show only the latest created container, include non-running ones.',
            ),
            _flag(
                '--since',
                default='',
                help='Show only containers created since Id or Name, include non-running ones.',
            ),
            _flag(
                '--before',
                default='',
                help='Show only container created before Id or Name, include non-running ones.',
            ),
            _flag('-n', default=-1, help='Show n last created containers, include non-running ones.'),
            _flag('-f', '--filter', default=[], help="Provide filter values (i.e. 'exited=<int>')"),
        ),
    ),
    CommandSpec(
        'pull',
        'NAME[:TAG]',
        'Pull an image or a repository from the registry',
        'Pull an image or a repository from a Docker registry server',
        (
            _flag('-a', '--all-tags', default=False, help='Download all tagged images in the repository'),
            _flag('-t', '--tag', default='', help='Download tagged image in a repository', deprecated=True),
        ),
    ),
    CommandSpec(
        'push',
        'NAME[:TAG]',
        'Push an image or a repository to the registry',
        'Push an image or a repository to a Docker registry server',
    ),
    CommandSpec(
        'restart',
        'CONTAINER [CONTAINER...]',
        'Restart a running container',
        'Restart a running container',
        (
            _flag(
                '-t',
                '--time',
                default=10,
                help='Number of seconds to try to stop for before killing the container. '
                'Once killed it will then be restarted. Default is 10 seconds.',
            ),
        ),
    ),
    CommandSpec(
        'rm',
        'CONTAINER [CONTAINER...]',
        'Remove one or more containers',
        'Remove one or more containers',
        (
            _flag('-v', '--volumes', default=False, help='Remove the volumes associated with the container'),
            _flag('-l', '--link', default=False, help='Remove the specified link and not the underlying container'),
            _flag('-f', '--force', default=False, help='Force the removal of a running container (uses SIGKILL)'),
        ),
    ),
    CommandSpec(
        'rmi',
        'IMAGE [IMAGE...]',
        'Remove one or more images',
        'Remove one or more images',
        (
            _flag('-f', '--force', default=False, help='Force removal of the image'),
            _flag('--no-prune', default=False, help='Do not delete untagged parents'),
        ),
    ),
    CommandSpec(
        'run',
        'IMAGE [COMMAND] [ARG...]',
        'Run a command in a new container',
        'Run a command in a new container',
        (
            _flag(
                '-d',
                '--detach',
                default=False,
                help='Detached mode: run the container in the background and print the new container ID',
            ),
            _flag('-i', '--interactive', default=False, help='Keep STDIN open even if not attached'),
            _flag('-t', '--tty', default=False, help='Allocate a pseudo-TTY'),
            _flag(
                '--rm',
                default=False,
                help='Automatically remove the container when it exits (incompatible with -d)',
            ),
            _flag('--name', default='', help='Assign a name to the container'),
            _flag('-e', '--env', default=[], help='Set environment variables'),
            _flag('-v', '--volume', default=[], help='Bind mount a volume'),
            _flag('-p', '--publish', default=[], help="Publish a container's port to the host"),
            _flag('--link', default=[], help='Add link to another container in the form of name:alias'),
            _flag('-w', '--workdir', default='', help='Working directory inside the container'),
            _flag('-u', '--user', default='', help='Username or UID'),
            _flag('--entrypoint', default='', help='Overwrite the default ENTRYPOINT of the image'),
            _flag('-m', '--memory', default='', help='Memory limit (format: <number><optional unit>)'),
            _flag('--privileged', default=False, help='Give extended privileges to this container'),
        ),
    ),
    CommandSpec(
        'save',
        'IMAGE',
        'Save an image to a tar archive (streamed to STDOUT by default)',
        'Save an image to a tar archive',
        (_flag('-o', '--output', default='', help='Write to a file, instead of STDOUT'),),
    ),
    CommandSpec(
        'search',
        'TERM',
        'Search the Docker Hub for images',
        'Search for an image on the Docker Hub',
        (
            _NO_TRUNC,
            _flag('--automated', default=False, help='Only show automated builds'),
            _flag('-s', '--stars', default=0, help='Only displays with at least x stars'),
        ),
    ),
    CommandSpec(
        'start',
        'CONTAINER [CONTAINER...]',
        'Restart a stopped container',
        'Start a stopped container',
        (
            _flag(
                '-a',
                '--attach',
                default=False,
                help="Attach container's STDOUT and STDERR and forward all signals to the process",
            ),
            _flag('-i', '--interactive', default=False, help="Attach container's STDIN"),
        ),
    ),
    CommandSpec(
        'stop',
        'CONTAINER [CONTAINER...]',
        'Stop a running container by sending SIGTERM and then SIGKILL after a grace period',
        'Stop a running container',
        (
            _flag(
                '-t',
                '--time',
                default=10,
                help='Number of seconds to wait for the container to stop before killing it. Default is 10 seconds.',
            ),
        ),
    ),
    CommandSpec(
        'tag',
        'IMAGE[:TAG] [REGISTRYHOST/][USERNAME/]NAME[:TAG]',
        'Tag an image into a repository',
        'Tag an image into a repository',
        (_flag('-f', '--force', default=False, help='Force'),),
    ),
    CommandSpec(
        'top',
        'CONTAINER [ps OPTIONS]',
        'Display the running processes of a container',
        'Lookup the running processes of a container',
    ),
    CommandSpec(
        'unpause',
        'CONTAINER',
        'Unpause all processes within a container',
        'Unpause a paused container',
    ),
    CommandSpec(
        'version',
        '',
        'Show the Docker version information.',
        'Show the Docker version information',
    ),
    CommandSpec(
        'wait',
        'CONTAINER [CONTAINER...]',
        'Block until a container stops, then print its exit code.',
        'Block until a container stops, then print its exit code',
    ),
)

CATALOG: MappingProxyType[str, CommandSpec] = MappingProxyType({spec.name: spec for spec in _SPECS})


_BY_KEY = {canonical_key(spec.name): spec for spec in _SPECS}


def lookup_spec(token: str) -> CommandSpec | None:
    """Find the spec for ``token`` using the same normalization as dispatch."""
    key = canonical_key(token)
    if key is None:
        return None
    return _BY_KEY.get(key)


if set(CATALOG) != set(COMMAND_NAMES):  # pragma: no cover - catalog is static
    msg = f'command catalog out of sync: {sorted(set(CATALOG) ^ set(COMMAND_NAMES))}'
    raise RegistryDefinitionError(msg)


__all__ = [
    'CATALOG',
    'CommandSpec',
    'FlagSpec',
    'lookup_spec',
]
