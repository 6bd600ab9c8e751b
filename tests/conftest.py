import io
from dataclasses import dataclass, field

import pytest

from dockercli.context import ClientContext, new_client_context
from dockercli.models import CommandRequest


@dataclass
class Streams:
    input: io.StringIO = field(default_factory=io.StringIO)
    output: io.StringIO = field(default_factory=io.StringIO)
    error: io.StringIO = field(default_factory=io.StringIO)


@dataclass(eq=False)
class RecordingHandler:
    """Handler stand-in that remembers the arguments it was called with."""

    name: str
    result: int | None = None
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, args) -> int | None:  # noqa: ANN001
        self.calls.append(list(args))
        return self.result


@dataclass(eq=False)
class RecordingTransport:
    """Transport stand-in that captures every forwarded request."""

    result: int | None = None
    error: Exception | None = None
    requests: list[CommandRequest] = field(default_factory=list)
    contexts: list[ClientContext] = field(default_factory=list)

    def __call__(self, context: ClientContext, request: CommandRequest) -> int | None:
        self.contexts.append(context)
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def streams() -> Streams:
    return Streams()


@pytest.fixture
def context(streams: Streams) -> ClientContext:
    return new_client_context(
        streams.input,
        streams.output,
        streams.error,
        'unix',
        '/var/run/docker.sock',
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()

