"""In-memory stand-ins for the capture subsystem."""

import threading
from dataclasses import dataclass, field

import pytest


class FakeObjectRecord:
    def __init__(self, text: str):
        self.text = text

    def __str__(self) -> str:
        return self.text


class LazyCallRecord:
    """Call record whose children are looked up by id on demand."""

    def __init__(
        self,
        store: dict[int, "LazyCallRecord"],
        id: int | None,
        owner_class: str | None = "com.example.Service",
        method_name: str | None = "run",
        args: list | None = None,
        return_value=None,
        thrown: bool = False,
        nanos_duration: int = 0,
        child_ids: list[int] | None = None,
    ):
        self._store = store
        self.id = id
        self.owner_class = owner_class
        self.method_name = method_name
        self.args = args or []
        self.return_value = return_value
        self.thrown = thrown
        self.nanos_duration = nanos_duration
        self.child_ids = child_ids or []
        self.resolve_calls = 0

    def children(self):
        self.resolve_calls += 1
        # Generator: nothing is resolved until the caller iterates
        return (self._store[child_id] for child_id in self.child_ids)


@dataclass
class FakeMetadata:
    thread_name: str | None = "main"
    recording_started_millis: int | None = 1_700_000_000_000


@dataclass
class FakeRecording:
    id: int
    root: LazyCallRecord
    metadata: FakeMetadata = field(default_factory=FakeMetadata)
    total_calls: int = 1

    def call_count(self) -> int:
        return self.total_calls


class FakeRecordingCollection:
    """Growing collection; only published recordings are enumerable."""

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: dict[int, FakeRecording] = {}
        self._published: list[FakeRecording] = []

    def add(self, recording: FakeRecording) -> None:
        with self._lock:
            self._pending[recording.id] = recording

    def publish(self, recording_id: int) -> None:
        with self._lock:
            self._published.append(self._pending.pop(recording_id))

    def add_published(self, recording: FakeRecording) -> None:
        self.add(recording)
        self.publish(recording.id)

    def published_recordings(self):
        with self._lock:
            return list(self._published)


class CallTreeBuilder:
    """Builds LazyCallRecord trees sharing one id store."""

    def __init__(self):
        self.store: dict[int, LazyCallRecord] = {}
        self._next_id = 0

    def call(self, *children: LazyCallRecord, **kwargs) -> LazyCallRecord:
        kwargs.setdefault("id", self._next_id)
        self._next_id += 1
        node = LazyCallRecord(self.store, child_ids=[c.id for c in children], **kwargs)
        self.store[node.id] = node
        return node


@pytest.fixture
def calls() -> CallTreeBuilder:
    return CallTreeBuilder()


@pytest.fixture
def collection() -> FakeRecordingCollection:
    return FakeRecordingCollection()


@pytest.fixture
def scenario_recording(calls: CallTreeBuilder) -> FakeRecording:
    """Recording 7 on "main": a root call with one child that threw."""
    child = calls.call(
        owner_class="com.example.Parser",
        method_name="parse",
        args=[FakeObjectRecord("42")],
        thrown=True,
        nanos_duration=1_000_000,
    )
    root = calls.call(
        child,
        owner_class="com.example.App",
        method_name="main",
        return_value=FakeObjectRecord("done"),
        nanos_duration=2_500_000,
    )
    return FakeRecording(id=7, root=root, total_calls=2)


def make_recording(calls: CallTreeBuilder, recording_id: int, nanos: int = 0) -> FakeRecording:
    root = calls.call(method_name=f"entry{recording_id}", nanos_duration=nanos)
    return FakeRecording(id=recording_id, root=root)
