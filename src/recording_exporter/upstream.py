"""
Interfaces of the capture subsystem that the exporter reads from.

Nothing here is implemented by this package: recordings are captured,
stored and published elsewhere. Any object with matching attributes works.
"""
from typing import Iterable, Protocol, Sequence


class ObjectRecord(Protocol):
    """Snapshot of an argument or return value. Only its text form is used."""

    def __str__(self) -> str: ...


class CallRecord(Protocol):
    """One method invocation inside a recording."""

    id: int | None
    owner_class: str | None
    method_name: str | None
    args: Sequence[ObjectRecord]
    return_value: ObjectRecord | None
    thrown: bool
    nanos_duration: int

    def children(self) -> Iterable["CallRecord"]:
        """Child calls in call order. May look them up lazily."""
        ...


class RecordingMetadata(Protocol):
    thread_name: str | None
    recording_started_millis: int | None


class Recording(Protocol):
    """One captured trace with exactly one root call."""

    id: int
    metadata: RecordingMetadata
    root: CallRecord

    def call_count(self) -> int: ...


class RecordingCollection(Protocol):
    """A live set of recordings that grows while capture is running."""

    def published_recordings(self) -> Iterable[Recording]:
        """
        Recordings published at the moment of the call, in stable order.

        A published recording and its call tree never change afterwards.
        """
        ...
