"""
Document models for exported recordings.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeDocument(BaseModel):
    """One call in the exported call tree."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    node_id: int | None = Field(alias="nodeId")
    owner_class: str | None = Field(alias="ownerClass")
    method_name: str | None = Field(alias="methodName")
    args: list[str]
    return_value: str | None = Field(alias="returnValue")
    thrown: bool
    duration_nanos: int = Field(alias="durationNanos")
    children: list["NodeDocument"]

    def to_json_dict(self) -> dict[str, Any]:
        """
        Plain dict of this call and every call below it, keyed by wire names.

        Walks the tree with an explicit stack; each node is dumped on its own
        so pydantic never serializes the nested children.
        """
        data = self._dump_without_children()
        stack = [(self, data)]
        while stack:
            node, node_data = stack.pop()
            for child in node.children:
                child_data = child._dump_without_children()
                node_data["children"].append(child_data)
                stack.append((child, child_data))
        return data

    def _dump_without_children(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True, exclude={"children"})
        data["children"] = []
        return data


class RecordingDocument(BaseModel):
    """Summary of one recording plus its fully expanded call tree."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    # Unknown thread name / start time stay null rather than being omitted
    thread_name: str | None = Field(alias="threadName")
    start_time_epoch_ms: int | None = Field(alias="startTimeEpochMs")
    duration_millis: int = Field(alias="durationMillis")
    total_calls: int = Field(alias="totalCalls")
    root: NodeDocument

    def to_json_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True, exclude={"root"})
        data["root"] = self.root.to_json_dict()
        return data


class AllRecordingsDocument(BaseModel):
    """All published recordings in one file."""

    model_config = ConfigDict(frozen=True)

    count: int
    recordings: list[RecordingDocument]

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "recordings": [recording.to_json_dict() for recording in self.recordings],
        }


class JsonFormat(BaseModel):
    """How documents are laid out on disk. Shared, never mutated."""

    model_config = ConfigDict(frozen=True)

    indent: int | None = 2
    ensure_ascii: bool = False
    trailing_newline: bool = True


DEFAULT_FORMAT = JsonFormat()
COMPACT_FORMAT = JsonFormat(indent=None)
