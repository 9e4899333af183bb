"""
Converter from captured recordings to exportable documents.
"""
import logging

from .models import NodeDocument, RecordingDocument
from .render import render_object, render_object_or_none
from .upstream import CallRecord, Recording

logger = logging.getLogger(__name__)

NANOS_PER_MILLI = 1_000_000


class RecordingConverter:
    """Builds RecordingDocument trees from recordings.

    Holds no state, so one instance can be shared by every exporter and thread.
    """

    def convert(self, recording: Recording) -> RecordingDocument:
        """
        Convert one recording, expanding its whole call tree.

        Errors raised by the recording while it is read are re-raised as-is,
        with a note naming the recording.

        Args:
            recording: A published recording

        Returns:
            RecordingDocument with a fully resolved root
        """
        recording_id = recording.id
        try:
            metadata = recording.metadata
            root = recording.root
            total_calls = recording.call_count()

            document = RecordingDocument(
                id=recording_id,
                thread_name=metadata.thread_name,
                start_time_epoch_ms=metadata.recording_started_millis,
                duration_millis=to_millis(root.nanos_duration),
                total_calls=total_calls,
                root=self.convert_node(root),
            )
        except Exception as e:
            e.add_note(f"while converting recording {recording_id}")
            raise

        logger.debug("Converted recording %s with %s calls", document.id, total_calls)
        return document

    def convert_node(self, node: CallRecord) -> NodeDocument:
        """
        Recursively convert a call record and all of its children.

        Children are fully resolved before recursing, so the result never
        contains a partially expanded subtree.
        """
        children = []
        for child in list(node.children()):
            children.append(self.convert_node(child))

        return NodeDocument(
            node_id=node.id,
            owner_class=node.owner_class,
            method_name=node.method_name,
            args=[render_object(arg) for arg in node.args],
            return_value=render_object_or_none(node.return_value),
            thrown=node.thrown,
            duration_nanos=node.nanos_duration,
            children=children,
        )


def to_millis(nanos: int) -> int:
    """Whole milliseconds in a nanosecond duration, truncated."""
    return nanos // NANOS_PER_MILLI
