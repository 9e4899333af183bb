"""
JSON exporters - write one recording, or every published recording, to disk.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ..converter import RecordingConverter
from ..exceptions import ExportWriteError
from ..models import DEFAULT_FORMAT, AllRecordingsDocument, JsonFormat, NodeDocument, RecordingDocument
from ..upstream import Recording, RecordingCollection

logger = logging.getLogger(__name__)

_END = object()


def encode_json(data: Any, indent: int | None = 2, ensure_ascii: bool = False) -> str:
    """
    Same text as json.dumps(data, indent=indent), for trees of any depth.

    Dicts and lists are walked with an explicit stack; scalars and keys go
    through json.dumps.
    """
    item_separator = "," if indent is not None else ", "
    chunks = []
    stack = []

    def newline(level):
        return "" if indent is None else "\n" + " " * (indent * level)

    def open_value(value, level):
        if isinstance(value, dict):
            if not value:
                chunks.append("{}")
                return
            chunks.append("{")
            stack.append([iter(value.items()), "}", level + 1, True, True])
        elif isinstance(value, (list, tuple)):
            if not value:
                chunks.append("[]")
                return
            chunks.append("[")
            stack.append([iter(value), "]", level + 1, False, True])
        else:
            chunks.append(json.dumps(value, ensure_ascii=ensure_ascii))

    open_value(data, 0)
    while stack:
        frame = stack[-1]
        items, closer, level, is_dict, first = frame
        item = next(items, _END)
        if item is _END:
            stack.pop()
            chunks.append(newline(level - 1) + closer)
            continue

        chunks.append(("" if first else item_separator) + newline(level))
        frame[4] = False
        if is_dict:
            key, item = item
            chunks.append(json.dumps(key, ensure_ascii=ensure_ascii) + ": ")
        open_value(item, level)

    return "".join(chunks)


def render_json(
    document: NodeDocument | RecordingDocument | AllRecordingsDocument,
    json_format: JsonFormat = DEFAULT_FORMAT,
) -> str:
    """Serialize a document with camelCase keys in declaration order."""
    text = encode_json(document.to_json_dict(), json_format.indent, json_format.ensure_ascii)
    if json_format.trailing_newline:
        text += "\n"
    return text


def _target_mode(output_path: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new file."""
    try:
        return output_path.stat().st_mode & 0o777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_document(
    document: NodeDocument | RecordingDocument | AllRecordingsDocument,
    output_path: Path,
    json_format: JsonFormat = DEFAULT_FORMAT,
    recording_id: int | None = None,
) -> None:
    """
    Write a document to output_path, replacing any existing file.

    The content goes to a temporary file in the same directory first and is
    renamed into place, so output_path is either the old file or the complete
    new one. The new file keeps the permissions of the one it replaces.

    Raises:
        ExportWriteError: If the directory or the file cannot be written
    """
    output_path = Path(output_path)
    content = render_json(document, json_format)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
    except OSError as e:
        raise ExportWriteError(output_path, recording_id, str(e)) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.chmod(tmp_path, _target_mode(output_path))
        os.replace(tmp_path, output_path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ExportWriteError(output_path, recording_id, str(e)) from e


class RecordingJSONExporter:
    """Exports a single recording as JSON."""

    def __init__(
        self,
        json_format: JsonFormat = DEFAULT_FORMAT,
        converter: RecordingConverter | None = None,
    ):
        """
        Initialize the exporter.

        Args:
            json_format: Output layout, pretty-printed by default
            converter: Converter to reuse; a new one is created if not given
        """
        self.json_format = json_format
        self.converter = converter or RecordingConverter()

    def export(self, recording: Recording, output_path: Path) -> None:
        """
        Export one recording to a JSON file.

        Args:
            recording: Published recording to export
            output_path: Destination JSON file; parent directories are created
        """
        document = self.converter.convert(recording)
        write_document(document, Path(output_path), self.json_format, recording_id=document.id)
        logger.info("Exported recording %s to %s", document.id, Path(output_path).absolute())


class AllRecordingsJSONExporter:
    """Exports every published recording of a live collection.

    Each call takes a fresh snapshot of the collection and overwrites the
    output, so it can be called repeatedly while capture is still running.
    """

    def __init__(
        self,
        json_format: JsonFormat = DEFAULT_FORMAT,
        converter: RecordingConverter | None = None,
    ):
        self.json_format = json_format
        self.converter = converter or RecordingConverter()

    def export(self, collection: RecordingCollection, output_path: Path) -> AllRecordingsDocument:
        """
        Export all currently published recordings to one JSON file.

        Args:
            collection: Collection to snapshot
            output_path: Destination JSON file; parent directories are created

        Returns:
            The document that was written
        """
        recordings = list(collection.published_recordings())
        documents = [self.converter.convert(recording) for recording in recordings]

        payload = AllRecordingsDocument(count=len(documents), recordings=documents)
        write_document(payload, Path(output_path), self.json_format)

        logger.info("Exported %s recordings to %s", payload.count, Path(output_path).absolute())
        return payload

    def export_each(self, collection: RecordingCollection, output_dir: Path) -> list[Path]:
        """
        Export every published recording to its own file.

        Args:
            collection: Collection to snapshot
            output_dir: Directory receiving recording-<id>.json files

        Returns:
            Paths written, in enumeration order
        """
        output_dir = Path(output_dir)
        created_files = []

        for recording in list(collection.published_recordings()):
            document = self.converter.convert(recording)
            file_path = output_dir / f"recording-{document.id}.json"
            write_document(document, file_path, self.json_format, recording_id=document.id)
            created_files.append(file_path)

        logger.info("Exported %s recording files to %s", len(created_files), output_dir.absolute())
        return created_files
