"""
Reader for exported recording files.
"""
import json
from pathlib import Path

from pydantic import ValidationError

from .exceptions import DocumentFormatError
from .models import AllRecordingsDocument, RecordingDocument


def load_document(path: Path) -> RecordingDocument | AllRecordingsDocument:
    """
    Load a file written by one of the JSON exporters.

    Files with a "recordings" key are read as AllRecordingsDocument,
    anything else as a single RecordingDocument.

    Raises:
        DocumentFormatError: If the file is not valid JSON of either shape
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise DocumentFormatError(path, f"not UTF-8 text ({e})") from e
    except json.JSONDecodeError as e:
        raise DocumentFormatError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise DocumentFormatError(path, f"expected an object, got {type(data).__name__}")

    try:
        if "recordings" in data:
            return AllRecordingsDocument.model_validate(data)
        return RecordingDocument.model_validate(data)
    except ValidationError as e:
        raise DocumentFormatError(path, str(e)) from e
