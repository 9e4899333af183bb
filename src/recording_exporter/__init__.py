"""
Export captured method-call recordings to JSON.
"""
from .converter import RecordingConverter
from .exceptions import DocumentFormatError, ExportWriteError, RecordingExportError
from .exporters import AllRecordingsJSONExporter, RecordingJSONExporter
from .models import (
    COMPACT_FORMAT,
    DEFAULT_FORMAT,
    AllRecordingsDocument,
    JsonFormat,
    NodeDocument,
    RecordingDocument,
)
from .reader import load_document

__all__ = [
    "AllRecordingsDocument",
    "AllRecordingsJSONExporter",
    "COMPACT_FORMAT",
    "DEFAULT_FORMAT",
    "DocumentFormatError",
    "ExportWriteError",
    "JsonFormat",
    "NodeDocument",
    "RecordingConverter",
    "RecordingDocument",
    "RecordingExportError",
    "RecordingJSONExporter",
    "load_document",
]
