"""
Exceptions raised while exporting or reading recordings.
"""
from pathlib import Path


class RecordingExportError(Exception):
    """Base class for exporter errors."""


class ExportWriteError(RecordingExportError):
    """The destination file or its directory could not be written."""

    def __init__(self, path: Path, recording_id: int | None = None, reason: str = ""):
        self.path = path
        self.recording_id = recording_id
        target = f"recording {recording_id}" if recording_id is not None else "recordings"
        message = f"Failed to export {target} to {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DocumentFormatError(RecordingExportError):
    """An exported file is not valid recording JSON."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"{path} is not a recording export: {reason}")
