"""
Exporters for recording documents.
"""
from .json_exporter import AllRecordingsJSONExporter, RecordingJSONExporter, render_json, write_document

__all__ = ["AllRecordingsJSONExporter", "RecordingJSONExporter", "render_json", "write_document"]
