"""
Display helpers for recorded objects.
"""
from .upstream import ObjectRecord


def render_object(obj: ObjectRecord) -> str:
    """Text shown for a recorded argument or return value."""
    return str(obj)


def render_object_or_none(obj: ObjectRecord | None) -> str | None:
    """Like render_object, but a missing record stays None instead of "None"."""
    if obj is None:
        return None
    return render_object(obj)
