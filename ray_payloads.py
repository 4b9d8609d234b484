"""Payload builders for the Ray desktop app.

Every builder returns a small ``{"type": ..., "content": ...}`` dict.  The
dispatcher attaches the origin later, so builders stay free of side effects.
"""
import datetime
import json
import math

from ray_types import type_of

BAN = "🕶"
CHARLES = "🎶 🎹 🎷 🕺"

# Categories that travel as a JSON string instead of a log entry.
JSON_TYPES = ("object", "array")

# -------------------------------------------------------------
# Serialization
# -------------------------------------------------------------

def _json_default(obj):
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

def log_default(obj):
    """Fallback for log values: dates as ISO strings, anything else as repr."""
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    return repr(obj)

def jsonable(obj, default, _active=None):
    """Return ``obj`` as plain JSON data, with ``default`` for unknown types.

    Non-finite floats become ``None``.  Raises ``ValueError`` for cyclic
    structures.
    """
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if obj is None or isinstance(obj, (str, int)):
        return obj

    active = set() if _active is None else _active
    if id(obj) in active:
        raise ValueError("Circular reference detected")
    active.add(id(obj))
    try:
        if isinstance(obj, dict):
            return {key: jsonable(value, default, active) for key, value in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [jsonable(value, default, active) for value in obj]
        return jsonable(default(obj), default, active)
    finally:
        active.discard(id(obj))

def to_json(value) -> str:
    """Serialize ``value`` compactly.

    Raises ``ValueError`` for cyclic structures and ``TypeError`` for values
    that have no JSON form.
    """
    data = jsonable(value, _json_default)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)

# -------------------------------------------------------------
# Builders
# -------------------------------------------------------------

def color_payload(color):
    return {"type": "color", "content": {"color": color}}

def hide_payload():
    return {"type": "hide", "content": []}

def log_payload(*values):
    return {"type": "log", "content": {"values": list(values)}}

def new_screen_payload(name):
    return {"type": "new_screen", "content": {"name": name}}

def remove_payload():
    return {"type": "remove", "content": []}

def size_payload(size):
    return {"type": "size", "content": {"size": size}}

def notify_payload(value):
    return {"type": "notify", "content": {"value": value}}

def custom_payload(content, label):
    return {"type": "custom", "content": {"content": content, "label": label}}

def json_payload(value):
    return {"type": "json_string", "content": {"value": to_json(value)}}

def make_payload(value):
    """Pick a JSON payload for objects and arrays, a log payload otherwise."""
    if type_of(value) in JSON_TYPES:
        return json_payload(value)
    return log_payload(value)
