"""Find the call site that triggered a Ray payload."""
import inspect

LIBRARY_MODULES = frozenset({
    "ray_client",
    "ray_comm",
    "ray_origin",
    "ray_payloads",
    "ray_types",
})

DEFAULT_ORIGIN = {"file": "unknown", "line_number": 1}


def get_origin(skip=LIBRARY_MODULES) -> dict:
    """Return ``{"file", "line_number"}`` of the first frame outside ``skip``.

    Falls back to :data:`DEFAULT_ORIGIN` when frames are unavailable or every
    frame belongs to the library.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            if frame.f_globals.get("__name__") not in skip:
                return {
                    "file": frame.f_code.co_filename or DEFAULT_ORIGIN["file"],
                    "line_number": frame.f_lineno or DEFAULT_ORIGIN["line_number"],
                }
            frame = frame.f_back
    finally:
        del frame
    return dict(DEFAULT_ORIGIN)
