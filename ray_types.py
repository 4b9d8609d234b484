"""Coarse runtime type classification for values sent to Ray.

``type_of`` only decides whether a value travels as a JSON string or as a
plain log entry, so the categories are deliberately few.
"""
import datetime
import decimal
import re
import types

# Checked in order; the first match wins.
CLASS_TAGS = [
    ((list, tuple), "array"),
    ((datetime.date, datetime.time), "date"),
    (BaseException, "error"),
    (types.GeneratorType, "generator"),
    (re.Pattern, "regexp"),
]

# bool first: it is an int subclass.
PRIMITIVE_NAMES = [
    (bool, "boolean"),
    ((int, float, complex, decimal.Decimal), "number"),
    (str, "string"),
    ((bytes, bytearray), "bytes"),
]


def type_of(obj, full_class: bool = False) -> str:
    """Return the category of ``obj``.

    One of ``none``, ``array``, ``date``, ``error``, ``generator``,
    ``regexp``, ``function``, ``boolean``, ``number``, ``string``, ``bytes``
    or ``object``.  With ``full_class`` the qualified class name is returned
    instead, e.g. ``builtins.dict``.
    """
    if full_class:
        cls = type(obj)
        return f"{cls.__module__}.{cls.__qualname__}"

    if obj is None:
        return str(obj).lower()

    for classes, tag in CLASS_TAGS:
        if isinstance(obj, classes):
            return tag

    for classes, name in PRIMITIVE_NAMES:
        if isinstance(obj, classes):
            return name

    # Generator functions, classes and bound methods all land here.
    if callable(obj):
        return "function"

    return "object"
