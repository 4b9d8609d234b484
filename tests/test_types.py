"""
Tests for runtime type classification.
"""

import datetime
import re
from decimal import Decimal

import pytest

from ray_types import type_of


def _plain():
    return 1


def _gen():
    yield 1


class _Thing:
    def method(self):
        return self


class TestClassTags:
    """Values with a specific class tag."""

    def test_none(self):
        """None maps to its lowercase string form."""
        assert type_of(None) == "none"

    @pytest.mark.parametrize("value", [[], [1, 2], (), (1, "a")])
    def test_sequences_are_arrays(self, value):
        """Lists and tuples are arrays."""
        assert type_of(value) == "array"

    @pytest.mark.parametrize("value", [
        datetime.date(2024, 1, 2),
        datetime.datetime(2024, 1, 2, 3, 4),
        datetime.time(12, 30),
    ])
    def test_dates(self, value):
        """date, datetime and time are dates."""
        assert type_of(value) == "date"

    def test_exception_instance(self):
        """Exception instances are errors."""
        assert type_of(ValueError("boom")) == "error"

    def test_generator_object(self):
        """Running generators keep their own tag."""
        assert type_of(x for x in range(3)) == "generator"
        assert type_of(_gen()) == "generator"

    def test_compiled_pattern(self):
        """Compiled patterns are regexps."""
        assert type_of(re.compile(r"\d+")) == "regexp"

    @pytest.mark.parametrize("value", [
        _plain,
        _gen,
        lambda: None,
        print,
        _Thing,
        _Thing().method,
        ValueError,
    ])
    def test_callables_are_functions(self, value):
        """Functions, generator functions, classes and methods are functions."""
        assert type_of(value) == "function"


class TestPrimitives:
    """Primitive values report their own type name."""

    @pytest.mark.parametrize("value", [True, False])
    def test_booleans(self, value):
        """bool is not mistaken for a number."""
        assert type_of(value) == "boolean"

    @pytest.mark.parametrize("value", [0, -3, 2 ** 80, 1.5, 1j, Decimal("2.5")])
    def test_numbers(self, value):
        """Integers of any size, floats, complex and Decimal are numbers."""
        assert type_of(value) == "number"

    def test_string(self):
        assert type_of("hello") == "string"

    @pytest.mark.parametrize("value", [b"x", bytearray(b"x")])
    def test_bytes(self, value):
        assert type_of(value) == "bytes"


class TestObjects:
    """Everything else is an object."""

    @pytest.mark.parametrize("value", [{}, {"a": 1}, set(), frozenset(), object(), _Thing()])
    def test_objects(self, value):
        """Dicts, sets and plain instances are objects."""
        assert type_of(value) == "object"


class TestFullClass:
    """full_class returns the qualified class name."""

    def test_builtin(self):
        assert type_of({}, full_class=True) == "builtins.dict"

    def test_none(self):
        assert type_of(None, full_class=True) == "builtins.NoneType"

    def test_user_class(self):
        """User classes include their module and nesting."""
        assert type_of(_Thing(), full_class=True).endswith("test_types._Thing")
