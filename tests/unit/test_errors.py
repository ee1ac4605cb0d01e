"""Tests for the error sentinels and aggregate containment."""

from __future__ import annotations

from warnscope import CLOSED, EXHAUSTED, DeliveryError, Exhausted, StreamClosedError, contains
from warnscope._errors import join


class TestSentinels:
    def test_closed_and_exhausted_are_distinct(self):
        assert CLOSED != EXHAUSTED
        assert not isinstance(CLOSED, Exhausted)
        assert not isinstance(EXHAUSTED, StreamClosedError)

    def test_instances_compare_by_type(self):
        assert StreamClosedError() == CLOSED
        assert Exhausted() == EXHAUSTED
        assert StreamClosedError() != RuntimeError("warning stream is closed")
        assert len({StreamClosedError(), StreamClosedError(), Exhausted()}) == 2

    def test_closed_message(self):
        assert str(CLOSED) == "warning stream is closed"


class TestJoin:
    def test_empty_is_none(self):
        assert join([]) is None

    def test_keeps_originals_in_order(self):
        a, b = RuntimeError("a"), KeyError("b")
        err = join([a, b])
        assert isinstance(err, DeliveryError)
        assert list(err.exceptions) == [a, b]
        assert "2 warning write(s) failed" in str(err)


class TestContains:
    def test_identity_match(self):
        a = RuntimeError("a")
        assert contains(join([a]), a)
        assert not contains(join([a]), RuntimeError("a"))

    def test_type_match(self):
        assert contains(join([CLOSED]), StreamClosedError)
        assert not contains(join([CLOSED]), Exhausted)

    def test_nested_groups(self):
        inner = ValueError("deep")
        err = join([RuntimeError("a"), join([inner])])
        assert contains(err, inner)

    def test_plain_error(self):
        assert contains(CLOSED, CLOSED)
        assert not contains(None, CLOSED)

    def test_fresh_closed_matches_reference(self):
        assert contains(join([StreamClosedError()]), CLOSED)
        assert not contains(join([Exhausted()]), CLOSED)

    def test_split_keeps_delivery_error_type(self):
        a, b = RuntimeError("a"), ValueError("b")
        matched, rest = join([a, b]).split(ValueError)
        assert isinstance(matched, DeliveryError)
        assert list(matched.exceptions) == [b]
        assert list(rest.exceptions) == [a]
