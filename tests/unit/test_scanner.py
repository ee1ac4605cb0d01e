"""Tests for Scanner state transitions."""

from __future__ import annotations

from kungfu import Error, Ok

from warnscope import Collector, Message, Scanner, Scope, attach, warnf


class TestScanner:
    def test_scans_in_order(self, scripted_reader):
        want = [Message("test-1"), Message("test-2")]
        scanner = Scanner(scripted_reader([Ok(want[0]), Ok(want[1])]))

        for wrr in want:
            assert scanner.advance()
            assert scanner.current is wrr
        assert not scanner.advance()
        assert scanner.error is None

    def test_current_before_advance_is_none(self, scripted_reader):
        scanner = Scanner(scripted_reader([Ok(Message("x"))]))
        assert scanner.current is None

    def test_empty(self, scripted_reader):
        scanner = Scanner(scripted_reader([]))
        assert not scanner.advance()
        assert scanner.error is None
        assert scanner.current is None

    def test_exhaustion_is_terminal(self, scripted_reader):
        reader = scripted_reader([Ok(Message("test-1"))])
        scanner = Scanner(reader)
        assert scanner.advance()
        assert not scanner.advance()
        assert not scanner.advance()
        assert reader.reads == 2

    def test_unexpected_error_is_sticky(self, scripted_reader):
        boom = RuntimeError("test-error")
        reader = scripted_reader([
            Ok(Message("test-1")),
            Ok(Message("test-2")),
            Error(boom),
            Ok(Message("never read")),
        ])
        scanner = Scanner(reader)
        assert scanner.advance()
        assert scanner.advance()
        assert not scanner.advance()
        assert scanner.error is boom

        assert not scanner.advance()
        assert scanner.error is boom
        assert reader.reads == 3

    def test_iteration(self, scripted_reader):
        scanner = Scanner(scripted_reader([Ok(Message("a")), Ok(Message("b"))]))
        assert [w.message for w in scanner] == ["a", "b"]
        assert scanner.error is None

    def test_scanning_a_collector(self):
        collector = Collector()
        scope = attach(Scope(), collector)
        warnf(scope, "this is a warning 1")
        warnf(scope, "this is a warning 2")

        scanner = Scanner(collector)
        got = []
        while scanner.advance():
            got.append(scanner.current.message)
        assert got == ["this is a warning 1", "this is a warning 2"]
        assert scanner.error is None
