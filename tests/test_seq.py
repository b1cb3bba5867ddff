"""Tests for seq: operand handling, formatting and errors."""

from __future__ import annotations

from decimal import Decimal

import pytest

from textutils.seq import SeqError, main, parse_args, sequence


class TestSequence:
    """Verify the generated values."""

    def test_decimal_steps_reach_last(self) -> None:
        """0.1 steps land exactly on LAST without float drift."""
        values = list(sequence(Decimal("0"), Decimal("0.1"), Decimal("0.3")))
        assert values == [Decimal("0"), Decimal("0.1"), Decimal("0.2"), Decimal("0.3")]

    def test_counts_down_with_negative_increment(self) -> None:
        """A negative increment walks down to LAST."""
        assert list(sequence(Decimal(3), Decimal(-1), Decimal(1))) == [3, 2, 1]

    def test_wrong_direction_is_empty(self) -> None:
        """A positive increment with LAST below FIRST yields nothing."""
        assert list(sequence(Decimal(5), Decimal(1), Decimal(1))) == []

    def test_zero_increment(self) -> None:
        """A zero increment is an error."""
        with pytest.raises(SeqError):
            list(sequence(Decimal(1), Decimal(0), Decimal(3)))


class TestParseArgs:
    """Verify option and operand parsing."""

    def test_negative_numbers_are_operands(self) -> None:
        """Negative numbers are not mistaken for options."""
        options, operands = parse_args(["-s", ",", "-3", "-1"])
        assert options["separator"] == ","
        assert operands == [Decimal(-3), Decimal(1), Decimal(-1)]

    def test_single_operand_defaults(self) -> None:
        """LAST alone counts from 1 in steps of 1."""
        _, operands = parse_args(["4"])
        assert operands == [Decimal(1), Decimal(1), Decimal(4)]

    @pytest.mark.parametrize("argv", [[], ["1", "2", "3", "4"], ["abc"], ["nan"], ["-x", "3"]])
    def test_invalid(self, argv) -> None:
        """Missing, extra, non-numeric operands and unknown options fail."""
        with pytest.raises(SeqError):
            parse_args(argv)


class TestMain:
    """Verify printed output."""

    def test_simple(self, run_tool) -> None:
        """Numbers are newline separated with a final newline."""
        code, out, _ = run_tool(main, ["3"])
        assert code == 0
        assert out == b"1\n2\n3\n"

    def test_separator(self, run_tool) -> None:
        """-s replaces the separator but not the terminator."""
        _, out, _ = run_tool(main, ["-s", ", ", "2", "4"])
        assert out == b"2, 3, 4\n"

    def test_fraction_digits_follow_operands(self, run_tool) -> None:
        """Output uses as many decimals as the most precise operand."""
        _, out, _ = run_tool(main, ["1", "0.25", "1.5"])
        assert out == b"1.00\n1.25\n1.50\n"

    def test_equal_width(self, run_tool) -> None:
        """-w pads with leading zeros."""
        _, out, _ = run_tool(main, ["-w", "8", "10"])
        assert out == b"08\n09\n10\n"

    def test_format(self, run_tool) -> None:
        """-f applies a printf-style format."""
        _, out, _ = run_tool(main, ["-f", "%.1f", "1", "2"])
        assert out == b"1.0\n2.0\n"

    def test_empty_sequence_prints_nothing(self, run_tool) -> None:
        """An omitted increment stays 1 even when counting down."""
        code, out, _ = run_tool(main, ["5", "1"])
        assert code == 0
        assert out == b""

    def test_zero_increment_fails(self, run_tool) -> None:
        """Errors go to stderr with status 1."""
        code, out, err = run_tool(main, ["1", "0", "3"])
        assert code == 1
        assert out == b""
        assert b"seq: invalid Zero increment" in err

    def test_bad_format_fails(self, run_tool) -> None:
        """A format that cannot take a number is reported."""
        code, _, err = run_tool(main, ["-f", "%s %s", "2"])
        assert code == 1
        assert b"invalid format string" in err
