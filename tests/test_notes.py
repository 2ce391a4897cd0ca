"""Tests for the notes package."""

import math
from fractions import Fraction

import pytest

from notes import (
    Cents,
    InvalidCents,
    InvalidNote,
    InvalidRatio,
    Ratio,
    format_note,
    parse_note,
)


class TestParseNote:
    """Tests for parse_note."""

    @pytest.mark.parametrize("token, expected", [
        ("0.0", 0.0),
        ("0.", 0.0),
        (".0", 0.0),
        ("0.5", 0.5),
        ("1200.", 1200.0),
        ("76.04900", 76.049),
        ("-13.5", -13.5),
        ("+2.25", 2.25),
        ("1.5e3", 1500.0),
        ("2400.000", 2400.0),
    ])
    def test_cents(self, token, expected):
        assert parse_note(token) == Cents(expected)

    @pytest.mark.parametrize("token, num, den", [
        ("1", 1, 1),
        ("2", 2, 1),
        ("1/3", 1, 3),
        ("2/3", 2, 3),
        ("10/8", 5, 4),
        ("2147483647/3", 2147483647, 3),
        ("4294967295/4294967294", 4294967295, 4294967294),
    ])
    def test_ratio(self, token, num, den):
        note = parse_note(token)
        assert note == Ratio(num, den)
        assert (note.numerator, note.denominator) == (num, den)

    @pytest.mark.parametrize("token", ["a1.32", ".", "1.2.3", "1_0.5", "nan.", "1.5 ", "1.-5"])
    def test_invalid_cents(self, token):
        with pytest.raises(InvalidCents) as exc:
            parse_note(token)
        assert exc.value.token == token

    @pytest.mark.parametrize("token", [
        "", "a", "gourd", "inf", "-1/2", "1/-2", "1/0", "0/0", "0", "0/5",
        "1/", "/2", "1/2/3", "1 /2", "1e5", "4294967296", "1/4294967296",
    ])
    def test_invalid_ratio(self, token):
        with pytest.raises(InvalidRatio) as exc:
            parse_note(token)
        assert exc.value.token == token

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_note("x")
        assert issubclass(InvalidCents, InvalidNote)
        assert issubclass(InvalidRatio, InvalidNote)


class TestFormatNote:
    """Tests for format_note."""

    def test_cents_shortest_repr(self):
        assert format_note(Cents(76.04900)) == "76.049"
        assert format_note(Cents(1200)) == "1200.0"
        assert format_note(Cents(-0.5)) == "-0.5"

    def test_cents_exponent_keeps_dot(self):
        assert format_note(Cents(1e16)) == "1.0e+16"
        assert format_note(Cents(1e-7)) == "1.0e-07"

    def test_ratio_always_has_denominator(self):
        assert format_note(Ratio(2)) == "2/1"
        assert format_note(Ratio(25, 16)) == "25/16"
        assert str(Ratio(6, 4)) == "3/2"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            format_note(1.5)

    @pytest.mark.parametrize("note", [
        Cents(0.0),
        Cents(-0.0),
        Cents(76.049),
        Cents(-1234.5678901234),
        Cents(0.1 + 0.2),
        Cents(1e16),
        Cents(5e-324),
        Cents(1.7976931348623157e308),
        Ratio(1),
        Ratio(3, 2),
        Ratio(4294967295, 1),
        Ratio(1, 4294967295),
    ])
    def test_round_trip(self, note):
        back = parse_note(format_note(note))
        assert back == note
        assert type(back) is type(note)
        if isinstance(note, Cents):
            assert math.copysign(1.0, back.value) == math.copysign(1.0, note.value)


class TestNoteValues:
    """Tests for Cents and Ratio construction and equality."""

    def test_ratio_reduced_on_construction(self):
        assert Ratio(10, 8) == Ratio(5, 4)
        assert Ratio(10, 8).numerator == 5
        assert Ratio(10, 8).fraction == Fraction(5, 4)
        assert hash(Ratio(4, 2)) == hash(Ratio(2, 1))

    def test_ratio_from_fraction(self):
        assert Ratio.from_fraction(Fraction(9, 6)) == Ratio(3, 2)
        with pytest.raises(InvalidRatio):
            Ratio.from_fraction(Fraction(-1, 2))
        with pytest.raises(InvalidRatio):
            Ratio.from_fraction(Fraction(0))

    @pytest.mark.parametrize("num, den", [
        (1, 0), (0, 1), (-1, 2), (1, -2), (2 ** 32, 1), (1.5, 1), (True, 1),
    ])
    def test_invalid_ratio_construction(self, num, den):
        with pytest.raises(InvalidRatio):
            Ratio(num, den)

    def test_reduction_brings_components_in_range(self):
        assert Ratio(2 ** 32, 2) == Ratio(2 ** 31, 1)

    def test_nan_never_equal(self):
        nan = Cents(float("nan"))
        assert nan != nan
        assert Cents(float("nan")) != Cents(float("nan"))

    def test_no_cross_variant_normalization(self):
        assert Cents(1200.0) != Ratio(2, 1)
        assert Cents(0.0) != Ratio(1, 1)

    def test_values_are_immutable(self):
        with pytest.raises(AttributeError):
            Ratio(3, 2).numerator = 5
        with pytest.raises(AttributeError):
            Cents(1.0).value = 2.0

    def test_cents_coerces_to_float(self):
        assert Cents(100).value == 100.0
        assert isinstance(Cents(100).value, float)
