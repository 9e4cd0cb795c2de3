# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""Tests for the shared value objects."""

import dataclasses

import pytest

from cssrecolor.schema import (
    COLOR_FORMATS,
    CONVERTIBLE_FORMATS,
    AlphaFormat,
    ColorMatch,
    ConversionOptions,
    FormatId,
    ProcessingResult,
    ProcessingStats,
)


class TestFormatId:

    @pytest.mark.parametrize("value, expected", [
        (FormatId.HEX, FormatId.HEX),
        ("oklch", FormatId.OKLCH),
        (" OKLCH ", FormatId.OKLCH),
        ("named", FormatId.NAMED),
        ("cmyk", None),
        (None, None),
        (42, None),
    ])
    def test_lookup(self, value, expected):
        assert FormatId.lookup(value) is expected

    def test_every_convertible_format_is_described(self):
        assert tuple(d.id for d in COLOR_FORMATS) == CONVERTIBLE_FORMATS
        assert FormatId.NAMED not in CONVERTIBLE_FORMATS

    def test_definition_to_dict(self):
        assert COLOR_FORMATS[0].to_dict() == {
            "id": "hex",
            "label": "HEX",
            "example": "#ff5733",
            "description": "Hexadecimal color notation",
        }


class TestConversionOptions:

    def test_defaults(self):
        options = ConversionOptions()
        assert options.precision == 2
        assert options.alpha_format is AlphaFormat.DECIMAL

    def test_string_alpha_format(self):
        assert ConversionOptions(alpha_format="percentage").alpha_format is AlphaFormat.PERCENTAGE

    @pytest.mark.parametrize("precision", [-1, 1.5, "2", True])
    def test_invalid_precision(self, precision):
        with pytest.raises(ValueError):
            ConversionOptions(precision=precision)

    def test_invalid_alpha_format(self):
        with pytest.raises(ValueError, match="Alpha format"):
            ConversionOptions(alpha_format="fraction")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ConversionOptions().precision = 3

    def test_dict_roundtrip(self):
        options = ConversionOptions(precision=4, alpha_format=AlphaFormat.PRESERVE)
        assert options.to_dict() == {"precision": 4, "alpha_format": "preserve"}
        assert ConversionOptions.from_dict(options.to_dict()) == options
        assert ConversionOptions.from_dict({}) == ConversionOptions()


class TestColorMatch:

    def test_end(self):
        match = ColorMatch(original="#fff", start=10, length=4, line=1, column=11)
        assert match.end == 14

    def test_with_conversion_copies(self):
        match = ColorMatch(original="#fff", start=10, length=4, line=1, column=11, format=FormatId.HEX)
        converted = match.with_conversion("rgb(255, 255, 255)", 12)
        assert converted.converted == "rgb(255, 255, 255)"
        assert converted.converted_start == 12
        assert converted.start == 10
        assert match.converted == ""

    def test_to_dict(self):
        match = ColorMatch(original="#fff", start=0, length=4, line=1, column=1)
        assert match.to_dict()["format"] is None


class TestProcessingStats:

    def test_unchanged(self):
        assert ProcessingStats(total=5, converted=2, failed=1).unchanged == 2

    def test_negative(self):
        with pytest.raises(ValueError, match="negative"):
            ProcessingStats(total=1, converted=-1)

    def test_overcount(self):
        with pytest.raises(ValueError, match="exceeds total"):
            ProcessingStats(total=1, converted=1, failed=1)


class TestProcessingResult:

    def test_defaults(self):
        result = ProcessingResult(original="x", converted="x")
        assert result.changes == ()
        assert result.stats == ProcessingStats()
        assert not result.changed
