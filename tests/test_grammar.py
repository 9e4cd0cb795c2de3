# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""Tests for the lexical grammars and prefix-based format detection."""

import pytest

from cssrecolor.grammar import (
    COLOR_GRAMMARS,
    COLOR_PATTERNS,
    COMBINED_GRAMMAR,
    COMBINED_PATTERN,
    HEX_PATTERN,
    HSL_PATTERN,
    HWB_PATTERN,
    LAB_PATTERN,
    LCH_PATTERN,
    OKLAB_PATTERN,
    OKLCH_PATTERN,
    RGB_PATTERN,
    detect_format,
    get_format_example,
    get_format_label,
)
from cssrecolor.schema import CONVERTIBLE_FORMATS, FormatId


class TestFormatGrammars:
    """Each grammar accepts its own notation."""

    @pytest.mark.parametrize("fmt, text", [
        (FormatId.HEX, "#fff"),
        (FormatId.HEX, "#ffff"),
        (FormatId.HEX, "#ffffff"),
        (FormatId.HEX, "#FFFFFFFF"),
        (FormatId.RGB, "rgb(255, 87, 51)"),
        (FormatId.RGB, "rgba(255, 87, 51, 0.5)"),
        (FormatId.RGB, "rgb(255 87 51 / 0.5)"),
        (FormatId.RGB, "RGB(100%, 0%, 0%)"),
        (FormatId.RGB, "rgba(255, 87, 51 / 50%)"),
        (FormatId.HSL, "hsl(11, 100%, 60%)"),
        (FormatId.HSL, "hsla(11deg, 100%, 60%, 0.5)"),
        (FormatId.HSL, "hsl(0.5turn 100% 50% / 50%)"),
        (FormatId.HWB, "hwb(11 20% 0%)"),
        (FormatId.HWB, "hwb(11deg 20% 0% / 0.5)"),
        (FormatId.LAB, "lab(62 58 49)"),
        (FormatId.LAB, "lab(62% -58 49 / 0.5)"),
        (FormatId.LCH, "lch(62 76 40)"),
        (FormatId.LCH, "lch(62% 76 40deg / 0.5)"),
        (FormatId.OKLAB, "oklab(0.68 0.13 0.11)"),
        (FormatId.OKLAB, "oklab(68% -0.13 0.11 / 0.5)"),
        (FormatId.OKLCH, "oklch(0.68 0.17 40)"),
        (FormatId.OKLCH, "oklch(68% 0.17 40deg / 0.5)"),
        (FormatId.OKLCH, "oklch(\n  0.68\t0.17\n  40\n)"),
    ])
    def test_accepts(self, fmt, text):
        assert COLOR_GRAMMARS[fmt].matches(text)

    @pytest.mark.parametrize("fmt, text", [
        (FormatId.HEX, "#ff"),
        (FormatId.HEX, "#12345"),
        (FormatId.HEX, "#1234567"),
        (FormatId.HEX, "#ggg"),
        (FormatId.RGB, "rgb(255, 87)"),
        (FormatId.HWB, "hwb(11, 20%, 0%)"),
        (FormatId.HWB, "hwb(11 20 0)"),
        (FormatId.LAB, "lab(62, 58, 49)"),
        (FormatId.LAB, "lab(62 58 49, 0.5)"),
        (FormatId.LCH, "lch(62 -76 40)"),
        (FormatId.OKLCH, "oklch(0.68, 0.17, 40)"),
    ])
    def test_rejects(self, fmt, text):
        assert not COLOR_GRAMMARS[fmt].matches(text)

    def test_hex_requires_word_boundary(self):
        grammar = COLOR_GRAMMARS[FormatId.HEX]
        assert grammar.find_all("#ffffffg") == []
        assert grammar.find_all("#ff5733zz") == []

    def test_hex_prefers_longest_run(self):
        matches = COLOR_GRAMMARS[FormatId.HEX].find_all("a{color:#ff573380;}")
        assert [m.group(0) for m in matches] == ["#ff573380"]

    def test_grammar_table_is_read_only(self):
        with pytest.raises(TypeError):
            COLOR_GRAMMARS[FormatId.HEX] = COLOR_GRAMMARS[FormatId.RGB]
        with pytest.raises(TypeError):
            COLOR_PATTERNS["hex"] = COMBINED_PATTERN

    def test_every_convertible_format_has_a_grammar(self):
        assert tuple(COLOR_GRAMMARS) == CONVERTIBLE_FORMATS
        assert set(COLOR_PATTERNS) == {fmt.value for fmt in CONVERTIBLE_FORMATS}


class TestPatternConstants:
    """Per-format compiled patterns."""

    @pytest.mark.parametrize("pattern, fmt", [
        (HEX_PATTERN, FormatId.HEX),
        (RGB_PATTERN, FormatId.RGB),
        (HSL_PATTERN, FormatId.HSL),
        (HWB_PATTERN, FormatId.HWB),
        (LAB_PATTERN, FormatId.LAB),
        (LCH_PATTERN, FormatId.LCH),
        (OKLAB_PATTERN, FormatId.OKLAB),
        (OKLCH_PATTERN, FormatId.OKLCH),
    ])
    def test_same_object_as_tables(self, pattern, fmt):
        assert pattern is COLOR_GRAMMARS[fmt].pattern
        assert pattern is COLOR_PATTERNS[fmt.value]

    def test_hex_pattern_finds_literals(self):
        found = [m.group(0) for m in HEX_PATTERN.finditer("a{color:#FFF} b{color:#ff573380}")]
        assert found == ["#FFF", "#ff573380"]

    def test_oklch_pattern_search(self):
        m = OKLCH_PATTERN.search("x: oklch(0.68 0.17 40deg / 50%);")
        assert m.group(0) == "oklch(0.68 0.17 40deg / 50%)"

    def test_lab_pattern_alone_matches_inside_oklab(self):
        m = LAB_PATTERN.search("oklab(0.5 0.1 0.1)")
        assert m.group(0) == "lab(0.5 0.1 0.1)"
        assert m.start() == 2


class TestCombinedGrammar:
    """Single-pass scanning across all formats."""

    DOCUMENT = (
        ".a { color: #fff; }\n"
        ".b { color: rgba(255, 87, 51, 0.5); }\n"
        ".c { color: hsl(11 100% 60%); }\n"
        ".d { color: hwb(11 20% 0%); }\n"
        ".e { color: lab(62 58 49); }\n"
        ".f { color: lch(62 76 40); }\n"
        ".g { color: oklab(0.68 -0.13 0.11); }\n"
        ".h { color: oklch(0.68 0.17 40); }\n"
    )

    def test_finds_every_format_in_order(self):
        found = [fmt for fmt, _ in COMBINED_GRAMMAR.scan(self.DOCUMENT)]
        assert found == list(CONVERTIBLE_FORMATS)

    def test_oklab_is_not_reported_as_lab(self):
        [(fmt, m)] = list(COMBINED_GRAMMAR.scan("oklab(0.5 0.1 -0.1)"))
        assert fmt is FormatId.OKLAB
        assert m.group(0) == "oklab(0.5 0.1 -0.1)"

    def test_adjacent_literals_do_not_overlap(self):
        texts = [m.group(0) for _, m in COMBINED_GRAMMAR.scan("rgb(1,2,3)#fff#000")]
        assert texts == ["rgb(1,2,3)", "#fff", "#000"]

    def test_case_insensitive(self):
        texts = [m.group(0) for _, m in COMBINED_GRAMMAR.scan("COLOR: RGB(1, 2, 3); HSLA(1, 2%, 3%, .5)")]
        assert texts == ["RGB(1, 2, 3)", "HSLA(1, 2%, 3%, .5)"]

    def test_no_colors(self):
        assert list(COMBINED_GRAMMAR.scan(".b{font-size:16px} #header {}")) == []

    def test_search_from_position(self):
        m = COMBINED_GRAMMAR.search("#fff #000", 1)
        assert m.group(0) == "#000"


class TestDetectFormat:

    @pytest.mark.parametrize("text, expected", [
        ("#ff5733", FormatId.HEX),
        ("  #FF5733  ", FormatId.HEX),
        ("rgb(255, 87, 51)", FormatId.RGB),
        ("rgba(255, 87, 51, 0.5)", FormatId.RGB),
        ("hsl(11, 100%, 60%)", FormatId.HSL),
        ("hsla(11, 100%, 60%, 0.5)", FormatId.HSL),
        ("hwb(11 20% 0%)", FormatId.HWB),
        ("lab(62 58 49)", FormatId.LAB),
        ("lch(62 76 40)", FormatId.LCH),
        ("oklab(0.68 0.13 0.11)", FormatId.OKLAB),
        ("oklch(0.68 0.17 40)", FormatId.OKLCH),
        ("OKLCH(0.68 0.17 40)", FormatId.OKLCH),
    ])
    def test_detects(self, text, expected):
        assert detect_format(text) is expected

    @pytest.mark.parametrize("text", ["", "   ", "notacolor", "red", "lab", "lab (1 2 3)", "xyz(1 2 3)"])
    def test_no_format(self, text):
        assert detect_format(text) is None

    def test_case_insensitive(self):
        assert detect_format("RGB(1,2,3)") == detect_format("rgb(1,2,3)")

    def test_syntactic_only(self):
        """Detection does not care whether the numbers are valid."""
        assert detect_format("rgb(1.2.3, banana)") is FormatId.RGB

    def test_non_string(self):
        assert detect_format(None) is None


class TestFormatMetadata:

    def test_label(self):
        assert get_format_label(FormatId.OKLCH) == "OKLCH"
        assert get_format_label("hex") == "HEX"

    def test_label_fallback(self):
        assert get_format_label(FormatId.NAMED) == "NAMED"
        assert get_format_label("cmyk") == "CMYK"

    def test_example(self):
        assert get_format_example(FormatId.RGB) == "rgb(255, 87, 51)"
        assert get_format_example("cmyk") == ""
