# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""Tests for document scanning and rewriting."""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from cssrecolor import FormatId, detect_colors, scan_and_convert


class TestDetectColors:

    def test_positions(self):
        document = "a {\n  color: #fff;\n}\nb { color: rgb(0 0 0); }"
        first, second = detect_colors(document)

        assert first.original == "#fff"
        assert first.format is FormatId.HEX
        assert (first.line, first.column) == (2, 10)
        assert document[first.start:first.end] == "#fff"

        assert second.original == "rgb(0 0 0)"
        assert second.format is FormatId.RGB
        assert (second.line, second.column) == (4, 12)
        assert document[second.start:second.end] == "rgb(0 0 0)"

    def test_same_line(self):
        matches = detect_colors("#000 #111\n#222")
        assert [(m.line, m.column) for m in matches] == [(1, 1), (1, 6), (2, 1)]

    def test_named_colors_are_not_scanned(self):
        assert detect_colors("a { color: red; background: transparent; }") == []

    def test_matches_are_unconverted(self):
        [match] = detect_colors("#fff")
        assert match.converted == ""
        assert match.converted_start is None


class TestScanAndConvert:

    def test_two_literals_to_oklch(self):
        result = scan_and_convert(".a{color:#ff5733} .b{color:rgb(100,100,100)}", FormatId.OKLCH)
        assert result.stats.to_dict() == {"total": 2, "converted": 2, "failed": 0}
        assert result.converted.count("oklch(") == 2
        assert result.converted.startswith(".a{color:oklch(")

    def test_no_colors(self):
        document = ".b{font-size:16px}"
        result = scan_and_convert(document, FormatId.OKLCH)
        assert result.changes == ()
        assert result.converted == document
        assert not result.changed

    def test_replacement_text(self):
        result = scan_and_convert(".a{color:#ff5733}", "rgb")
        assert result.converted == ".a{color:rgb(255, 87, 51)}"
        [change] = result.changes
        assert change.original == "#ff5733"
        assert change.converted == "rgb(255, 87, 51)"
        assert change.start == 9
        assert change.converted_start == 9

    def test_unparseable_literal_is_kept(self):
        document = "a{color:rgb(1.2.3, 4, 5)} b{color:#fff}"
        result = scan_and_convert(document, "hex")
        assert result.stats.to_dict() == {"total": 2, "converted": 1, "failed": 1}
        assert "rgb(1.2.3, 4, 5)" in result.converted
        assert result.converted.endswith("b{color:#ffffff}")

    def test_identical_render_is_not_counted(self):
        result = scan_and_convert("a{color:#ffffff} b{color:#FFF}", "hex")
        assert result.stats.total == 2
        assert result.stats.converted == 1
        assert result.stats.failed == 0
        assert result.stats.unchanged == 1
        assert result.converted == "a{color:#ffffff} b{color:#ffffff}"
        assert [c.original for c in result.changes] == ["#FFF"]

    def test_case_insensitive(self):
        result = scan_and_convert("A{COLOR:RGB(255, 255, 255)}", "hex")
        assert result.converted == "A{COLOR:#ffffff}"

    def test_surrounding_text_is_preserved(self):
        document = "/* brand */\n:root {\n  --brand: hsl(11 100% 60%);\n  --pad: 4px;\n}\n"
        result = scan_and_convert(document, "hex")
        assert result.converted == "/* brand */\n:root {\n  --brand: #ff5833;\n  --pad: 4px;\n}\n"

    def test_original_is_untouched(self):
        document = "#fff"
        result = scan_and_convert(document, "rgb")
        assert result.original == "#fff"

    def test_to_json(self):
        result = scan_and_convert("#fff", "rgb")
        data = json.loads(result.to_json())
        assert data["converted"] == "rgb(255, 255, 255)"
        assert data["changes"][0]["format"] == "hex"
        assert data["stats"] == {"total": 1, "converted": 1, "failed": 0}


class TestScanProperties:

    DOCUMENT = (
        "body { color: #333; background: rgba(0, 0, 0, 0.5); }\n"
        ".x { border-color: hsl(200 50% 40%); outline: hwb(90 10% 10%); }\n"
        ".y { fill: lab(62 58 49); stroke: lch(62 76 40); }\n"
        ".z { color: oklab(0.68 -0.13 0.11) ; caret-color: oklch(0.68 0.17 40 / 50%); }\n"
    )

    @pytest.mark.parametrize("fmt", ["hex", "rgb", "hsl", "hwb", "lab", "lch", "oklab", "oklch"])
    def test_converted_offsets(self, fmt):
        result = scan_and_convert(self.DOCUMENT, fmt)
        for change in result.changes:
            end = change.converted_start + len(change.converted)
            assert result.converted[change.converted_start:end] == change.converted
            assert self.DOCUMENT[change.start:change.end] == change.original

    @pytest.mark.parametrize("fmt", ["hex", "oklch"])
    def test_length_accounting(self, fmt):
        result = scan_and_convert(self.DOCUMENT, fmt)
        growth = sum(len(c.converted) - c.length for c in result.changes)
        assert len(result.converted) == len(self.DOCUMENT) + growth

    def test_changes_ascend(self):
        result = scan_and_convert(self.DOCUMENT, "rgb")
        starts = [c.start for c in result.changes]
        assert starts == sorted(starts)
        assert result.stats.total == 8

    def test_counters_bounded(self):
        result = scan_and_convert(self.DOCUMENT, "hsl")
        stats = result.stats
        assert stats.converted + stats.failed <= stats.total

    def test_concurrent_calls_are_independent(self):
        documents = [self.DOCUMENT, ".a{color:#ff5733}", "", "#000 #fff"] * 8
        serial = [scan_and_convert(d, "oklch") for d in documents]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(lambda d: scan_and_convert(d, "oklch"), documents))
        assert parallel == serial
