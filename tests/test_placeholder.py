"""
Unit tests for color placeholder scanning and substitution.
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chromasync.blueprint.placeholder import (
    PLACEHOLDER_RE,
    Composite,
    PlainColor,
    resolve_line,
    scan_placeholder,
)
from chromasync.colortable import RGB, ColorFormat, ColorTable

BLUEPRINT = Path("/blueprints/kitty.conf")


def scan(line: str) -> list:
    return [scan_placeholder(m) for m in PLACEHOLDER_RE.finditer(line)]


class TestScanPlaceholder(unittest.TestCase):

    def test_plain_and_composite(self):
        found = scan("fg={foreground} sel={color_01:30:background} {}")
        self.assertEqual(found, [PlainColor("foreground"), Composite("color_01", 30, "background")])

    def test_not_placeholders(self):
        self.assertEqual(scan("{a b} {a:x:b} {a:1} {-x} { a }"), [])

    def test_amount_must_fit_a_byte(self):
        self.assertEqual(scan("{a:255:b}"), [Composite("a", 255, "b")])
        with self.assertRaises(ValueError):
            scan("{a:256:b}")


class TestResolveLine(unittest.TestCase):

    def setUp(self):
        self.colors = ColorTable({
            "foreground": RGB.parse_hex("#000000"),
            "background": RGB.parse_hex("#FFFFFF"),
            "color_01": RGB.parse_hex("#112233"),
        })

    def resolve(self, line: str, fmt: ColorFormat = ColorFormat.HEX_WITH_HASH) -> str:
        return resolve_line(line, self.colors, fmt, BLUEPRINT)

    def test_plain(self):
        self.assertEqual(self.resolve("color1 {color_01}"), "color1 #112233")
        self.assertEqual(self.resolve("color1 {color_01}", ColorFormat.HEX_WITHOUT_HASH), "color1 112233")

    def test_composite_truncates(self):
        self.assertEqual(self.resolve("{foreground:50:background}"), "#7F7F7F")

    def test_every_occurrence_replaced(self):
        self.assertEqual(
            self.resolve("{foreground},{background};{foreground}"),
            "#000000,#FFFFFF;#000000",
        )

    def test_text_without_placeholders_untouched(self):
        line = "% not a directive {not valid} 100% {"
        self.assertEqual(self.resolve(line), line)

    def test_missing_color_warns_and_blanks(self):
        with self.assertLogs("chromasync", level="WARNING") as logs:
            out = self.resolve("a{nope}b {color_01}")
        self.assertEqual(out, "ab #112233")
        self.assertEqual(len(logs.output), 1)
        self.assertIn("`nope`", logs.output[0])
        self.assertIn(str(BLUEPRINT), logs.output[0])

    def test_missing_composite_operand(self):
        with self.assertLogs("chromasync", level="WARNING") as logs:
            out = self.resolve("x{foreground:40:nope}x")
        self.assertEqual(out, "xx")
        self.assertIn("`foreground:40:nope`", logs.output[0])

    def test_amount_above_100_rejected(self):
        with self.assertLogs("chromasync", level="WARNING"):
            self.assertEqual(self.resolve("{foreground:150:background}"), "")
        with self.assertLogs("chromasync", level="WARNING"):
            self.assertEqual(self.resolve("{foreground:300:background}"), "")
        self.assertNotIn("foreground:150:background", self.colors)

    def test_composite_added_to_table(self):
        self.resolve("{color_01:25:background}")
        self.assertIn("color_01:25:background", self.colors)


if __name__ == "__main__":
    unittest.main()
