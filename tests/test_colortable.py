"""
Unit tests for the color table (mixed-color cache) and colorscheme loading.
"""
import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chromasync.colortable import (
    COLOR_NAMES,
    RGB,
    ColorTable,
    composite_key,
    load_colorscheme,
    parse_colorscheme,
    save_colorscheme,
)
from chromasync.errors import ColorschemeError


def colorscheme_json(**overrides: str) -> dict:
    data = {name: "#000000" for name in COLOR_NAMES}
    data.update(overrides)
    return data


class TestColorTable(unittest.TestCase):

    def setUp(self):
        self.table = ColorTable({
            "foreground": RGB(0, 0, 0),
            "background": RGB(255, 255, 255),
        })

    def test_get_exact_key(self):
        self.assertEqual(self.table.get("foreground"), RGB(0, 0, 0))
        self.assertIsNone(self.table.get("Foreground"))
        self.assertIsNone(self.table.get("nope"))

    def test_composite_is_cached(self):
        first = self.table.get_composite("foreground", 50, "background")
        second = self.table.get_composite("foreground", 50, "background")
        self.assertEqual(first, RGB(127, 127, 127))
        self.assertIs(first, second)
        self.assertIn(composite_key("foreground", 50, "background"), self.table)
        self.assertEqual(len(self.table), 3)

    def test_composite_is_directional(self):
        ab = self.table.get_composite("foreground", 70, "background")
        ba = self.table.get_composite("background", 70, "foreground")
        self.assertEqual(ab, RGB(76, 76, 76))
        self.assertEqual(ba, RGB(178, 178, 178))
        self.assertIn("foreground:70:background", self.table)
        self.assertIn("background:70:foreground", self.table)

    def test_missing_operand_not_cached(self):
        self.assertIsNone(self.table.get_composite("foreground", 50, "nope"))
        self.assertIsNone(self.table.get_composite("nope", 50, "background"))
        self.assertEqual(len(self.table), 2)

    def test_base_colors_excludes_composites(self):
        self.table.get_composite("foreground", 20, "background")
        self.assertEqual(set(self.table.base_colors()), {"foreground", "background"})


class TestColorschemeLoader(unittest.TestCase):

    def test_correct_colorscheme(self):
        table = parse_colorscheme(json.dumps(colorscheme_json(background="#112233")))
        self.assertEqual(len(table), len(COLOR_NAMES))
        self.assertEqual(table.get("background"), RGB(0x11, 0x22, 0x33))

    def test_missing_background(self):
        data = colorscheme_json()
        del data["background"]
        with self.assertRaisesRegex(ColorschemeError, "Missing required color `background`"):
            parse_colorscheme(json.dumps(data))

    def test_two_backgrounds(self):
        text = '{"background": "#000000", ' + json.dumps(colorscheme_json())[1:]
        with self.assertRaisesRegex(ColorschemeError, "already defined"):
            parse_colorscheme(text)

    def test_wrong_name(self):
        data = colorscheme_json(wrong_color_name="#000000")
        with self.assertRaisesRegex(ColorschemeError, "Invalid color name `wrong_color_name`"):
            parse_colorscheme(json.dumps(data))

    def test_invalid_hex(self):
        with self.assertRaises(ColorschemeError):
            parse_colorscheme(json.dumps(colorscheme_json(cursor="#12345")))

    def test_non_string_value(self):
        data = colorscheme_json()
        data["cursor"] = 123
        with self.assertRaises(ColorschemeError):
            parse_colorscheme(json.dumps(data))

    def test_not_an_object(self):
        with self.assertRaises(ColorschemeError):
            parse_colorscheme("[]")
        with self.assertRaises(ColorschemeError):
            parse_colorscheme("{not json")

    def test_load_and_save_round_trip(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "dark.json"
            src.write_text(json.dumps(colorscheme_json(foreground="#a0b0c0")), encoding="utf-8")
            table = load_colorscheme(src)
            table.get_composite("foreground", 50, "background")

            saved = save_colorscheme(table, Path(tmp) / "cache" / "current.json")
            data = json.loads(saved.read_text(encoding="utf-8"))
            self.assertEqual(set(data), set(COLOR_NAMES))
            self.assertEqual(data["foreground"], "#A0B0C0")
            self.assertEqual(load_colorscheme(saved).get("foreground"), RGB(0xA0, 0xB0, 0xC0))

    def test_load_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ColorschemeError) as ctx:
                load_colorscheme(Path(tmp) / "missing.json")
            self.assertEqual(ctx.exception.path, Path(tmp) / "missing.json")


if __name__ == "__main__":
    unittest.main()
