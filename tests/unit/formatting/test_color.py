"""Tests for name color selection from mode strings."""

from __future__ import annotations

import unittest

from longls.formatting.color import color_for_mode
from longls.theme import DEFAULT_THEME, OCEAN_THEME


class ColorForModeTests(unittest.TestCase):
    def test_directories_are_bold_blue(self) -> None:
        self.assertEqual(color_for_mode("drwxr-xr-x "), "\033[1;34m")
        self.assertEqual(color_for_mode("d---------+"), "\033[1;34m")

    def test_owner_executable_regular_files_are_red(self) -> None:
        self.assertEqual(color_for_mode("-rwxr--r-- "), "\033[0;31m")
        self.assertEqual(color_for_mode("-rwx------@"), "\033[0;31m")

    def test_other_entries_use_neutral_escape(self) -> None:
        for mode_string in ("-rw-r--r-- ", "-rw-r-xr-x ", "-rwsr-xr-x ", "lrwxrwxrwx ", "prw-r--r-- ", ""):
            with self.subTest(mode_string=mode_string):
                self.assertEqual(color_for_mode(mode_string), "\033[0m")

    def test_theme_supplies_the_escapes(self) -> None:
        self.assertEqual(color_for_mode("drwxr-xr-x ", OCEAN_THEME), OCEAN_THEME.directory)
        self.assertEqual(color_for_mode("-rwxr-xr-x ", OCEAN_THEME), OCEAN_THEME.executable)
        self.assertEqual(color_for_mode("-rw-r--r-- ", OCEAN_THEME), OCEAN_THEME.default)
        self.assertNotEqual(OCEAN_THEME.directory, DEFAULT_THEME.directory)


if __name__ == "__main__":
    unittest.main()
