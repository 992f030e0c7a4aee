"""Tests for local-time modification labels."""

from __future__ import annotations

import time
import unittest

from longls.formatting.timestamps import format_mtime


def _local_epoch(year: int, month: int, day: int, hour: int, minute: int) -> int:
    return int(time.mktime((year, month, day, hour, minute, 0, 0, 0, -1)))


class FormatMtimeTests(unittest.TestCase):
    def test_renders_month_zero_padded_day_and_24h_clock(self) -> None:
        self.assertEqual(format_mtime(_local_epoch(2024, 6, 5, 14, 32)), "Jun 05 14:32")

    def test_single_digit_hours_and_minutes_are_zero_padded(self) -> None:
        self.assertEqual(format_mtime(_local_epoch(2023, 1, 9, 7, 4)), "Jan 09 07:04")

    def test_year_is_not_part_of_the_label(self) -> None:
        self.assertEqual(
            format_mtime(_local_epoch(2019, 12, 31, 23, 59)),
            format_mtime(_local_epoch(2021, 12, 31, 23, 59)),
        )

    def test_seconds_do_not_change_the_label(self) -> None:
        epoch = _local_epoch(2024, 3, 15, 10, 0)
        self.assertEqual(format_mtime(epoch), format_mtime(epoch + 59))


if __name__ == "__main__":
    unittest.main()
