"""Tests for newest-first ordering and record output."""

from __future__ import annotations

import io
import unittest
from unittest import mock

from longls.entries.types import FormattedRecord
from longls.ranking import print_records, rank_records


class RankRecordsTests(unittest.TestCase):
    def test_newest_modification_first(self) -> None:
        records = [FormattedRecord(100, "a"), FormattedRecord(300, "b"), FormattedRecord(200, "c")]
        self.assertEqual([record.sort_key for record in rank_records(records)], [300, 200, 100])

    def test_ties_keep_insertion_order(self) -> None:
        records = [
            FormattedRecord(5, "first"),
            FormattedRecord(9, "newest"),
            FormattedRecord(5, "second"),
            FormattedRecord(5, "third"),
        ]
        self.assertEqual([record.line for record in rank_records(records)], ["newest", "first", "second", "third"])

    def test_accepts_any_iterable(self) -> None:
        ranked = rank_records(FormattedRecord(key, str(key)) for key in (1, 3, 2))
        self.assertEqual([record.line for record in ranked], ["3", "2", "1"])


class PrintRecordsTests(unittest.TestCase):
    def test_writes_one_line_per_record(self) -> None:
        out = io.StringIO()
        print_records([FormattedRecord(2, "x\033[0m"), FormattedRecord(1, "y\033[0m")], out)
        self.assertEqual(out.getvalue(), "x\033[0m\ny\033[0m\n")

    def test_defaults_to_stdout(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            print_records([FormattedRecord(1, "only")])
        self.assertEqual(stdout.getvalue(), "only\n")

    def test_no_records_writes_nothing(self) -> None:
        out = io.StringIO()
        print_records([], out)
        self.assertEqual(out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
