import io
import os
import tempfile
from contextlib import redirect_stdout
from unittest import TestCase

import plot
from plot import group_records, median, parse_records


class TestParseRecords(TestCase):
    def test_skips_junk(self):
        lines = [
            '{"workload": "hash_table", "n": 10, "addition_ms": 1, "lookup_ms": 2, "count": 80}\n',
            "\n",
            "Addition 4\n",
            "[1, 2]\n",
            '{"n": 20, "addition_ms": 3, "lookup_ms": 5, "count": 160}\n',
        ]
        records = parse_records(lines)
        self.assertEqual([r["n"] for r in records], [10, 20])


class TestMedian(TestCase):
    def test_values(self):
        self.assertEqual(median([]), 0.0)
        self.assertEqual(median([3, 1, 2]), 2)
        self.assertEqual(median([4, 1, 2, 3]), 2.5)


class TestGroupRecords(TestCase):
    def test_median_per_size(self):
        records = [
            {"n": 100, "addition_ms": 4, "lookup_ms": 9},
            {"n": 10, "addition_ms": 1, "lookup_ms": 2},
            {"n": 100, "addition_ms": 6, "lookup_ms": 7},
        ]
        series = group_records(records)
        self.assertEqual(series["addition_ms"], [(10, 1), (100, 5)])
        self.assertEqual(series["lookup_ms"], [(10, 2), (100, 8)])

    def test_empty(self):
        self.assertEqual(group_records([]), {"addition_ms": [], "lookup_ms": []})


class TestMain(TestCase):
    def test_writes_chart(self):
        with tempfile.TemporaryDirectory() as d:
            src = os.path.join(d, "results.jsonl")
            out = os.path.join(d, "chart.png")
            with open(src, "w") as f:
                f.write('{"n": 10, "addition_ms": 0, "lookup_ms": 1, "count": 80}\n')
                f.write('{"n": 10000, "addition_ms": 3, "lookup_ms": 8, "count": 80000}\n')
            buf = io.StringIO()
            with redirect_stdout(buf):
                plot.main([src, "-o", out])
            self.assertTrue(os.path.getsize(out) > 0)
        self.assertIn("Chart saved to", buf.getvalue())

    def test_no_records(self):
        with tempfile.TemporaryDirectory() as d:
            src = os.path.join(d, "empty.jsonl")
            with open(src, "w") as f:
                f.write("not json\n")
            with self.assertRaises(SystemExit) as cm:
                plot.main([src, "-o", os.path.join(d, "x.png")])
        self.assertEqual(cm.exception.code, 1)
