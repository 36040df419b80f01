"""Run the hash table workload across several sizes and emit JSON Lines.

Usage:
    python3 scripts/sweep.py 1000 10000 100000
    python3 scripts/sweep.py -o results.jsonl 1000 10000
    python3 scripts/sweep.py 1000 10000 | python3 scripts/plot.py
"""

import argparse
import json
import os
import re
import subprocess
import sys
from dataclasses import asdict, dataclass
from typing import List, Optional

WORKLOAD = "hash_table"
LOOKUP_PASSES = 8

ADDITION_RE = re.compile(r"^Addition (?P<ms>\d+)$")
LOOKUP_RE = re.compile(r"^Lookup (?P<ms>\d+) - Count (?P<count>\d+)$")


@dataclass(frozen=True)
class Record:
    workload: str
    n: int
    addition_ms: int
    lookup_ms: int
    count: int

    @property
    def expected_count(self) -> int:
        return LOOKUP_PASSES * self.n


def workload_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "python", WORKLOAD + ".py")


def sh(cmd: List[str], cwd: Optional[str] = None) -> str:
    p = subprocess.run(
        cmd,
        cwd=cwd,
        stdout=subprocess.PIPE,
        text=True,
        check=True,
    )
    return p.stdout


def parse_output(n: int, output: str) -> Record:
    lines = [ln.strip() for ln in output.splitlines() if ln.strip()]
    if len(lines) != 2:
        raise RuntimeError(f"expected 2 lines of output, got {len(lines)}\nfull:\n{output}")
    add = ADDITION_RE.match(lines[0])
    look = LOOKUP_RE.match(lines[1])
    if not add or not look:
        raise RuntimeError(f"unexpected output for n={n}\nfull:\n{output}")
    return Record(
        workload=WORKLOAD,
        n=n,
        addition_ms=int(add.group("ms")),
        lookup_ms=int(look.group("ms")),
        count=int(look.group("count")),
    )


def run_size(n: int) -> Record:
    return parse_output(n, sh([sys.executable, workload_path(), str(n)]))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run the hash table benchmark once per size.")
    ap.add_argument("sizes", type=int, nargs="+", metavar="N", help="table sizes to run")
    ap.add_argument("-o", "--output", help="write records here instead of stdout")
    args = ap.parse_args(argv)

    records = []
    for n in args.sizes:
        rec = run_size(n)
        if rec.count != rec.expected_count:
            print(
                f"ERROR: count mismatch at n={n}: expected {rec.expected_count}, got {rec.count}",
                file=sys.stderr,
            )
            return 1
        records.append(rec)

    lines = [json.dumps(asdict(r)) for r in records]
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        print(f"Wrote {len(lines)} records to {args.output}", file=sys.stderr)
    else:
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
