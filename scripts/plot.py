"""Plot hash table benchmark results as phase time against table size.

Usage:
    python3 scripts/sweep.py 1000 10000 100000 | python3 scripts/plot.py
    python3 scripts/plot.py results.jsonl
    python3 scripts/plot.py results.jsonl -o chart.png
"""

import json
import sys
from collections import defaultdict

PHASES = [("addition_ms", "Addition"), ("lookup_ms", "Lookup")]


def parse_records(source):
    records = []
    for line in source:
        line = line.strip()
        if not line:
            continue
        try:
            rec = json.loads(line)
        except json.JSONDecodeError:
            continue
        if isinstance(rec, dict) and "n" in rec:
            records.append(rec)
    return records


def median(values):
    s = sorted(values)
    n = len(s)
    if n == 0:
        return 0.0
    if n % 2 == 1:
        return s[n // 2]
    return (s[n // 2 - 1] + s[n // 2]) / 2


def group_records(records):
    """Reduce records to {phase_key: [(n, median_ms), ...]} sorted by n."""
    grouped = defaultdict(lambda: defaultdict(list))
    for r in records:
        for key, _ in PHASES:
            if key in r:
                grouped[key][r["n"]].append(r[key])

    series = {}
    for key, _ in PHASES:
        by_n = grouped.get(key, {})
        series[key] = [(n, median(by_n[n])) for n in sorted(by_n)]
    return series


def main(argv=None):
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        import matplotlib.ticker as ticker
    except ImportError:
        print("ERROR: matplotlib is required.  pip install matplotlib", file=sys.stderr)
        sys.exit(1)

    # --- parse args ---
    out_path = None
    input_file = None
    args = sys.argv[1:] if argv is None else argv
    i = 0
    while i < len(args):
        if args[i] in ("-o", "--output") and i + 1 < len(args):
            out_path = args[i + 1]
            i += 2
        else:
            input_file = args[i]
            i += 1

    # --- read data ---
    if input_file:
        with open(input_file) as f:
            records = parse_records(f)
    elif not sys.stdin.isatty():
        records = parse_records(sys.stdin)
    else:
        print("Usage: python3 scripts/sweep.py N [N ...] | python3 scripts/plot.py [-o chart.png]", file=sys.stderr)
        sys.exit(1)

    if not records:
        print("No benchmark records found.", file=sys.stderr)
        sys.exit(1)

    series = group_records(records)

    COLORS = {"addition_ms": "#3b82f6", "lookup_ms": "#ef4444"}

    fig, ax = plt.subplots(figsize=(8, 6))
    fig.suptitle("dict churn: insert/remove/reinsert vs 8x lookup (lower is better)", fontsize=14, fontweight="bold")

    for key, label in PHASES:
        points = series[key]
        if not points:
            continue
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        ax.plot(xs, ys, marker="o", label=label, color=COLORS[key], linewidth=1.5)

        # value labels at each point
        for x, y in points:
            ax.annotate(f"{y:g}", (x, y), textcoords="offset points", xytext=(0, 6),
                        ha="center", fontsize=7, color="#333")

    sizes = sorted({r["n"] for r in records})
    if sizes and sizes[0] > 0 and sizes[-1] / sizes[0] >= 100:
        ax.set_xscale("log")
    ax.set_xlabel("Keys (N)")
    ax.set_ylabel("Elapsed time (ms)")
    ax.xaxis.set_major_formatter(ticker.FuncFormatter(lambda v, _: f"{v:,.0f}"))
    ax.set_ylim(bottom=0)
    ax.grid(alpha=0.3, linewidth=0.5)
    ax.legend(fontsize=9)

    plt.tight_layout(rect=[0, 0, 1, 0.94])

    if not out_path:
        out_path = "bench_chart.png"
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"Chart saved to {out_path}")


if __name__ == "__main__":
    main()
