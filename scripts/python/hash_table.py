"""Hash table churn: shuffled int keys inserted, removed, reinserted, then looked up."""

import os
import sys
from collections import namedtuple

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from _harness import Lcg, Stopwatch, bench_main

LOOKUP_PASSES = 8

HashTableResult = namedtuple("HashTableResult", ["n", "addition_ms", "lookup_ms", "count"])


def shuffled_keys(n, seed):
    keys = list(range(n))
    rng = Lcg(seed)
    # modulo-biased; pos is in [0, i), never i itself
    for i in range(n - 1, 0, -1):
        pos = rng.next() % i
        keys[i], keys[pos] = keys[pos], keys[i]
    return keys


def addition_phase(table, keys):
    for k in keys:
        table[k] = k
    for k in keys:
        del table[k]
    for k in reversed(keys):
        table[k] = k


def lookup_phase(table, keys, passes=LOOKUP_PASSES):
    count = 0
    for _ in range(passes):
        for k in keys:
            if k in table:
                count += 1
    return count


def run(n, seed, out=None):
    if out is None:
        out = sys.stdout
    keys = shuffled_keys(n, seed)
    table = {}
    st = Stopwatch()

    st.start()
    addition_phase(table, keys)
    st.stop()
    addition_ms = st.elapsed_ms
    print(f"Addition {addition_ms}", file=out)

    st.reset()
    st.start()
    count = lookup_phase(table, keys)
    st.stop()
    lookup_ms = st.elapsed_ms
    print(f"Lookup {lookup_ms} - Count {count}", file=out)

    return HashTableResult(n, addition_ms, lookup_ms, count)


def main(argv=None):
    return bench_main(run, argv)


if __name__ == "__main__":
    sys.exit(main())
