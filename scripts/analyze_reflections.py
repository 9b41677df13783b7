#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run one analytics operation over a JSON / JSONL file of reflections.
Usage:
  python scripts/analyze_reflections.py --input data/reflections.json
  python scripts/analyze_reflections.py --input data/reflections.jsonl --op trends
  python scripts/analyze_reflections.py --input data/reflections.json --op statistics --field moodAfter
"""
import argparse
import json
import os

from reflection_analytics.boundary import (
    calculate_co_occurrence,
    calculate_statistics,
    calculate_time_patterns,
    calculate_trends,
)

OPERATIONS = {
    "time-patterns": calculate_time_patterns,
    "trends": calculate_trends,
    "co-occurrence": calculate_co_occurrence,
}


def load_rows(path: str):
    rows = []
    with open(path, "r", encoding="utf-8") as f:
        first = f.read(1)
        f.seek(0)
        if first == "[":
            return json.load(f)
        # JSONL
        for i, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                rows.append(json.loads(line))
            except ValueError:
                print(f"[skip] line {i}: bad json")
    return rows


def numbers_from(rows, field: str):
    out = []
    for row in rows:
        v = row.get(field) if isinstance(row, dict) else None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            out.append(v)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True)
    ap.add_argument("--op", default="time-patterns", choices=sorted(list(OPERATIONS) + ["statistics"]))
    ap.add_argument("--field", default="intensity", help="numeric field used by --op statistics")
    args = ap.parse_args(argv)

    if not os.path.exists(args.input):
        raise SystemExit(f"not found: {args.input}")

    rows = load_rows(args.input)
    if args.op == "statistics":
        result = calculate_statistics(json.dumps(numbers_from(rows, args.field)))
    else:
        result = OPERATIONS[args.op](json.dumps(rows, ensure_ascii=False))
    print(result)
    return 0


if __name__ == "__main__":
    main()
