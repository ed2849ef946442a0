#!/usr/bin/env python3
"""
Generate random Chess960 starting positions to JSONL.

Each line:
  {"id": 518, "position": "RNBQKBNR", "fen": "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"}

Usage:
  uv run python scripts/generate_positions.py --out data/positions.jsonl --count 200
"""

from __future__ import annotations
import argparse
import random
import sys

from fischer_random.data import write_positions
from fischer_random.position import encode, generate


def main():
    ap = argparse.ArgumentParser(description="Generate random Chess960 positions to JSONL.")
    ap.add_argument("--out", required=True, help="Output JSONL file path")
    ap.add_argument("--count", type=int, default=100, help="Number of positions to generate")
    ap.add_argument("--unique", action="store_true", help="Skip IDs that were already written")
    ap.add_argument("--seed", type=int, default=1337, help="RNG seed")
    args = ap.parse_args()

    if args.unique and args.count > 960:
        ap.error("--unique allows at most 960 positions")

    rng = random.Random(args.seed)
    ids = []
    seen = set()
    while len(ids) < args.count:
        pid = encode(generate(rng))
        if args.unique and pid in seen:
            continue
        seen.add(pid)
        ids.append(pid)

    n_written = write_positions(args.out, ids)
    print(f"Wrote {n_written} positions → {args.out}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
