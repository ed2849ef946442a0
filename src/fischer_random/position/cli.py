#!/usr/bin/env python3
# fischer_random/position/cli.py
"""
Chess960 CLI

Subcommands:
  info [--json]
  random [--seed S] [--json]
  decode --id N [--json]
  encode --position RNBQKBNR [--json]
  check [--json]
"""
from __future__ import annotations

import argparse
import json
import random
from typing import Any, Dict, List, Sequence

from . import (
    DRAW_SIZES,
    NUM_POSITIONS,
    STANDARD_POSITION_ID,
    InvalidArrangementError,
    InvalidIDError,
    board_position_id,
    decode,
    encode,
    generate,
    is_valid_arrangement,
    parse_arrangement,
    to_board,
    to_board_format,
    to_display_string,
)


def _payload(arrangement: Sequence[str]) -> Dict[str, Any]:
    return {
        "id": encode(arrangement),
        "position": to_display_string(arrangement),
        "fen": to_board_format(arrangement),
    }


def _print_payload(payload: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload))
    else:
        print("ID       :", payload["id"])
        print("Position :", payload["position"])
        print("FEN      :", payload["fen"])


def _run_checks() -> List[str]:
    """Exhaustive codec checks, cross-checked against python-chess. Returns failures."""
    failures: List[str] = []
    seen = set()
    for pid in range(NUM_POSITIONS):
        arrangement = decode(pid)
        seen.add(arrangement)
        if not is_valid_arrangement(arrangement):
            failures.append(f"{pid}: decoded arrangement {to_display_string(arrangement)} is invalid")
        if encode(arrangement) != pid:
            failures.append(f"{pid}: encode(decode(id)) == {encode(arrangement)}")
        chess_id = board_position_id(to_board(arrangement))
        if chess_id != pid:
            failures.append(f"{pid}: python-chess reports {chess_id}")
    if len(seen) != NUM_POSITIONS:
        failures.append(f"decode image has {len(seen)} distinct arrangements, expected {NUM_POSITIONS}")
    return failures


def cmd_info(args):
    if args.json:
        print(
            json.dumps(
                {
                    "num_positions": NUM_POSITIONS,
                    "standard_id": STANDARD_POSITION_ID,
                    "draw_sizes": list(DRAW_SIZES),
                }
            )
        )
        return
    print("=== Chess960 info ===")
    print(f"Positions         : {NUM_POSITIONS}")
    print(f"Standard ID       : {STANDARD_POSITION_ID} ({to_display_string(decode(STANDARD_POSITION_ID))})")
    print(f"Draw sizes        : {' x '.join(map(str, DRAW_SIZES))}")
    print("\nLayout:")
    print("  ID = 96*N + 16*Q + 4*D + L")
    print("  L/D: light/dark bishop square (0-3), Q: queen (0-5), N: knight pair (0-9).")


def cmd_random(args):
    rng = random.Random(args.seed) if args.seed is not None else None
    _print_payload(_payload(generate(rng)), args.json)


def cmd_decode(args):
    try:
        arrangement = decode(args.id)
    except InvalidIDError as e:
        raise SystemExit(f"[decode] {e}")
    _print_payload(_payload(arrangement), args.json)


def cmd_encode(args):
    try:
        arrangement = parse_arrangement(args.position)
    except InvalidArrangementError as e:
        raise SystemExit(f"[encode] {e}")
    _print_payload(_payload(arrangement), args.json)


def cmd_check(args):
    failures = _run_checks()
    if args.json:
        print(json.dumps({"checked": NUM_POSITIONS, "failures": failures}))
    else:
        for msg in failures:
            print("FAIL:", msg)
        print(f"Checked {NUM_POSITIONS} positions: {len(failures)} failure(s)")
    if failures:
        raise SystemExit(1)


def main(argv=None):
    ap = argparse.ArgumentParser(prog="chess960", description="Chess960 position generator and ID codec")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp_info = sub.add_parser("info", help="Show the numbering scheme")
    sp_info.add_argument("--json", action="store_true")

    sp_rand = sub.add_parser("random", help="Generate a random starting position")
    sp_rand.add_argument("--seed", type=int, default=None)
    sp_rand.add_argument("--json", action="store_true")

    sp_dec = sub.add_parser("decode", help="Starting position for a position ID")
    sp_dec.add_argument("--id", type=int, required=True)
    sp_dec.add_argument("--json", action="store_true")

    sp_enc = sub.add_parser("encode", help="Position ID for a back rank such as RNBQKBNR")
    sp_enc.add_argument("--position", required=True)
    sp_enc.add_argument("--json", action="store_true")

    sp_chk = sub.add_parser("check", help="Verify all 960 IDs round-trip and agree with python-chess")
    sp_chk.add_argument("--json", action="store_true")

    args = ap.parse_args(argv)
    if args.cmd == "info":
        cmd_info(args)
    elif args.cmd == "random":
        cmd_random(args)
    elif args.cmd == "decode":
        cmd_decode(args)
    elif args.cmd == "encode":
        cmd_encode(args)
    elif args.cmd == "check":
        cmd_check(args)


if __name__ == "__main__":
    main()
