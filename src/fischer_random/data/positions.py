# fischer_random/data/positions.py
# JSONL position datasets: {"id": 518, "position": "RNBQKBNR", "fen": "..."}
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from fischer_random.position import as_position_id, decode, encode, parse_arrangement, to_board_format, to_display_string

logger = logging.getLogger(__name__)


def position_record(position_id: int) -> Dict[str, Any]:
    arrangement = decode(position_id)
    return {
        "id": encode(arrangement),
        "position": to_display_string(arrangement),
        "fen": to_board_format(arrangement),
    }


def write_positions(path: Union[str, Path], ids: Iterable[int]) -> int:
    """Write one record per ID to a JSONL file. Returns the number written."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    n_written = 0
    with out_path.open("w", encoding="utf-8") as f:
        for pid in ids:
            f.write(json.dumps(position_record(pid), ensure_ascii=False) + "\n")
            n_written += 1
    return n_written


def read_positions(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Load records from a JSONL file.

    Lines that are not JSON, lack "id"/"position", or whose position does not
    encode to its id are skipped with a warning. The FEN is always rebuilt from
    the position.
    """
    in_path = Path(path)
    if not in_path.exists():
        raise FileNotFoundError(f"Positions file not found: {in_path}")

    records: List[Dict[str, Any]] = []
    with in_path.open("r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                rec = json.loads(line)
                arrangement = parse_arrangement(rec["position"])
                pid = as_position_id(rec["id"])
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning(f"[line {line_num}] failed to parse position record: {e}")
                continue

            if pid is None:
                logger.warning(f"[line {line_num}] id {rec['id']!r} is not an integer")
                continue

            if encode(arrangement) != pid:
                logger.warning(f"[line {line_num}] id {pid} does not match position {rec['position']}")
                continue
            records.append(
                {"id": pid, "position": to_display_string(arrangement), "fen": to_board_format(arrangement)}
            )
    return records
