#!/usr/bin/env python3
"""Generate reproducible perft benchmark CSVs."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pawnchess.board import Board
from pawnchess.match import Match
from pawnchess.perft import perft


@dataclass(frozen=True)
class PositionCase:
    name: str
    opening: tuple[str, ...]


def _board_after(opening: tuple[str, ...]) -> Board:
    match = Match("first", "second")
    for text in opening:
        result = match.play_turn(text)
        if not result.accepted:
            raise ValueError(f"Opening move rejected: {text} ({result.reason})")
    return match.board


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_perft_bench(cases: list[PositionCase], depths: list[int]) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        for depth in depths:
            board = _board_after(case.opening)
            start = perf_counter()
            nodes = perft(board, depth)
            elapsed_ms = (perf_counter() - start) * 1000.0
            nps = int(nodes / max(elapsed_ms / 1000.0, 1e-9))
            rows.append(
                {
                    "position": case.name,
                    "depth": depth,
                    "nodes": nodes,
                    "elapsed_ms": round(elapsed_ms, 3),
                    "nps": nps,
                }
            )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate perft benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=4,
        help="Deepest perft depth to measure",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)

    cases = [
        PositionCase("start", ()),
        PositionCase("contact", ("e2e4", "d7d5", "a2a3", "h7h6")),
    ]
    rows = run_perft_bench(cases, depths=list(range(1, args.max_depth + 1)))

    perft_path = metrics_dir / "perft_metrics.csv"
    _write_csv(
        perft_path,
        fieldnames=["position", "depth", "nodes", "elapsed_ms", "nps"],
        rows=rows,
    )
    print(f"wrote {perft_path}")


if __name__ == "__main__":
    main()
