#!/usr/bin/env python3
"""Replay a scripted match into a demo GIF for README visuals."""

from __future__ import annotations

from pathlib import Path
import sys

from PIL import Image, ImageDraw, ImageFont

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pawnchess.board import Board
from pawnchess.match import Match, TurnResult, TurnStatus

OUT_DIR = ROOT / "docs" / "visuals"

W, H = 1100, 640
BOARD_X, BOARD_Y, CELL = 40, 70, 62

COLORS = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "border": "#2b2b2b",
    "light": "#f0d9b5",
    "dark": "#b58863",
    "text": "#e6e2d8",
    "gold": "#c6a25a",
    "green": "#6f9d4f",
    "red": "#b84f3a",
    "muted": "#9f988d",
}

# Double-advance, en-passant capture, ordinary capture, then a run to the back rank.
SCRIPT = ("e2e4", "a7a6", "e4e5", "d7d5", "e5d6", "a6a5", "d6c7", "a5a4", "c7c8")


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for family in ("/System/Library/Fonts/Supplemental/Arial.ttf", "/Library/Fonts/Arial.ttf"):
        try:
            return ImageFont.truetype(family, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


FONT_TITLE = _font(36)
FONT_BODY = _font(20)
FONT_MONO = _font(18)
FONT_PIECE = _font(24)


def _cell_xy(rank: int, file_idx: int) -> tuple[int, int]:
    return BOARD_X + file_idx * CELL, BOARD_Y + (7 - rank) * CELL


def _base_canvas(title: str) -> tuple[Image.Image, ImageDraw.ImageDraw]:
    img = Image.new("RGB", (W, H), COLORS["bg"])
    draw = ImageDraw.Draw(img)
    draw.text((40, 20), title, fill=COLORS["text"], font=FONT_TITLE)
    draw.rounded_rectangle((690, 70, 1050, 560), radius=14, fill=COLORS["panel"], outline=COLORS["border"], width=2)
    return img, draw


def _draw_board(draw: ImageDraw.ImageDraw, board: Board, result: TurnResult | None) -> None:
    for rank in range(8):
        for file_idx in range(8):
            x, y = _cell_xy(rank, file_idx)
            is_light = (file_idx + rank) % 2 == 1
            draw.rectangle((x, y, x + CELL, y + CELL), fill=COLORS["light"] if is_light else COLORS["dark"])

    if board.en_passant is not None:
        x, y = _cell_xy(board.en_passant.rank, board.en_passant.file)
        draw.rectangle((x + 4, y + 4, x + CELL - 4, y + CELL - 4), fill="#c56e5d")

    if result is not None and result.move is not None:
        for square in (result.move.from_pos, result.move.to_pos):
            x, y = _cell_xy(square.rank, square.file)
            draw.rectangle((x + 4, y + 4, x + CELL - 4, y + CELL - 4), outline=COLORS["gold"], width=3)

    for player in board.players:
        for position, pawn in board.pawns(player):
            x, y = _cell_xy(position.rank, position.file)
            fill = "#f8f6f2" if player is board.players[0] else "#1f1f1f"
            outline = "#5c5c5c" if player is board.players[0] else "#d8d3c8"
            cx, cy = x + CELL // 2, y + CELL // 2
            r = CELL // 2 - 8
            draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=fill, outline=outline, width=2)
            tw = draw.textlength(pawn.symbol, font=FONT_PIECE)
            draw.text((cx - tw / 2, cy - 14), pawn.symbol, fill=outline, font=FONT_PIECE)


def _draw_panel(draw: ImageDraw.ImageDraw, match: Match, played: list[str], result: TurnResult | None) -> None:
    draw.text((720, 110), "MATCH", fill=COLORS["gold"], font=FONT_BODY)
    for idx, player in enumerate(match.players):
        draw.text((720, 145 + idx * 30), f"{player.name}: {player.captures} captures", fill=COLORS["text"], font=FONT_MONO)

    draw.text((720, 248), "MOVES", fill=COLORS["gold"], font=FONT_BODY)
    for idx in range(0, len(played), 2):
        line = f"{idx // 2 + 1}. " + "  ".join(played[idx:idx + 2])
        draw.text((720, 282 + (idx // 2) * 26), line, fill=COLORS["muted"], font=FONT_MONO)

    if result is not None and result.status is TurnStatus.WIN:
        draw.text((720, 500), f"{result.player.color.capitalize()} Wins!", fill=COLORS["green"], font=FONT_BODY)
    elif match.board.en_passant is not None:
        draw.text((720, 500), f"En passant: {match.board.en_passant}", fill=COLORS["red"], font=FONT_BODY)


def _save_gif(path: Path, frames: list[Image.Image], duration_ms: int = 350) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=duration_ms,
        loop=0,
        optimize=True,
    )


def _frame(match: Match, played: list[str], result: TurnResult | None) -> Image.Image:
    img, draw = _base_canvas("Pawns-Only Chess: Scripted Match")
    _draw_board(draw, match.board, result)
    _draw_panel(draw, match, played, result)
    return img


def make_scripted_match() -> Path:
    match = Match("White", "Black")
    played: list[str] = []
    frames = [_frame(match, played, None)]

    for text in SCRIPT:
        result = match.play_turn(text)
        if not result.accepted:
            raise ValueError(f"Scripted move rejected: {text} ({result.reason})")
        played.append(text)
        frames.append(_frame(match, played, result))

    # Hold the final position.
    frames.extend([frames[-1]] * 3)
    path = OUT_DIR / "demo-scripted-match.gif"
    _save_gif(path, frames, duration_ms=700)
    return path


def main() -> None:
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    path = make_scripted_match()
    print(f"wrote {path}")


if __name__ == "__main__":
    main()
