"""
Piece-Square Tables
===================

Static positional bonuses per piece type, one entry per square. Tables are
written from White's point of view and indexed by python-chess square
numbering (A1 = 0, H1 = 7, ..., H8 = 63), so the first row below is rank 1.

Black reuses the White table with the element order reversed. Square ``sq``
for Black reads White's entry at ``63 - sq``, which flips both rank and file.
Every table here is symmetric across the d/e file boundary, so the reversal
is equivalent to an ordinary vertical mirror.

The king has no table.

Tables are built once by :func:`init_tables` and shared read-only afterwards.
"""

import threading
from typing import Dict, Mapping, Optional, Sequence, Tuple

import chess

Table = Tuple[float, ...]

# fmt: off
PAWN_TABLE = (
      0,   0,   0,   0,   0,   0,   0,   0,
      5,  10,  10, -20, -20,  10,  10,   5,
      5,  -5, -10,   0,   0, -10,  -5,   5,
      0,   0,   0,  20,  20,   0,   0,   0,
      5,   5,  10,  25,  25,  10,   5,   5,
     10,  10,  20,  30,  30,  20,  10,  10,
     50,  50,  50,  50,  50,  50,  50,  50,
      0,   0,   0,   0,   0,   0,   0,   0,
)

KNIGHT_TABLE = (
    -50, -40, -30, -30, -30, -30, -40, -50,
    -40, -20,   0,   5,   5,   0, -20, -40,
    -30,   5,  10,  15,  15,  10,   5, -30,
    -30,   0,  15,  20,  20,  15,   0, -30,
    -30,   5,  15,  20,  20,  15,   5, -30,
    -30,   0,  10,  15,  15,  10,   0, -30,
    -40, -20,   0,   0,   0,   0, -20, -40,
    -50, -40, -30, -30, -30, -30, -40, -50,
)

BISHOP_TABLE = (
    -20, -10, -10, -10, -10, -10, -10, -20,
    -10,   5,   0,   0,   0,   0,   5, -10,
    -10,  10,  10,  10,  10,  10,  10, -10,
    -10,   0,  10,  10,  10,  10,   0, -10,
    -10,   5,   5,  10,  10,   5,   5, -10,
    -10,   0,   5,  10,  10,   5,   0, -10,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -20, -10, -10, -10, -10, -10, -10, -20,
)

ROOK_TABLE = (
      0,   0,   0,   5,   5,   0,   0,   0,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
      5,  10,  10,  10,  10,  10,  10,   5,
      0,   0,   0,   0,   0,   0,   0,   0,
)

QUEEN_TABLE = (
    -20, -10, -10,  -5,  -5, -10, -10, -20,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -10,   0,   5,   5,   5,   5,   0, -10,
     -5,   0,   5,   5,   5,   5,   0,  -5,
     -5,   0,   5,   5,   5,   5,   0,  -5,
    -10,   0,   5,   5,   5,   5,   0, -10,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -20, -10, -10,  -5,  -5, -10, -10, -20,
)
# fmt: on

WHITE_TABLES: Dict[chess.PieceType, Sequence[float]] = {
    chess.PAWN: PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
    chess.BISHOP: BISHOP_TABLE,
    chess.ROOK: ROOK_TABLE,
    chess.QUEEN: QUEEN_TABLE,
}

_tables: Optional[Dict[chess.Color, Dict[chess.PieceType, Table]]] = None
_tables_lock = threading.Lock()


def build_tables(
    white_tables: Mapping[chess.PieceType, Sequence[float]],
) -> Dict[chess.Color, Dict[chess.PieceType, Table]]:
    """
    Builds the per-color table mapping from White-oriented tables.

    Args:
        white_tables: 64-entry tables keyed by piece type, White's view.

    Returns:
        ``{chess.WHITE: {...}, chess.BLACK: {...}}`` with immutable tuples.
        Each Black table is its White table reversed.
    """
    white: Dict[chess.PieceType, Table] = {}
    black: Dict[chess.PieceType, Table] = {}
    for piece_type, table in white_tables.items():
        if piece_type == chess.KING:
            continue
        if len(table) != 64:
            raise ValueError(
                f"{chess.piece_name(piece_type)} table has {len(table)} entries, expected 64"
            )
        white[piece_type] = tuple(float(w) for w in table)
        black[piece_type] = white[piece_type][::-1]
    return {chess.WHITE: white, chess.BLACK: black}


def init_tables() -> Dict[chess.Color, Dict[chess.PieceType, Table]]:
    """Builds the process-wide tables on first call; later calls reuse them."""
    global _tables
    if _tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = build_tables(WHITE_TABLES)
    return _tables


def table_for(piece_type: chess.PieceType, color: chess.Color) -> Optional[Table]:
    """Returns the table for ``piece_type`` seen by ``color``, or None for the king."""
    return init_tables()[color].get(piece_type)
