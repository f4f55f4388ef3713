"""Board wrapper and rules adapter over python-chess.

The search never talks to ``chess.Board`` directly for anything that mutates
it. Moves are applied through :func:`applied`, which pairs every push with a
pop so the caller always gets its board back unchanged.
"""

from contextlib import contextmanager
from typing import Iterator, List

import chess
from chess import polyglot


def legal_moves(board: chess.Board, captures_only: bool = False) -> List[chess.Move]:
    """Legal moves in python-chess generation order."""
    if captures_only:
        return list(board.generate_legal_captures())
    return list(board.legal_moves)


def apply_move(board: chess.Board, move: chess.Move) -> None:
    board.push(move)


def undo_move(board: chess.Board, move: chess.Move) -> None:
    """Pop ``move``; it must be the last move applied."""
    if not board.move_stack or board.peek() != move:
        raise ValueError(f"Cannot undo {move.uci()}: not the last move applied")
    board.pop()


@contextmanager
def applied(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    """Apply ``move`` for the duration of the block and undo it on exit."""
    apply_move(board, move)
    try:
        yield board
    finally:
        undo_move(board, move)


def is_checkmate(board: chess.Board) -> bool:
    return board.is_checkmate()


def is_check(board: chess.Board) -> bool:
    return board.is_check()


def is_stalemate(board: chess.Board) -> bool:
    return board.is_stalemate()


def side_to_move(board: chess.Board) -> chess.Color:
    return board.turn


def piece_count(board: chess.Board, piece_type: chess.PieceType, color: chess.Color) -> int:
    return chess.popcount(board.pieces_mask(piece_type, color))


def piece_occupancy(board: chess.Board, piece_type: chess.PieceType, color: chess.Color) -> int:
    """64-bit mask of the squares holding ``color``'s pieces of ``piece_type``."""
    return board.pieces_mask(piece_type, color)


def position_key(board: chess.Board) -> int:
    """Zobrist key of the position (pieces, side, castling, en passant)."""
    return polyglot.zobrist_hash(board)


class ChessBoard:
    def __init__(self, fen: str = None):
        """Initialize from FEN or the standard starting position."""
        self.board = chess.Board(fen) if fen else chess.Board()
        self.move_history = []

    def reset(self):
        """Reset to the initial position."""
        self.board.reset()
        self.move_history.clear()

    def set_fen(self, fen: str):
        """Set board state from a FEN string."""
        self.board.set_fen(fen)
        self.move_history.clear()

    def get_fen(self) -> str:
        """Return the current FEN."""
        return self.board.fen()

    def make_move(self, move_str: str) -> bool:
        """Push a UCI move (e.g. 'e2e4'). Returns True if legal."""
        try:
            move = chess.Move.from_uci(move_str)
        except ValueError:
            return False
        if move not in self.board.legal_moves:
            return False
        apply_move(self.board, move)
        self.move_history.append(move_str)
        return True

    def undo_move(self):
        """Pop the last move."""
        if self.move_history:
            undo_move(self.board, self.board.peek())
            self.move_history.pop()

    def get_legal_moves(self):
        """Return legal moves as UCI strings."""
        return [m.uci() for m in legal_moves(self.board)]

    def is_game_over(self):
        """Check if the game has ended."""
        return self.board.is_game_over()

    def print_board(self):
        """Print ASCII representation."""
        print(self.board)
