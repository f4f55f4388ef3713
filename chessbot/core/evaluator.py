"""Static evaluator: material, piece-square tables, check and checkmate."""

from typing import Optional

import chess
from chess import SquareSet

from chessbot.config import CONFIG, EvalConfig
from chessbot.core import board as rules
from chessbot.core.tables import table_for

SCORED_PIECES = [chess.PAWN, chess.KNIGHT, chess.BISHOP, chess.ROOK, chess.QUEEN]


class Evaluator:
    def __init__(self, cfg: Optional[EvalConfig] = None):
        self.cfg = cfg or CONFIG.eval

    @property
    def mate_score(self) -> float:
        return self.cfg.mate_score

    def evaluate(self, board: chess.Board) -> float:
        """Return static eval, positive favors White whoever is to move."""
        white_to_move = rules.side_to_move(board) == chess.WHITE

        # The side to move has been mated.
        if rules.is_checkmate(board):
            return -self.cfg.mate_score if white_to_move else self.cfg.mate_score

        score = 0.0

        # Being in check costs the side to move.
        if rules.is_check(board):
            score += -self.cfg.check_bonus if white_to_move else self.cfg.check_bonus

        score += self._material(board)
        score += self.cfg.positional_weight * self._positional(board)
        return score

    def _material(self, board: chess.Board) -> float:
        score = 0.0
        for pt in SCORED_PIECES:
            weight = self.cfg.material_weights.get(chess.piece_name(pt).upper(), 0.0)
            diff = rules.piece_count(board, pt, chess.WHITE) - rules.piece_count(
                board, pt, chess.BLACK
            )
            score += diff * weight
        return score

    def _positional(self, board: chess.Board) -> float:
        """White's table sum minus Black's, unscaled."""
        score = 0.0
        for pt in SCORED_PIECES:
            for color, sign in ((chess.WHITE, 1), (chess.BLACK, -1)):
                table = table_for(pt, color)
                if table is None:
                    continue
                squares = SquareSet(rules.piece_occupancy(board, pt, color))
                score += sign * sum(table[sq] for sq in squares)
        return score
