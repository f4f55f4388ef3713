import logging
import threading
import time
from typing import Optional, Tuple

import chess

from chessbot.config import CONFIG, SearchConfig
from chessbot.core import board as rules
from chessbot.core.board import applied
from chessbot.core.evaluator import Evaluator
from chessbot.core.utils import format_info

logger = logging.getLogger(__name__)

INF = float("inf")
DRAW_SCORE = 0.0


class SearchTimeout(Exception):
    """Raised from inside the tree when the deadline passes or stop() is called."""


class SearchEngine:
    """
    Fixed-depth minimax with alpha-beta pruning.

    Scores are always from White's point of view: White maximizes, Black
    minimizes. The board passed in is mutated while searching and handed back
    in its original state.
    """

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        depth: Optional[int] = None,
        cfg: Optional[SearchConfig] = None,
    ):
        self.evaluator = evaluator or Evaluator()
        self.cfg = cfg or CONFIG.search
        self.max_depth = depth if depth is not None else self.cfg.depth

        self._stop_event = threading.Event()
        self._deadline: Optional[float] = None
        self.nodes = 0

    def stop(self):
        """Abort the running search; it returns its best move so far.

        Each search_best_move() call clears the flag when it starts, so a stop
        sent before a search begins has no effect on it.
        """
        self._stop_event.set()

    def choose_move(
        self, board: chess.Board, time_budget_ms: Optional[int] = None
    ) -> Optional[chess.Move]:
        """Best move for the side to move, or None when there is no legal move."""
        move, _score = self.search_best_move(board, time_budget_ms)
        return move

    def search_best_move(
        self, board: chess.Board, time_budget_ms: Optional[int] = None
    ) -> Tuple[Optional[chess.Move], float]:
        """
        Root driver. Searches every legal move at ``max_depth - 1`` with a full
        window and keeps the strictly best one for the side to move.

        With a time budget (argument, else ``SearchConfig.time_limit_ms``), the
        search is abandoned on expiry and the best fully searched root move is
        returned. If not even one root move finished, the first legal move is.

        Returns:
            (best_move, score). best_move is None when the position has no
            legal moves; the score is then the static value of the position.
        """
        self._stop_event.clear()
        self.nodes = 0

        budget = time_budget_ms if time_budget_ms is not None else self.cfg.time_limit_ms
        start_time = time.monotonic()
        self._deadline = start_time + budget / 1000.0 if budget is not None else None

        white_to_move = rules.side_to_move(board) == chess.WHITE
        best_score = -INF if white_to_move else INF
        best_move = None

        moves = rules.legal_moves(board)
        if not moves:
            self._deadline = None
            return None, self._leaf_score(board, 0)

        try:
            for move in moves:
                self._check_time()
                with applied(board, move):
                    score = self.search(
                        board, self.max_depth - 1, -INF, INF, not white_to_move, ply=1
                    )
                logger.debug("root %s -> %.1f", move.uci(), score)

                if (white_to_move and score > best_score) or (
                    not white_to_move and score < best_score
                ):
                    best_score = score
                    best_move = move
        except SearchTimeout:
            logger.warning(
                "Search stopped after %d nodes; returning best move found so far",
                self.nodes,
            )
        finally:
            self._deadline = None

        if best_move is None:
            best_move = moves[0]
            with applied(board, best_move):
                best_score = self._leaf_score(board, 1)

        elapsed = time.monotonic() - start_time
        logger.info(
            format_info(
                self.max_depth, best_score, self.nodes, elapsed, [best_move],
                self.evaluator.mate_score,
            )
        )
        return best_move, best_score

    def search(
        self,
        board: chess.Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        ply: int = 0,
    ) -> float:
        """
        Alpha-beta minimax below the root.

        Args:
            depth: Remaining plies. Negative values are treated as zero.
            alpha: Best score White can already guarantee.
            beta: Best score Black can already guarantee.
            maximizing: True when the side to move is White.
            ply: Distance from the root, used to prefer nearer mates.
        """
        self.nodes += 1
        if self.nodes % self.cfg.time_check_nodes == 0:
            self._check_time()

        depth = max(depth, 0)
        moves = rules.legal_moves(board) if depth > 0 else []
        # Depth cutoff, checkmate and stalemate all land here.
        if not moves:
            return self._leaf_score(board, ply)

        if maximizing:
            best = -INF
            for move in moves:
                with applied(board, move):
                    score = self.search(board, depth - 1, alpha, beta, False, ply + 1)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best

        best = INF
        for move in moves:
            with applied(board, move):
                score = self.search(board, depth - 1, alpha, beta, True, ply + 1)
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best

    def _leaf_score(self, board: chess.Board, ply: int) -> float:
        if rules.is_stalemate(board):
            return DRAW_SCORE
        score = self.evaluator.evaluate(board)
        # Mate found further from the root is worth slightly less.
        if abs(score) >= self.evaluator.mate_score:
            score = score - ply if score > 0 else score + ply
        return score

    def _check_time(self):
        if self._stop_event.is_set():
            raise SearchTimeout("stopped")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise SearchTimeout("out of time")
