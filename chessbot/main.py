from typing import Optional

from chessbot.config import CONFIG
from chessbot.core.board import ChessBoard
from chessbot.core.evaluator import Evaluator
from chessbot.core.search import SearchEngine
from chessbot.core.utils import configure_logging


class Engine:
    def __init__(self, depth: Optional[int] = None, fen: Optional[str] = None):
        configure_logging(CONFIG.log_level)
        self.board = ChessBoard(fen)
        self.search = SearchEngine(Evaluator(), depth=depth)

    def get_best_move(self, time_budget_ms: Optional[int] = None):
        move, value = self.search.search_best_move(self.board.board, time_budget_ms)
        return (move.uci() if move else None), value

    def make_move(self, move_uci: str):
        return self.board.make_move(move_uci)

    def print_board(self):
        self.board.print_board()
