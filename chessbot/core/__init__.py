"""Core engine components: rules adapter, piece-square tables, evaluator and search."""

from .board import ChessBoard
from .evaluator import Evaluator
from .search import SearchEngine
from .tables import init_tables, table_for
