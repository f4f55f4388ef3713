"""FastAPI REST interface for the bot."""

import logging
import threading

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from chessbot.core.search import SearchEngine
from chessbot.core.evaluator import Evaluator
from chessbot.core.utils import configure_logging
from chessbot.config import CONFIG

configure_logging(CONFIG.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared engine and board for the lifetime of the process.
engine = SearchEngine(Evaluator(), depth=CONFIG.search.depth)
board = chess.Board()
_board_lock = threading.Lock()
_search_lock = threading.Lock()


class FenRequest(BaseModel):
    fen: str


class MoveRequest(BaseModel):
    move: str  # UCI format e.g. "e2e4"


class SearchRequest(BaseModel):
    depth: Optional[int] = None
    time_budget_ms: Optional[int] = None


@app.get("/board")
def get_board():
    with _board_lock:
        return {
            "fen": board.fen(),
            "turn": "white" if board.turn == chess.WHITE else "black",
            "legal_moves": [m.uci() for m in board.legal_moves],
            "is_game_over": board.is_game_over(),
            "result": board.result() if board.is_game_over() else None,
        }


@app.post("/position")
def set_position(req: FenRequest):
    with _board_lock:
        try:
            board.set_fen(req.fen)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")
        return {"fen": board.fen()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            move = chess.Move.from_uci(req.move)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid UCI move: {req.move}")
        if move not in board.legal_moves:
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        board.push(move)
        return {"fen": board.fen(), "move": req.move}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if req.depth is not None and req.depth < 1:
            raise HTTPException(status_code=400, detail=f"Invalid depth: {req.depth}")
        search_board = board.copy()

    # The searcher is not re-entrant; depth and run share one lock.
    with _search_lock:
        engine.max_depth = req.depth or CONFIG.search.depth
        best, score = engine.search_best_move(search_board, req.time_budget_ms)
        nodes = engine.nodes
    logger.info("search %s -> %s (%d nodes)", search_board.fen(), best, nodes)
    return {
        "best_move": best.uci() if best else None,
        "score": score,
        "nodes": nodes,
        "fen": search_board.fen(),
    }


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.reset()
        return {"fen": board.fen()}
