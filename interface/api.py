"""FastAPI REST interface for the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

from checkers.config import CONFIG
from checkers.core.board import Side
from checkers.main import Engine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Single local game session.
engine = Engine()
_board_lock = threading.Lock()


class PositionRequest(BaseModel):
    layout: str  # 8 '/'-separated rows of . w W b B
    turn: Side = Side.WHITE


class MoveRequest(BaseModel):
    move: str  # e.g. "52-43" or "54x32"


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(default=None, ge=CONFIG.search.min_depth, le=CONFIG.search.max_depth)


def _state():
    won = engine.winner()
    return {
        "layout": engine.board.layout(),
        "turn": engine.turn.value,
        "legal_moves": engine.get_legal_moves(),
        "is_game_over": won is not None,
        "winner": won.value if won else None,
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _state()


@app.post("/position")
def set_position(req: PositionRequest):
    with _board_lock:
        try:
            engine.set_position(req.layout, req.turn)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid layout: {e}")
        return _state()


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if not engine.make_move(req.move):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        return {"move": req.move, **_state()}


def _search(depth):
    if engine.is_game_over():
        raise HTTPException(status_code=400, detail="Game is already over")
    previous = engine.search.max_depth
    if depth is not None:
        engine.set_depth(depth)
    try:
        return engine.search.search_best_move(engine.board, engine.turn)
    finally:
        engine.search.max_depth = previous


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        result = _search(req.depth)
        return {
            "best_move": result.move.notation() if result.move else None,
            "captured": [list(sq) for sq in result.move.captured] if result.move else [],
            "score": result.score,
            "nodes": engine.search.nodes,
        }


@app.post("/play")
def play_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        result = _search(req.depth)
        engine.push(result.move)
        return {"move": result.move.notation(), "score": result.score, **_state()}


@app.post("/reset")
def reset_board():
    with _board_lock:
        engine.reset()
        return _state()
