'''
Word-guessing game API

Endpoints:
POST /games                 -> start a game with a caller-chosen target and word list
GET  /games/{id}            -> read state & history
POST /games/{id}/guess      -> submit a guess
GET  /games/{id}/board      -> rows ready for display (history, typed row, padding)
POST /games/{id}/end        -> abandon the game

Games are stored through the SQLAlchemy-backed repository (DBGameStore).
'''

import logging
import os

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .bootstrap_db import create_all    # dev-only: create tables
from .db import get_db                  # SQLAlchemy Session dependency
from .errors import GameError, InvalidWord, WordLengthMismatch
from .repository import DBGameStore     # DB-backed store
from .schemas import (
    BoardOut,
    GameState,
    GuessRequest,
    GuessResponse,
    NewGameRequest,
    NewGameResponse,
    ScoredGuessOut,
)

APP_ENV = os.getenv("APP_ENV", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Word Guessing Game API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# --- Dev convenience: auto-create tables locally ---
if APP_ENV == "local":
    @app.on_event("startup")
    def _dev_create_tables():
        logger.info("APP_ENV=local: creating tables if missing")
        create_all()

# Small factory so routes get a per-request store (bound to the current DB session)
def get_store(session = Depends(get_db)) -> DBGameStore:
    return DBGameStore(session)

def _http_error(err: GameError) -> HTTPException:
    # Bad input -> 400; well-formed but not allowed right now -> 409
    if isinstance(err, (InvalidWord, WordLengthMismatch)):
        return HTTPException(status_code=400, detail=str(err))
    return HTTPException(status_code=409, detail=str(err))

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    payload: NewGameRequest,
    store: DBGameStore = Depends(get_store),
) -> NewGameResponse:
    game_state = store.create(payload.target, payload.candidates, payload.max_tries)
    return NewGameResponse(
        game_id=game_state.game_id,
        max_tries=game_state.max_tries,
        word_length=len(payload.target),
        status=game_state.status,
    )

@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    store: DBGameStore = Depends(get_store),
) -> GameState:
    game_state = store.get(game_id)
    if not game_state:
        raise HTTPException(status_code=404, detail="Game not found")
    return game_state

@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: DBGameStore = Depends(get_store),
) -> GuessResponse:
    # repository.guess() runs the session checks & records the scored row
    try:
        updated = store.guess(game_id, payload.word)
    except GameError as err:
        raise _http_error(err)
    if not updated:
        raise HTTPException(status_code=404, detail="Game not found")

    feedback = updated.history[-1] if updated.history else None

    # When the game ends, include the target in the response
    target = store.get_target(game_id) if updated.game_over else None

    return GuessResponse(
        tries_left=updated.tries_left,
        status=updated.status,
        feedback=feedback,
        target=target,
        note=(f"Game {updated.status}. No more guesses allowed."
              if updated.game_over else None),
    )

@app.get("/games/{game_id}/board", response_model=BoardOut, summary="Get the board for display")
def get_board(
    game_id: str,
    pad: int | None = Query(None, ge=0, description="Empty rows to add, up to the try budget"),
    buffer: str | None = Query(None, description="Letters typed so far for the next guess"),
    store: DBGameStore = Depends(get_store),
) -> BoardOut:
    try:
        rows = store.board(game_id, pad=pad, buffer=buffer)
    except GameError as err:
        raise _http_error(err)
    if rows is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return BoardOut(game_id=game_id, rows=[ScoredGuessOut.from_guess(r) for r in rows])

@app.post("/games/{game_id}/end", response_model=GameState, summary="Abandon the game")
def end_game(
    game_id: str,
    store: DBGameStore = Depends(get_store),
) -> GameState:
    game_state = store.end(game_id)
    if not game_state:
        raise HTTPException(status_code=404, detail="Game not found")
    return game_state
