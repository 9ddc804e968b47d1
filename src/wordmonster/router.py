from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse

from . import globals as app_globals
from .game import VocabularyGame
from .models import AnswerResult, Mode, RunPhase

router = APIRouter(prefix="/api")


# --- Dependencies ---
def get_game() -> VocabularyGame:
    return app_globals.game


def _session_payload(
    game: VocabularyGame,
    accepted: bool = True,
    result: Optional[AnswerResult] = None,
) -> Dict[str, Any]:
    return {
        "phase": game.phase,
        "accepted": accepted,
        "question": game.current_view(),
        "result": result,
        "summary": game.summary,
    }


def _no_session() -> JSONResponse:
    return JSONResponse({"error": "No active session"}, status_code=404)


# --- Home ---


@router.get("/stats")
async def get_stats(game: VocabularyGame = Depends(get_game)):
    return game.counters()


@router.get("/wrong-words")
async def get_wrong_words(game: VocabularyGame = Depends(get_game)):
    return game.wrong_list()


@router.post("/mastery/reset")
async def reset_mastery(
    confirm: bool = Form(False), game: VocabularyGame = Depends(get_game)
):
    if not game.reset_mastery(confirm=confirm):
        return JSONResponse(
            {"error": "Confirmation required", "reset": False}, status_code=400
        )
    return {"reset": True, "stats": game.counters()}


# --- Session ---


@router.post("/session")
async def start_session(
    mode: Mode = Form(Mode.NORMAL), game: VocabularyGame = Depends(get_game)
):
    if game.start_session(mode) is None:
        return JSONResponse({"error": "no eligible words"}, status_code=409)
    return _session_payload(game)


@router.post("/session/replay")
async def replay_session(game: VocabularyGame = Depends(get_game)):
    if game.play_again() is None:
        return JSONResponse({"error": "no eligible words"}, status_code=409)
    return _session_payload(game)


@router.get("/session")
async def get_session(game: VocabularyGame = Depends(get_game)):
    if game.phase == RunPhase.IDLE:
        return _no_session()
    return _session_payload(game)


@router.post("/session/choice")
async def submit_choice(
    value: str = Form(...), game: VocabularyGame = Depends(get_game)
):
    if game.phase == RunPhase.IDLE:
        return _no_session()
    result = game.submit_choice(value)
    return _session_payload(game, accepted=result is not None, result=result)


@router.post("/session/spelling")
async def submit_spelling(
    text: str = Form(""), game: VocabularyGame = Depends(get_game)
):
    if game.phase == RunPhase.IDLE:
        return _no_session()
    result = game.submit_spelling(text)
    return _session_payload(game, accepted=result is not None, result=result)


@router.post("/session/next")
async def next_question(game: VocabularyGame = Depends(get_game)):
    if game.phase == RunPhase.IDLE:
        return _no_session()
    return _session_payload(game, accepted=game.advance())


@router.post("/session/finish")
async def finish_session(game: VocabularyGame = Depends(get_game)):
    if game.phase == RunPhase.IDLE:
        return _no_session()
    return _session_payload(game, accepted=game.end_run() is not None)


@router.delete("/session")
async def return_home(game: VocabularyGame = Depends(get_game)):
    game.return_home()
    return {"status": "success", "stats": game.counters()}
