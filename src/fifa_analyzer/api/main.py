import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fifa_analyzer.config import settings
from fifa_analyzer.core.compare import compare_players
from fifa_analyzer.core.errors import (
    DataUnavailable,
    EmptyAttributeSet,
    InvalidAttribute,
    InvalidLimit,
    InvalidPlayerData,
    InvalidWeights,
    NotFound,
    PlayerAnalyzerError,
)
from fifa_analyzer.core.similarity import (
    SimilarityRequest,
    parse_attribute_names,
    parse_weights,
)
from fifa_analyzer.core.store import get_store
from fifa_analyzer.data.loader import load_snapshot
from fifa_analyzer.llm.host import answer_query
from fifa_analyzer.logging_config import setup_logging

logger = logging.getLogger(__name__)

## One process-wide store; imports publish a fresh snapshot into it.
store = get_store()

ERROR_STATUS = {
    NotFound: 404,
    InvalidAttribute: 400,
    EmptyAttributeSet: 400,
    InvalidWeights: 400,
    InvalidLimit: 400,
    DataUnavailable: 503,
    InvalidPlayerData: 503,
}


def import_players(path: Optional[str] = None) -> int:
    """Load the CSV and swap it in as the current snapshot."""
    path = path or settings.players_csv_path
    try:
        snapshot = load_snapshot(path)
    except FileNotFoundError as exc:
        raise DataUnavailable(str(exc)) from exc
    store.replace(snapshot)
    logger.info("Imported %d players from %s", len(snapshot), path)
    return len(snapshot)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.access_log, settings.app_log_level)
    ## Optional warm start so the first request already has data.
    if settings.auto_import:
        try:
            import_players()
        except DataUnavailable as exc:
            logger.warning("Auto import skipped: %s", exc)
    yield


app = FastAPI(
    title="FIFA Player Analyzer API",
    version="0.1.0",
    description="Browse player attributes, compare players and find similar ones.",
    lifespan=lifespan,
)


## Pydantic models for request/response bodies.

class HealthResponse(BaseModel):
    status: str


class ImportResponse(BaseModel):
    message: str


class AttributeRow(BaseModel):
    attribute: str
    first: Optional[float] = None
    second: Optional[float] = None
    difference: Optional[float] = None


class ComparisonResponse(BaseModel):
    first: Dict[str, Any]
    second: Dict[str, Any]
    attributes: List[AttributeRow]
    distance: Optional[float] = None


class QueryRequest(BaseModel):
    query: Optional[str] = None


class QueryResponse(BaseModel):
    answer: str


@app.exception_handler(PlayerAnalyzerError)
async def player_analyzer_error_handler(request: Request, exc: PlayerAnalyzerError):
    status = ERROR_STATUS.get(type(exc), 500)
    logger.warning("%s %s --> %d %s", request.method, request.url.path, status, exc.message)
    return JSONResponse(status_code=status, content={"error": exc.message, "code": exc.code})


## Route handlers

@app.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(status="ok")


@app.api_route("/api/import-data", methods=["GET", "POST"], response_model=ImportResponse)
def import_data():
    """
    Replace every player with the contents of the configured CSV.
    """
    count = import_players()
    return ImportResponse(message=f"Imported {count} players successfully")


@app.get("/api/players", response_model=List[Dict[str, Any]])
def list_players(search: Optional[str] = None):
    """
    All players, optionally filtered by name, club or nation.
    """
    snapshot = store.snapshot
    return [player.to_dict() for player in snapshot.search(search)]


@app.get("/api/players/{player_id}", response_model=Dict[str, Any])
def get_player(player_id: int):
    return store.get(player_id).to_dict()


@app.get("/api/players/{player_id}/similar", response_model=List[Dict[str, Any]])
def similar_players(
    player_id: int,
    attributes: Optional[str] = None,
    weights: Optional[str] = None,
    limit: Optional[int] = None,
):
    """
    Closest players by weighted Euclidean distance.

    attributes: comma-separated names, defaults to the six headline ratings
    weights: comma-separated positive numbers, one per attribute
    limit: result count, capped at settings.max_similar_limit
    """
    if limit is None:
        limit = settings.default_similar_limit
    limit = min(limit, settings.max_similar_limit)

    request = SimilarityRequest(
        reference_id=player_id,
        attribute_names=parse_attribute_names(attributes),
        weights=parse_weights(weights),
        limit=limit,
    )
    ## Taking the snapshot once, a concurrent import can't change it under us.
    results = request.execute(store.snapshot)
    return [result.to_dict() for result in results]


@app.get("/api/compare", response_model=ComparisonResponse)
def compare(
    player1: int,
    player2: int,
    attributes: Optional[str] = None,
    weights: Optional[str] = None,
    detail: bool = False,
):
    """
    Side-by-side attributes of two players plus their distance.

    detail: without explicit attributes, add the detailed in-game stats
    to the headline ratings
    """
    comparison = compare_players(
        store.snapshot,
        player1,
        player2,
        attribute_names=parse_attribute_names(attributes) if attributes is not None else None,
        weights=parse_weights(weights),
        detail=detail,
    )
    return comparison.to_dict()


@app.post("/api/query", response_model=QueryResponse)
def query(payload: QueryRequest):
    """
    Natural-language question about the players (fallback answer only).
    """
    try:
        answer = answer_query(payload.query or "")
    except ValueError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    return QueryResponse(answer=answer)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fifa_analyzer.api.main:app", host="127.0.0.1", port=8000)
