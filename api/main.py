from dataclasses import asdict
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from catalog.service import MusicSearchService

app = FastAPI(
    title="DESKMIX",
    description="Cassettes, vinyl and CDs for whatever you are in the mood for",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

search_service = MusicSearchService.from_settings()


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    max_results: Optional[int] = Field(None, ge=1, le=50)
    min_quality_score: Optional[float] = Field(None, ge=0.0, le=1.0)
    prioritize_popularity: Optional[bool] = None
    ensure_genre_diversity: Optional[bool] = None


def _response(query: str, songs: list) -> dict:
    results = [asdict(song) for song in songs]
    return {"query": query, "results": results, "count": len(results)}


@app.get("/health")
async def health():
    return {"status": "healthy", "rewriter": search_service.rewriter is not None}


@app.get("/api/search")
def search_get(
    q: str = Query(..., min_length=1, description="Song, artist or vibe"),
    limit: int = Query(6, ge=1, le=50)
):
    config = search_service.config.with_overrides(max_results=limit)
    songs = search_service.search(q, config=config)
    return _response(q, songs)


@app.post("/search")
def search_post(request: SearchRequest):
    config = search_service.config.with_overrides(
        max_results=request.max_results,
        min_quality_score=request.min_quality_score,
        prioritize_popularity=request.prioritize_popularity,
        ensure_genre_diversity=request.ensure_genre_diversity,
    )
    songs = search_service.search(request.query, config=config)
    return _response(request.query, songs)
