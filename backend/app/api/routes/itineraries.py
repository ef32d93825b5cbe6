"""Itinerary endpoints - generate, save, list, fetch, delete, PDF export."""

import uuid
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.app.api.auth import get_current_context
from backend.app.db.catalog_loader import load_catalog
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_engine, get_session
from backend.app.db.repositories import ItineraryRepository
from backend.app.db.sql_repositories import SqlItineraryRepository
from backend.app.models.itinerary import ItineraryDocument, ItineraryResult, SavedItinerary
from backend.app.models.trip import TripRequest
from backend.app.planning.errors import SynthesisError
from backend.app.planning.export import render_itinerary_pdf
from backend.app.planning.planner import plan_trip

router = APIRouter(prefix="/itineraries", tags=["itineraries"])


class SaveItineraryRequest(BaseModel):
    """Request body for POST /itineraries.

    When ``result`` is omitted the itinerary is generated again from the
    current catalog before saving.
    """

    title: str | None = Field(None, max_length=200)
    request: TripRequest
    result: ItineraryResult | None = None


class SaveItineraryResponse(BaseModel):
    """Response for POST /itineraries."""

    itinerary_id: str
    title: str


class ItinerarySummaryResponse(BaseModel):
    """Row of GET /itineraries."""

    itinerary_id: str
    title: str
    days: int
    guests: int
    interests: list[str]
    total_cost: float
    created_at: datetime


def get_itinerary_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ItineraryRepository:
    """FastAPI dependency for the itinerary repository."""
    return SqlItineraryRepository(session)


def _synthesis_http_error(e: SynthesisError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"code": e.code.value, "message": e.message},
    )


def _parse_id(itinerary_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(itinerary_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid itinerary_id format",
        ) from e


def _default_title(request: TripRequest) -> str:
    return request.title or f"{request.days}-Day Sri Lanka Trip"


def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


async def _generate(request: TripRequest, engine: AsyncEngine) -> ItineraryResult:
    catalog = await load_catalog(engine)
    try:
        return plan_trip(request, catalog)
    except SynthesisError as e:
        raise _synthesis_http_error(e) from e


@router.post("/generate", response_model=ItineraryResult)
async def generate_itinerary(
    request: TripRequest,
    engine: Annotated[AsyncEngine, Depends(get_engine)],
) -> ItineraryResult:
    """Generate a day-by-day itinerary from the current catalog.

    Returns:
        Generated itinerary

    Raises:
        HTTPException: 422 with {code, message} when the request is rejected
    """
    return await _generate(request, engine)


@router.post("", response_model=SaveItineraryResponse, status_code=status.HTTP_201_CREATED)
async def save_itinerary(
    body: SaveItineraryRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    engine: Annotated[AsyncEngine, Depends(get_engine)],
    repo: Annotated[ItineraryRepository, Depends(get_itinerary_repository)],
) -> SaveItineraryResponse:
    """Save an itinerary for the caller."""
    result = body.result or await _generate(body.request, engine)
    title = body.title or _default_title(body.request)

    document = ItineraryDocument(request=body.request, result=result)
    itinerary_id = await repo.save_itinerary(title, document, ctx)

    return SaveItineraryResponse(itinerary_id=str(itinerary_id), title=title)


@router.get("", response_model=list[ItinerarySummaryResponse])
async def list_itineraries(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[ItineraryRepository, Depends(get_itinerary_repository)],
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
) -> list[ItinerarySummaryResponse]:
    """List the caller's saved itineraries, newest first."""
    summaries = await repo.list_itineraries(ctx, limit=limit)
    return [
        ItinerarySummaryResponse(
            itinerary_id=str(s.itinerary_id),
            title=s.title,
            days=s.days,
            guests=s.guests,
            interests=s.interests,
            total_cost=s.total_cost,
            created_at=s.created_at,
        )
        for s in summaries
    ]


@router.post("/export/pdf")
async def export_unsaved_pdf(document: ItineraryDocument) -> Response:
    """Render an unsaved itinerary as PDF."""
    content = render_itinerary_pdf(document.request, document.result)
    return _pdf_response(content, "itinerary.pdf")


@router.get("/{itinerary_id}", response_model=SavedItinerary)
async def get_itinerary(
    itinerary_id: str,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[ItineraryRepository, Depends(get_itinerary_repository)],
) -> SavedItinerary:
    """Fetch one saved itinerary.

    Raises:
        HTTPException: 404 if missing or owned by someone else
    """
    saved = await repo.get_itinerary(_parse_id(itinerary_id), ctx)
    if saved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")
    return saved


@router.delete("/{itinerary_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_itinerary(
    itinerary_id: str,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[ItineraryRepository, Depends(get_itinerary_repository)],
) -> Response:
    """Delete one saved itinerary."""
    deleted = await repo.delete_itinerary(_parse_id(itinerary_id), ctx)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{itinerary_id}/pdf")
async def export_saved_pdf(
    itinerary_id: str,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[ItineraryRepository, Depends(get_itinerary_repository)],
) -> Response:
    """Render a saved itinerary as PDF."""
    saved = await repo.get_itinerary(_parse_id(itinerary_id), ctx)
    if saved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")

    content = render_itinerary_pdf(
        saved.document.request, saved.document.result, title=saved.title
    )
    return _pdf_response(content, f"itinerary-{saved.itinerary_id[:8]}.pdf")
