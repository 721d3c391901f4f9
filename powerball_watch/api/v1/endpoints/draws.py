"""Latest draw API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from powerball_watch.api.deps import get_client
from powerball_watch.config import settings
from powerball_watch.errors import ConnectivityError, ParseFailure
from powerball_watch.schemas.draw import LatestDrawSchema
from powerball_watch.scraper.draw_client import DrawPageClient
from powerball_watch.scraper.parsers.powerball_parser import parse_latest_result

router = APIRouter()


@router.get("/latest", response_model=LatestDrawSchema)
async def get_latest(client: DrawPageClient = Depends(get_client)):
    """Fetch the draw page now and return the latest result."""
    try:
        rows = await client.fetch(settings.DRAW_PAGE_URL)
    except ConnectivityError as e:
        raise HTTPException(status_code=503, detail=f"Draw data unavailable: {e}")
    try:
        return parse_latest_result(rows)
    except ParseFailure as e:
        raise HTTPException(status_code=502, detail=f"Unexpected draw page format: {e}")
