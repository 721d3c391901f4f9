"""Draw check API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from powerball_watch.api.deps import get_client, get_dispatcher, get_store
from powerball_watch.config import settings
from powerball_watch.schemas.check import CheckResult, CheckStatusResponse
from powerball_watch.schemas.draw import format_draw_date
from powerball_watch.scraper.draw_client import DrawPageClient
from powerball_watch.scraper.scheduler import get_scheduler_status
from powerball_watch.services.check_service import cycle_lock, get_last_result, run_check_cycle
from powerball_watch.services.notifier import Notifier
from powerball_watch.services.preference_store import PreferenceStore

router = APIRouter()


@router.post("/trigger", response_model=CheckResult)
async def trigger_check(
    client: DrawPageClient = Depends(get_client),
    store: PreferenceStore = Depends(get_store),
    notifier: Notifier = Depends(get_dispatcher),
):
    """Run one check cycle now."""
    if cycle_lock.locked():
        raise HTTPException(status_code=409, detail="A check is already running")
    async with cycle_lock:
        return await run_check_cycle(
            client=client, store=store, notifier=notifier, url=settings.DRAW_PAGE_URL,
        )


@router.get("/status", response_model=CheckStatusResponse)
async def check_status(store: PreferenceStore = Depends(get_store)):
    """Cursor, last cycle outcome and scheduled jobs."""
    cursor = await store.read_cursor()
    last_date = cursor.last_known_draw_date
    return CheckStatusResponse(
        last_known_draw_date=format_draw_date(last_date) if last_date else None,
        last_result=get_last_result(),
        scheduler_jobs=get_scheduler_status(),
    )
