"""Match category API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from powerball_watch.api.deps import get_dispatcher
from powerball_watch.schemas.check import CategorySchema
from powerball_watch.services.categories import MATCH_CATEGORIES, get_category
from powerball_watch.services.notifier import Notifier, send_test_notifications

router = APIRouter()


@router.get("", response_model=list[CategorySchema])
async def list_categories():
    """All notification tiers, lowest first."""
    return [c.to_schema() for c in MATCH_CATEGORIES]


@router.get("/{category_id}", response_model=CategorySchema)
async def get_one(category_id: str):
    category = get_category(category_id)
    if not category:
        raise HTTPException(status_code=404, detail=f"Category {category_id} not found")
    return category.to_schema()


@router.post("/test")
async def test_notifications(notifier: Notifier = Depends(get_dispatcher)):
    """Send a test notification for every category."""
    return await send_test_notifications(notifier)
