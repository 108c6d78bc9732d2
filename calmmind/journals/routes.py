from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, Security

from calmmind.auth.service import get_current_user_id
from calmmind.core.dependency import get_storage
from calmmind.journals.schemas import (
    DailyTipBase,
    JournalEntryBase,
    MoodHistoryBase,
    SyncRequest,
    SyncResponse,
)
from calmmind.storage.base import Storage

router = APIRouter(prefix="/api", tags=["Journals"])
logger = logging.getLogger(__name__)


@router.post(
    "/sync",
    response_model=SyncResponse,
    summary="Upload locally stored records",
    description="Stores every posted journal entry, mood history row and daily tip for the authenticated user.",
    responses={
        200: {"description": "Records stored."},
        401: {"description": "User not authenticated."},
    },
)
def sync_route(
    body: SyncRequest,
    storage: Storage = Depends(get_storage),
    user_id: int = Security(get_current_user_id),
) -> SyncResponse:
    # Records are always owned by the session user, whatever the payload says.
    for entry in body.journal:
        storage.create_journal_entry(entry.model_copy(update={"user_id": user_id}))
    for history in body.mood_history:
        storage.create_mood_history(history.model_copy(update={"user_id": user_id}))
    for tip in body.daily_tips:
        storage.create_daily_tip(tip.model_copy(update={"user_id": user_id}))

    logger.info(
        f"Synced {len(body.journal)} journal entries, {len(body.mood_history)} mood rows "
        f"and {len(body.daily_tips)} daily tips for user {user_id}"
    )
    return SyncResponse(success=True)


@router.get(
    "/mood-history",
    response_model=List[MoodHistoryBase],
    summary="Get mood history",
    responses={401: {"description": "User not authenticated."}},
)
def get_mood_history_route(
    storage: Storage = Depends(get_storage),
    user_id: int = Security(get_current_user_id),
) -> List[MoodHistoryBase]:
    try:
        return storage.get_mood_history_by_user_id(user_id)
    except Exception as e:
        logger.error(f"Error fetching mood history for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch mood history")


@router.get(
    "/journal",
    response_model=List[JournalEntryBase],
    summary="Get journal entries",
    responses={401: {"description": "User not authenticated."}},
)
def get_journal_route(
    storage: Storage = Depends(get_storage),
    user_id: int = Security(get_current_user_id),
) -> List[JournalEntryBase]:
    try:
        return storage.get_journal_entries_by_user_id(user_id)
    except Exception as e:
        logger.error(f"Error fetching journal entries for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch journal entries")


@router.get(
    "/daily-tips",
    response_model=List[DailyTipBase],
    summary="Get daily tips",
    responses={401: {"description": "User not authenticated."}},
)
def get_daily_tips_route(
    storage: Storage = Depends(get_storage),
    user_id: int = Security(get_current_user_id),
) -> List[DailyTipBase]:
    try:
        return storage.get_daily_tips_by_user_id(user_id)
    except Exception as e:
        logger.error(f"Error fetching daily tips for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch daily tips")
