import itertools
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel

from calmmind.auth.schemas import UserBase, UserCreate
from calmmind.journals.schemas import (
    DailyTipBase,
    DailyTipCreate,
    JournalEntryBase,
    JournalEntryCreate,
    MoodHistoryBase,
    MoodHistoryCreate,
)
from calmmind.storage.base import Storage

RecordT = TypeVar("RecordT", bound=BaseModel)


class _Table:
    """
    One entity: id -> record plus its own id counter starting at 1.

    Callers always get copies, so mutating a returned record leaves the
    stored one untouched.
    """

    def __init__(self) -> None:
        self.rows: Dict[int, BaseModel] = {}
        self.ids = itertools.count(1)

    def insert(self, record_cls: Type[RecordT], data: BaseModel, lock: threading.Lock) -> RecordT:
        with lock:
            record_id = next(self.ids)
            record = record_cls(
                **data.model_dump(),
                id=record_id,
                created_at=datetime.now(timezone.utc),
            )
            self.rows[record_id] = record
        return record.model_copy(deep=True)

    def get(self, record_id: int):
        row = self.rows.get(record_id)
        return row.model_copy(deep=True) if row else None

    def find(self, predicate) -> list:
        return [row.model_copy(deep=True) for row in list(self.rows.values()) if predicate(row)]

    def by_user(self, user_id: int) -> list:
        return self.find(lambda row: row.user_id == user_id)


class MemStorage(Storage):
    """
    Process-local storage. Everything is lost on restart.

    Sync routes are served from a thread pool, so id assignment and inserts
    happen under a single lock.
    """

    backend = "memory"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.users = _Table()
        self.journal_entries = _Table()
        self.mood_histories = _Table()
        self.daily_tips = _Table()

    # Users
    def get_user(self, user_id: int) -> Optional[UserBase]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserBase]:
        matches = self.users.find(lambda user: user.username == username)
        return matches[0] if matches else None

    def create_user(self, user: UserCreate) -> UserBase:
        return self.users.insert(UserBase, user, self._lock)

    # Journal entries
    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntryBase]:
        return self.journal_entries.get(entry_id)

    def get_journal_entries_by_user_id(self, user_id: int) -> List[JournalEntryBase]:
        return self.journal_entries.by_user(user_id)

    def create_journal_entry(self, entry: JournalEntryCreate) -> JournalEntryBase:
        return self.journal_entries.insert(JournalEntryBase, entry, self._lock)

    # Mood history
    def get_mood_history(self, history_id: int) -> Optional[MoodHistoryBase]:
        return self.mood_histories.get(history_id)

    def get_mood_history_by_user_id(self, user_id: int) -> List[MoodHistoryBase]:
        return self.mood_histories.by_user(user_id)

    def create_mood_history(self, history: MoodHistoryCreate) -> MoodHistoryBase:
        return self.mood_histories.insert(MoodHistoryBase, history, self._lock)

    # Daily tips
    def get_daily_tip(self, tip_id: int) -> Optional[DailyTipBase]:
        return self.daily_tips.get(tip_id)

    def get_daily_tips_by_user_id(self, user_id: int) -> List[DailyTipBase]:
        return self.daily_tips.by_user(user_id)

    def create_daily_tip(self, tip: DailyTipCreate) -> DailyTipBase:
        return self.daily_tips.insert(DailyTipBase, tip, self._lock)
