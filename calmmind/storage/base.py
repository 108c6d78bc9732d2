from abc import ABC, abstractmethod
from typing import List, Optional

from calmmind.auth.schemas import UserBase, UserCreate
from calmmind.journals.schemas import (
    DailyTipBase,
    DailyTipCreate,
    JournalEntryBase,
    JournalEntryCreate,
    MoodHistoryBase,
    MoodHistoryCreate,
)


class Storage(ABC):
    """
    CRUD surface shared by every storage backend.

    Records are keyed by integer ids assigned on creation. Lists returned by
    the `*_by_user_id` methods carry no ordering guarantee.
    """

    backend: str

    # Users
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserBase]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserBase]: ...

    @abstractmethod
    def create_user(self, user: UserCreate) -> UserBase: ...

    # Journal entries
    @abstractmethod
    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntryBase]: ...

    @abstractmethod
    def get_journal_entries_by_user_id(self, user_id: int) -> List[JournalEntryBase]: ...

    @abstractmethod
    def create_journal_entry(self, entry: JournalEntryCreate) -> JournalEntryBase: ...

    # Mood history
    @abstractmethod
    def get_mood_history(self, history_id: int) -> Optional[MoodHistoryBase]: ...

    @abstractmethod
    def get_mood_history_by_user_id(self, user_id: int) -> List[MoodHistoryBase]: ...

    @abstractmethod
    def create_mood_history(self, history: MoodHistoryCreate) -> MoodHistoryBase: ...

    # Daily tips
    @abstractmethod
    def get_daily_tip(self, tip_id: int) -> Optional[DailyTipBase]: ...

    @abstractmethod
    def get_daily_tips_by_user_id(self, user_id: int) -> List[DailyTipBase]: ...

    @abstractmethod
    def create_daily_tip(self, tip: DailyTipCreate) -> DailyTipBase: ...
