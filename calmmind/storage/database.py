from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from calmmind.auth.models import User
from calmmind.auth.schemas import UserBase, UserCreate
from calmmind.journals.models import DailyTip, JournalEntry, MoodHistory
from calmmind.journals.schemas import (
    DailyTipBase,
    DailyTipCreate,
    JournalEntryBase,
    JournalEntryCreate,
    MoodHistoryBase,
    MoodHistoryCreate,
)
from calmmind.storage.base import Storage


class DatabaseStorage(Storage):
    """
    Relational storage backed by SQLAlchemy.

    Ids come from the table's autoincrement and `created_at` from the server
    default. Each call opens and closes its own session.
    """

    backend = "database"

    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory

    def _get(self, model, schema, record_id: int):
        with self.session_factory() as db:
            row = db.get(model, record_id)
            return schema.model_validate(row) if row else None

    def _by_user(self, model, schema, user_id: int) -> list:
        with self.session_factory() as db:
            rows = db.query(model).filter(model.user_id == user_id).all()
            return [schema.model_validate(row) for row in rows]

    def _create(self, model, schema, data):
        """
        Inserts a row built from a Pydantic create schema.

        Args:
            model: SQLAlchemy model class.
            schema: Pydantic schema for the stored record.
            data: Pydantic create schema.

        Returns:
            The stored record, including `id` and `created_at`.
        """
        with self.session_factory() as db:
            row = model(**data.model_dump(mode="json"))
            db.add(row)
            db.commit()
            db.refresh(row)
            return schema.model_validate(row)

    # Users
    def get_user(self, user_id: int) -> Optional[UserBase]:
        return self._get(User, UserBase, user_id)

    def get_user_by_username(self, username: str) -> Optional[UserBase]:
        with self.session_factory() as db:
            row = db.query(User).filter(User.username == username).first()
            return UserBase.model_validate(row) if row else None

    def create_user(self, user: UserCreate) -> UserBase:
        return self._create(User, UserBase, user)

    # Journal entries
    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntryBase]:
        return self._get(JournalEntry, JournalEntryBase, entry_id)

    def get_journal_entries_by_user_id(self, user_id: int) -> List[JournalEntryBase]:
        return self._by_user(JournalEntry, JournalEntryBase, user_id)

    def create_journal_entry(self, entry: JournalEntryCreate) -> JournalEntryBase:
        return self._create(JournalEntry, JournalEntryBase, entry)

    # Mood history
    def get_mood_history(self, history_id: int) -> Optional[MoodHistoryBase]:
        return self._get(MoodHistory, MoodHistoryBase, history_id)

    def get_mood_history_by_user_id(self, user_id: int) -> List[MoodHistoryBase]:
        return self._by_user(MoodHistory, MoodHistoryBase, user_id)

    def create_mood_history(self, history: MoodHistoryCreate) -> MoodHistoryBase:
        return self._create(MoodHistory, MoodHistoryBase, history)

    # Daily tips
    def get_daily_tip(self, tip_id: int) -> Optional[DailyTipBase]:
        return self._get(DailyTip, DailyTipBase, tip_id)

    def get_daily_tips_by_user_id(self, user_id: int) -> List[DailyTipBase]:
        return self._by_user(DailyTip, DailyTipBase, user_id)

    def create_daily_tip(self, tip: DailyTipCreate) -> DailyTipBase:
        return self._create(DailyTip, DailyTipBase, tip)
