from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, func
from calmmind.core.database import Base


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=True)

    text = Column(String, nullable=False)
    date = Column(String, nullable=False)  # YYYY-MM-DD
    mood = Column(String, nullable=True)
    mood_score = Column(Float, nullable=True)
    emotions = Column(JSON, nullable=True)  # [{name, percentage}]
    language = Column(String, default="en")
    created_at = Column(DateTime, server_default=func.now())


class MoodHistory(Base):
    __tablename__ = "mood_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=True)

    date = Column(String, nullable=False)
    mood = Column(String, nullable=False)
    score = Column(Float, nullable=False)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class DailyTip(Base):
    __tablename__ = "daily_tips"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=True)

    date = Column(String, nullable=False)
    affirmation = Column(String, nullable=False)
    meditation = Column(String, nullable=True)
    self_care = Column(JSON, nullable=False)  # [str]
    mood = Column(String, nullable=True)
    language = Column(String, default="en")
    created_at = Column(DateTime, server_default=func.now())
