from typing import Annotated, List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


Mood = Literal["very-sad", "sad", "neutral", "happy", "very-happy"]


class Emotion(BaseSchema):
    name: str
    percentage: Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]


# Journal entries
class JournalEntryCreate(BaseSchema):
    user_id: Optional[int] = None
    text: str
    date: str
    mood: Optional[str] = None
    mood_score: Optional[float] = None
    emotions: Optional[List[Emotion]] = None
    language: Optional[str] = "en"


class JournalEntryBase(JournalEntryCreate):
    id: int
    created_at: datetime


# Mood history
class MoodHistoryCreate(BaseSchema):
    user_id: Optional[int] = None
    date: str
    mood: str
    score: float
    journal_entry_id: Optional[int] = None


class MoodHistoryBase(MoodHistoryCreate):
    id: int
    created_at: datetime


# Daily tips
class DailyTipCreate(BaseSchema):
    user_id: Optional[int] = None
    date: str
    affirmation: str
    meditation: Optional[str] = None
    self_care: List[str]
    mood: Optional[str] = None
    language: Optional[str] = "en"


class DailyTipBase(DailyTipCreate):
    id: int
    created_at: datetime


class SyncRequest(BaseSchema):
    journal: List[JournalEntryCreate] = []
    mood_history: List[MoodHistoryCreate] = []
    daily_tips: List[DailyTipCreate] = []


class SyncResponse(BaseSchema):
    success: bool = True
