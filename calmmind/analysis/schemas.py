# schemas.py
from enum import Enum
from typing import Annotated, List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from calmmind.journals.schemas import Emotion, Mood


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TaskKind(str, Enum):
    MOOD = "mood"
    THOUGHTS = "thoughts"
    RELATIONSHIP = "relationship"
    DAILY_TIPS = "daily-tips"
    SOCIAL_MEDIA = "social-media"


# Request bodies
class MoodAnalysisRequest(BaseSchema):
    text: Optional[str] = None
    selected_mood: Optional[Mood] = None
    selected_mood_score: Optional[Annotated[float, Field(ge=0, le=1, allow_inf_nan=False)]] = None
    language: str = "en"


class TextAnalysisRequest(BaseSchema):
    text: Optional[str] = None
    language: str = "en"


class DailyTipsRequest(BaseSchema):
    mood: Optional[str] = None
    mood_score: Optional[float] = None
    language: str = "en"


class AnalysisRequest(BaseSchema):
    """Input of the prompt builder, independent of the HTTP body it came from."""
    task_kind: TaskKind
    input_text: Optional[str] = None
    selected_mood: Optional[str] = None
    selected_mood_score: Optional[float] = None
    language: str = "en"


# Normalized results
class MoodAnalysis(BaseSchema):
    mood: Mood
    score: Annotated[float, Field(ge=0, le=1, allow_inf_nan=False)]
    emotions: List[Emotion]
    suggestions: List[str]


class ThoughtClarification(BaseSchema):
    clarified_thoughts: str
    action_steps: List[str]


class RelationshipAnalysis(BaseSchema):
    compatibility_score: Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]
    communication_quality: Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]
    strengths: List[str]
    areas_to_improve: List[str]
    tips: List[str]


class DailyTips(BaseSchema):
    affirmation: str
    meditation: str
    self_care: List[str]


class SocialMediaAnalysis(BaseSchema):
    emotional_tone: str
    social_impression: str
    suggestions: List[str]
