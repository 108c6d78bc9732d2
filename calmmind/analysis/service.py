import datetime
import logging
from typing import Optional

from pydantic import BaseModel

from calmmind.analysis.ai_providers.base import GenerationClient
from calmmind.analysis.errors import ConfigurationError
from calmmind.analysis.normalizer import normalize
from calmmind.analysis.prompts.builder import build_prompt
from calmmind.analysis.schemas import (
    AnalysisRequest,
    DailyTips,
    DailyTipsRequest,
    MoodAnalysis,
    MoodAnalysisRequest,
    RelationshipAnalysis,
    SocialMediaAnalysis,
    TaskKind,
    TextAnalysisRequest,
    ThoughtClarification,
)
from calmmind.analysis.tasks import (
    SELECTED_MOOD_EMOTIONS,
    SELECTED_MOOD_SUGGESTIONS,
    TASKS,
)
from calmmind.journals.schemas import (
    DailyTipBase,
    DailyTipCreate,
    JournalEntryBase,
    JournalEntryCreate,
    MoodHistoryCreate,
)
from calmmind.storage.base import Storage

logger = logging.getLogger(__name__)


def today() -> str:
    return datetime.datetime.now(datetime.timezone.utc).date().isoformat()


def ensure_configured(client: GenerationClient) -> None:
    """Fails fast instead of making a call that cannot succeed."""
    if not client.is_configured:
        logger.error("Missing OPENAI_API_KEY environment variable")
        raise ConfigurationError()


def run_analysis(
    request: AnalysisRequest,
    client: GenerationClient,
    fallback: Optional[BaseModel] = None,
) -> BaseModel:
    """
    Prompt -> generation -> normalization for one task.

    Args:
        request (AnalysisRequest): Task and user input.
        client (GenerationClient): Outbound model client.
        fallback (BaseModel, optional): Overrides the task's static fallback.

    Returns:
        BaseModel: The task's result schema, every field populated.

    Raises:
        GenerationError: Propagated unchanged from the client.
    """
    task = TASKS[request.task_kind]
    prompt = build_prompt(request)
    result = client.generate(prompt)
    return normalize(result.raw_text, fallback if fallback is not None else task.fallback)


# Per-task entry points
def analyze_mood(body: MoodAnalysisRequest, client: GenerationClient) -> MoodAnalysis:
    if not body.text and body.selected_mood:
        # Mood picked without text: nothing to analyze.
        return MoodAnalysis(
            mood=body.selected_mood,
            score=body.selected_mood_score if body.selected_mood_score is not None else 0.5,
            emotions=[e.model_copy() for e in SELECTED_MOOD_EMOTIONS],
            suggestions=list(SELECTED_MOOD_SUGGESTIONS),
        )

    fallback = TASKS[TaskKind.MOOD].fallback
    if body.selected_mood:
        update = {"mood": body.selected_mood}
        if body.selected_mood_score is not None:
            update["score"] = body.selected_mood_score
        fallback = fallback.model_copy(update=update)

    request = AnalysisRequest(
        task_kind=TaskKind.MOOD,
        input_text=body.text,
        selected_mood=body.selected_mood,
        selected_mood_score=body.selected_mood_score,
        language=body.language,
    )
    return run_analysis(request, client, fallback)


def clarify_thoughts(body: TextAnalysisRequest, client: GenerationClient) -> ThoughtClarification:
    request = AnalysisRequest(task_kind=TaskKind.THOUGHTS, input_text=body.text, language=body.language)
    return run_analysis(request, client)


def analyze_relationship(body: TextAnalysisRequest, client: GenerationClient) -> RelationshipAnalysis:
    request = AnalysisRequest(task_kind=TaskKind.RELATIONSHIP, input_text=body.text, language=body.language)
    return run_analysis(request, client)


def generate_daily_tips(body: DailyTipsRequest, client: GenerationClient) -> DailyTips:
    request = AnalysisRequest(
        task_kind=TaskKind.DAILY_TIPS,
        selected_mood=body.mood,
        selected_mood_score=body.mood_score,
        language=body.language,
    )
    return run_analysis(request, client)


def analyze_social_media(body: TextAnalysisRequest, client: GenerationClient) -> SocialMediaAnalysis:
    request = AnalysisRequest(task_kind=TaskKind.SOCIAL_MEDIA, input_text=body.text, language=body.language)
    return run_analysis(request, client)


# Persistence for the session user
def record_mood_analysis(
    storage: Storage, user_id: int, body: MoodAnalysisRequest, analysis: MoodAnalysis
) -> JournalEntryBase:
    """Stores the journal entry and a mood history row pointing at it."""
    date = today()
    entry = storage.create_journal_entry(
        JournalEntryCreate(
            user_id=user_id,
            text=body.text or "",
            date=date,
            mood=analysis.mood,
            mood_score=analysis.score,
            emotions=analysis.emotions,
            language=body.language,
        )
    )
    storage.create_mood_history(
        MoodHistoryCreate(
            user_id=user_id,
            date=date,
            mood=analysis.mood,
            score=analysis.score,
            journal_entry_id=entry.id,
        )
    )
    logger.info(f"Saved mood analysis for user {user_id} as journal entry {entry.id}")
    return entry


def record_thoughts(storage: Storage, user_id: int, body: TextAnalysisRequest) -> JournalEntryBase:
    entry = storage.create_journal_entry(
        JournalEntryCreate(user_id=user_id, text=body.text, date=today(), language=body.language)
    )
    logger.info(f"Saved thought clarification for user {user_id} as journal entry {entry.id}")
    return entry


def record_daily_tips(storage: Storage, user_id: int, body: DailyTipsRequest, tips: DailyTips) -> DailyTipBase:
    tip = storage.create_daily_tip(
        DailyTipCreate(
            user_id=user_id,
            date=today(),
            affirmation=tips.affirmation,
            meditation=tips.meditation,
            self_care=tips.self_care,
            mood=body.mood,
            language=body.language,
        )
    )
    logger.info(f"Saved daily tip {tip.id} for user {user_id}")
    return tip
