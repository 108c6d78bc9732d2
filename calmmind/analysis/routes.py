from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Security
from fastapi.responses import JSONResponse

from calmmind.analysis.ai_providers.base import GenerationClient
from calmmind.analysis.errors import AnalysisError
from calmmind.analysis.schemas import (
    DailyTips,
    DailyTipsRequest,
    MoodAnalysis,
    MoodAnalysisRequest,
    RelationshipAnalysis,
    SocialMediaAnalysis,
    TextAnalysisRequest,
    ThoughtClarification,
)
from calmmind.analysis.service import (
    analyze_mood,
    analyze_relationship,
    analyze_social_media,
    clarify_thoughts,
    ensure_configured,
    generate_daily_tips,
    record_daily_tips,
    record_mood_analysis,
    record_thoughts,
)
from calmmind.auth.service import get_optional_user_id
from calmmind.core.dependency import get_generation_client, get_storage
from calmmind.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Analysis"])

UPSTREAM_RESPONSES = {
    400: {"description": "Required input missing."},
    401: {"description": "The model provider rejected the API key."},
    404: {"description": "The configured model was not found."},
    429: {"description": "The model provider rate limit was exceeded."},
    500: {"description": "API key missing or model call failed."},
}


def analysis_error_response(error: AnalysisError, failure_message: str) -> JSONResponse:
    """Renders an analysis failure as `{error, message}`."""
    message = failure_message if error.error_code == "api_error" else error.message
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.error_code, "message": message},
    )


@router.post(
    "/analyze/mood",
    response_model=MoodAnalysis,
    summary="Analyze mood from text and/or a selected mood",
    responses=UPSTREAM_RESPONSES,
)
def analyze_mood_route(
    body: MoodAnalysisRequest,
    client: GenerationClient = Depends(get_generation_client),
    storage: Storage = Depends(get_storage),
    user_id: Optional[int] = Security(get_optional_user_id),
):
    if not body.text and not body.selected_mood:
        raise HTTPException(status_code=400, detail="Either text or mood selection is required")

    try:
        ensure_configured(client)
        analysis = analyze_mood(body, client)
    except AnalysisError as e:
        logger.error(f"Error analyzing mood: {e}")
        return analysis_error_response(e, "Failed to analyze mood. Please try again later.")

    if user_id is not None:
        record_mood_analysis(storage, user_id, body, analysis)
    return analysis


@router.post(
    "/analyze/thoughts",
    response_model=ThoughtClarification,
    summary="Turn anxious or unclear thoughts into action steps",
    responses=UPSTREAM_RESPONSES,
)
def clarify_thoughts_route(
    body: TextAnalysisRequest,
    client: GenerationClient = Depends(get_generation_client),
    storage: Storage = Depends(get_storage),
    user_id: Optional[int] = Security(get_optional_user_id),
):
    if not body.text:
        raise HTTPException(status_code=400, detail="Text is required")

    try:
        ensure_configured(client)
        clarified = clarify_thoughts(body, client)
    except AnalysisError as e:
        logger.error(f"Error clarifying thoughts: {e}")
        return analysis_error_response(e, "Failed to clarify thoughts. Please try again later.")

    if user_id is not None:
        record_thoughts(storage, user_id, body)
    return clarified


@router.post(
    "/analyze/relationship",
    response_model=RelationshipAnalysis,
    summary="Analyze relationship dynamics",
    responses=UPSTREAM_RESPONSES,
)
def analyze_relationship_route(
    body: TextAnalysisRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    if not body.text:
        raise HTTPException(status_code=400, detail="Text is required")

    try:
        ensure_configured(client)
        return analyze_relationship(body, client)
    except AnalysisError as e:
        logger.error(f"Error analyzing relationship: {e}")
        return analysis_error_response(e, "Failed to analyze relationship. Please try again later.")


@router.post(
    "/generate/daily-tips",
    response_model=DailyTips,
    summary="Generate an affirmation, meditation and self-care tips",
    responses={k: v for k, v in UPSTREAM_RESPONSES.items() if k != 400},
)
def generate_daily_tips_route(
    body: DailyTipsRequest,
    client: GenerationClient = Depends(get_generation_client),
    storage: Storage = Depends(get_storage),
    user_id: Optional[int] = Security(get_optional_user_id),
):
    try:
        ensure_configured(client)
        tips = generate_daily_tips(body, client)
    except AnalysisError as e:
        logger.error(f"Error generating daily tips: {e}")
        return analysis_error_response(e, "Failed to generate daily tips. Please try again later.")

    if user_id is not None:
        record_daily_tips(storage, user_id, body, tips)
    return tips


@router.post(
    "/analyze/social-media",
    response_model=SocialMediaAnalysis,
    summary="Analyze the tone of a bio, caption or post",
    responses=UPSTREAM_RESPONSES,
)
def analyze_social_media_route(
    body: TextAnalysisRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    if not body.text:
        raise HTTPException(status_code=400, detail="Text is required")

    try:
        ensure_configured(client)
        return analyze_social_media(body, client)
    except AnalysisError as e:
        logger.error(f"Error analyzing social media: {e}")
        return analysis_error_response(e, "Failed to analyze social media content. Please try again later.")
