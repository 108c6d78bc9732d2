from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from calmmind.analysis.ai_providers.base import GenerationClient
from calmmind.core.config import Settings
from calmmind.core.dependency import get_generation_client, get_settings, get_storage
from calmmind.storage.base import Storage

router = APIRouter(prefix="/api", tags=["System"])


class HealthResponse(BaseModel):
    status: str
    storage: str
    model: str
    api_key_configured: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


@router.get("/health", response_model=HealthResponse)
def health_route(
    settings: Settings = Depends(get_settings),
    storage: Storage = Depends(get_storage),
    client: GenerationClient = Depends(get_generation_client),
) -> HealthResponse:
    # Reports configuration only; no outbound call is made.
    return HealthResponse(
        status="ok",
        storage=storage.backend,
        model=settings.openai_chat_model,
        api_key_configured=client.is_configured,
    )
