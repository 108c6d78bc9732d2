from fastapi import Request
import logging

from calmmind.analysis.ai_providers.base import GenerationClient
from calmmind.analysis.ai_providers.openai import OpenAIGenerationClient
from calmmind.core.config import Settings
from calmmind.core.database import create_tables, make_engine, make_session_factory
from calmmind.storage.base import Storage
from calmmind.storage.database import DatabaseStorage
from calmmind.storage.memory import MemStorage

logger = logging.getLogger(__name__)


# Built once at startup and kept on app.state
def build_generation_client(settings: Settings) -> GenerationClient:
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set. Analysis routes will answer with api_key_missing.")
    return OpenAIGenerationClient(
        settings.openai_api_key,
        settings.openai_chat_model,
        timeout=settings.openai_timeout,
    )


def build_storage(settings: Settings) -> Storage:
    if settings.storage_backend == "database":
        engine = make_engine(settings.database_url)
        create_tables(engine)
        logger.info("Using database storage")
        return DatabaseStorage(make_session_factory(engine))
    logger.info("Using in-memory storage")
    return MemStorage()


# FastAPI dependencies
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_generation_client(request: Request) -> GenerationClient:
    return request.app.state.generation_client
