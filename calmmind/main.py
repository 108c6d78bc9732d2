import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calmmind.analysis import routes as analysis_router
from calmmind.analysis.ai_providers.base import GenerationClient
from calmmind.auth import routes as auth_router
from calmmind.core.config import Settings, load_settings
from calmmind.core.dependency import build_generation_client, build_storage
from calmmind.journals import routes as journals_router
from calmmind.storage.base import Storage
from calmmind.system import routes as system_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    storage: Optional[Storage] = None,
    generation_client: Optional[GenerationClient] = None,
) -> FastAPI:
    """
    Builds the API. The storage backend and the generation client are
    created once here and shared by every request.
    """
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="CalmMind API",
        version="1.0.0",
        description="Backend for CalmMind: mood journaling and AI-driven wellness analysis.",
    )

    app.state.settings = settings
    app.state.storage = storage or build_storage(settings)
    app.state.generation_client = generation_client or build_generation_client(settings)

    # CORS config
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Errors raised as HTTPException render as {message}, like the analysis error bodies.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"message": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
        )

    # Routers
    app.include_router(auth_router.router)
    app.include_router(analysis_router.router)
    app.include_router(journals_router.router)
    app.include_router(system_router.router)

    logger.info(
        f"CalmMind API ready (storage={app.state.storage.backend}, model={settings.openai_chat_model})"
    )
    return app


app = create_app()
