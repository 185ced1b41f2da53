"""Shader generator FastAPI server."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shader_generator.models import (
    GenerateShaderRequest,
    GenerateShaderResponse,
    ErrorResponse,
)
from shader_generator.services import groq_service
from shader_generator.services.groq_service import ShaderGenerationError
from shader_generator.config import REQUEST_TIMEOUT_SECONDS, Settings, load_settings

logger = logging.getLogger(__name__)

INVALID_PROMPT_ERROR = "Invalid or missing prompt"
UPSTREAM_ERROR = "Groq API Error"


def _error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _new_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(REQUEST_TIMEOUT_SECONDS))


# ── Dependencies ────────────────────────────────────────────────


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


# ── App Factory ─────────────────────────────────────────────────


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Build the API.

    An injected http_client is used as-is and left open; otherwise the app
    opens its own client on startup and closes it on shutdown.
    """
    settings = settings or load_settings()
    owns_client = http_client is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_client:
            app.state.http_client = _new_http_client()
        logger.info(f"Starting shader generator on port {settings.port}")
        yield
        if owns_client:
            await app.state.http_client.aclose()
            app.state.http_client = None

    app = FastAPI(
        title="Shader Generator",
        description="Generate GLSL fragment shaders from text descriptions using Groq",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.http_client = http_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Unknown paths and wrong methods both answer 404 in plain text
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not found", status_code=404)
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.post(
        "/api/generate-shader",
        response_model=GenerateShaderResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def generate(
        request: Request,
        settings: Settings = Depends(get_settings),
        client: httpx.AsyncClient = Depends(get_http_client),
    ):
        logger.info("Received shader generation request")

        # Parsed by hand so every malformed body maps to the same 400
        try:
            req = GenerateShaderRequest.model_validate_json(await request.body())
        except ValidationError:
            logger.warning("Invalid request: missing or empty prompt")
            return _error_response(400, INVALID_PROMPT_ERROR)

        logger.info(f"Processing prompt: {req.prompt}")
        try:
            shader_code = await groq_service.generate_shader(req.prompt, settings, client)
        except ShaderGenerationError as e:
            logger.error(f"Failed to generate shader: {e}")
            return _error_response(500, UPSTREAM_ERROR, details=str(e))

        logger.info("Successfully generated shader code")
        return GenerateShaderResponse(shader_code=shader_code)

    @app.get("/health", response_class=PlainTextResponse)
    async def health():
        return "OK"

    return app


app = create_app()


# ── Main ────────────────────────────────────────────────────────


def run() -> None:
    import uvicorn

    settings = app.state.settings
    logging.basicConfig(
        level=settings.python_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
