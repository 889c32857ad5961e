"""
Recorder Dashboard - FastAPI Application

Local service that files recorded Playwright test cases into the
project context document.
"""

import logging

import structlog
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recorder_dashboard import __version__
from recorder_dashboard.config import settings
from recorder_dashboard.api import api_router


def configure_logging():
    """Configure structured logging."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
            if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    """
    logger = structlog.get_logger()

    logger.info(
        "application_starting",
        version=__version__,
        environment=settings.app_env,
        context_document=settings.context_document_path,
    )

    yield

    logger.info("application_shutting_down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    configure_logging()

    app = FastAPI(
        title="Recorder Dashboard",
        description="""
## Recorded Test Cases into Project Context

Send the code produced by Playwright codegen together with a short
description of the test case. The service:
- **Extracts page elements** from locator, role, text, label,
  placeholder, click, fill and type calls
- **Names them** by heuristic category (`BUTTON_1`, `TEXTBOX_2`, ...)
- **Patches PROJECT_CONTEXT.md** without touching existing content

### Quick Start

```
POST /api/v1/testcases
{
  "name": "Login",
  "description": "Verify login",
  "steps": "Enter credentials and submit",
  "browser": "chromium",
  "url": "https://example.com/login",
  "timestamp": "2024-01-15T10:30:00",
  "playwrightCode": "await page.locator('#submitBtn').click();"
}
```
        """,
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "name": "Recorder Dashboard",
            "version": __version__,
            "docs": "/docs" if settings.is_development else "Disabled in production",
            "api": "/api/v1",
        }

    # Undecodable JSON and schema violations
    @app.exception_handler(RequestValidationError)
    async def malformed_input_handler(request: Request, exc: RequestValidationError):
        logger = structlog.get_logger()
        errors = exc.errors()
        logger.warning("malformed_input", path=request.url.path, errors=len(errors))

        detail = errors[0]["msg"] if errors else "invalid request body"
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": f"Malformed request: {detail}"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        logger = structlog.get_logger()
        logger.exception("unhandled_exception", error=str(exc))

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.is_development else "An error occurred",
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recorder_dashboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
