"""
Customer Feedback Analysis API - Main FastAPI Application
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
import logging

from .config import Settings
from .middleware import BodySizeLimitMiddleware
from .routes import analysis, health


# API Description for Swagger UI
API_DESCRIPTION = """
## Customer Feedback Analysis API

Sends customer feedback to Claude and returns structured JSON insights.

---

### Endpoints

| Endpoint | Input | Output |
|----------|-------|--------|
| `POST /api/analyze` | `{"feedback": "..."}` | Sentiment, issues, action items, summary |
| `POST /api/analyze-bulk` | `{"csvData": "..."}` | Aggregate sentiment, issue categories, recommendations, metadata |
| `GET /api/health` | - | Service status |

---

### Bulk CSV Handling

- The first row is the header. Feedback columns are detected from header names
  (feedback, comment, review, text, message, description, ...). If none match,
  the first column is used.
- Only the first 50 data rows are scanned. Values of 10 characters or fewer are ignored.
- At most 25 entries are sent to the model. `metadata` reports the true counts.
- Quoted fields may contain commas and doubled quotes (`""`), but not line breaks.

---

### Errors

All errors are JSON objects with an `error` field, plus `details`, `message`
or `rawResponse` depending on the failure.
"""

# Tags for organizing endpoints in Swagger UI
TAGS_METADATA = [
    {
        "name": "Analysis",
        "description": "Single and bulk feedback analysis.",
    },
    {
        "name": "Health",
        "description": "Service health and readiness checks.",
    },
]

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown"""
    settings: Settings = app.state.settings

    # Startup
    logger.info("Starting Customer Feedback Analysis API...")
    logger.info(f"Port: {settings.PORT}")
    logger.info(f"Model: {settings.LLM_MODEL}")

    if settings.static_path.exists():
        logger.info(f"Serving files from {settings.static_path}")
    else:
        logger.warning(f"Static directory not found: {settings.static_path}")

    # Check for API key
    if not settings.CLAUDE_API_KEY:
        logger.warning("CLAUDE_API_KEY not set - analysis requests will fail")

    yield

    # Shutdown
    logger.info("Shutting down Customer Feedback Analysis API...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one immutable Settings instance"""
    settings = settings or Settings()
    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="Customer Feedback Analysis API",
        description=API_DESCRIPTION,
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=TAGS_METADATA,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Reject bodies larger than MAX_BODY_MB before they are parsed
    app.add_middleware(BodySizeLimitMiddleware, max_body_mb=settings.MAX_BODY_MB)

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "details": errors}
        )

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.error(f"Server Error: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)}
        )

    # Include routers
    app.include_router(analysis.router, prefix="/api", tags=["Analysis"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    @app.get("/", include_in_schema=False)
    async def root():
        """Serve the upload UI entry page"""
        index_path = settings.static_path / "index.html"
        if not index_path.exists():
            return JSONResponse(
                status_code=404,
                content={"error": "UI not found", "details": f"Missing {index_path}"}
            )
        return FileResponse(index_path)

    # Mount the UI directory last so API routes take precedence
    if settings.static_path.exists():
        app.mount("/", StaticFiles(directory=str(settings.static_path)), name="static")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.settings.HOST, port=app.state.settings.PORT)
