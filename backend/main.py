"""
Melody Magic Server — FastAPI Application

Gates a mocked Suno audio generation behind PayPal order verification.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from domain.errors import DomainError, InvalidRequestBodyError
from middleware.body_limit import BodySizeLimitMiddleware
from routes import generate, health

# ── Logging ─────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: validate settings and announce the PayPal mode."""
    settings.validate_startup_settings()
    logger.info(
        f"✅ Melody Magic server ready (PayPal {'live' if settings.is_live else 'sandbox'} "
        f"→ {settings.paypal_base_url})"
    )

    yield  # app runs here

    logger.info("Shutting down")


# ── App Factory ─────────────────────────────────────────────────────

app = FastAPI(
    title="Melody Magic Server",
    description="Mock Suno generation gated behind PayPal order verification",
    version="1.0.0",
    lifespan=lifespan,
)

# Body size cap (inner) then CORS (outer, so rejections still carry CORS headers)
app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routes ──────────────────────────────────────────────────────────

app.include_router(health.router)
app.include_router(generate.router)


# ── Exception Handlers ──────────────────────────────────────────────


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    Catch-all for unhandled exceptions.

    Never return raw exception details to clients; the traceback is
    logged server-side.
    """
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    """Render every HTTP error as {error, message?}, keeping the status code."""
    if isinstance(exc, DomainError):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_body(),
            headers=exc.headers,
        )

    detail = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail if isinstance(detail, str) else "Request failed"},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    """Bodies that are not a JSON object of strings get a plain 400."""
    fields = sorted({
        err["loc"][-1] for err in exc.errors()
        if len(err.get("loc", ())) > 1 and err["loc"][0] == "body" and isinstance(err["loc"][-1], str)
    })
    error = InvalidRequestBodyError(
        f"Invalid fields: {', '.join(fields)}" if fields else None
    )
    return JSONResponse(status_code=error.status_code, content=error.to_body())


# ── Entrypoint ──────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    logger.info(f"✅ Melody Magic server listening on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
