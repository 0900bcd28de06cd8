import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import alerts, analytics, entries, privacy
from app.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="GutCheck", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Return client errors as JSON and log server-side failures."""
    if exc.status_code >= 500:
        logger.error(
            "Request failed: method=%s, path=%s, detail=%s",
            request.method,
            request.url.path,
            exc.detail,
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Include routers
app.include_router(entries.router)
app.include_router(analytics.router)
app.include_router(alerts.router)
app.include_router(privacy.router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
