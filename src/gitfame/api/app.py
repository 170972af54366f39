"""FastAPI application instance for the Git Fame API."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..errors import GitFameError
from ..logging_utils import configure_logging
from . import __version__
from .routes import router as api_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Git Fame API",
    description="Per-contributor line, commit and file attribution for git repositories",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

ERROR_STATUS_CODES = {
    "CONFIGURATION_INVALID": 400,
}


@app.exception_handler(GitFameError)
async def git_fame_exception_handler(request: Request, exc: GitFameError):
    """Render known failures as an error envelope."""
    status_code = ERROR_STATUS_CODES.get(exc.code, 500)
    logger.warning(
        "Known git fame error",
        extra={"path": str(request.url.path), "code": exc.code},
    )
    return JSONResponse(
        status_code=status_code,
        content={"ok": False, "error": exc.to_dict()},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return a consistent error envelope for uncaught exceptions."""
    return JSONResponse(
        status_code=500,
        content={
            "ok": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": f"Internal server error: {str(exc)}",
                "details": {
                    "exception_type": type(exc).__name__,
                    "path": str(request.url.path),
                },
            },
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
