"""FastAPI application for the HTML formatter.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import traceback
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env from the project directory so HTMLFORMATTER_* defaults are set
load_dotenv(Path(__file__).resolve().parent / ".env")

from models.options import FormatOptions
from models.request import FormatRequest
from models.response import FormatResponse
from parsing.formatter import HtmlFormatter
from parsing.selectors import InvalidSelector


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("selector", "removed_count", "flatten_count", "element_id"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("formatter")
logger.addHandler(_handler)
logger.setLevel(logging.INFO)
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="HTML Formatter")

DEFAULT_OPTIONS = FormatOptions.from_env()


@app.exception_handler(InvalidSelector)
async def invalid_selector_handler(
    request: Request, exc: InvalidSelector
) -> JSONResponse:
    """Reject requests carrying an unusable selector or flatten pattern."""
    logger.info("rejected selector", extra={"selector": exc.selector})
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a generic 500."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
    )
    return JSONResponse(status_code=500, content={"detail": "internal error"})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/format", response_model=FormatResponse)
async def format_html(request: FormatRequest) -> FormatResponse:
    """Remove and flatten content of the posted HTML fragment.

    Request options are layered on top of the ``HTMLFORMATTER_*``
    environment defaults.
    """
    options = DEFAULT_OPTIONS.merged(request.options())
    formatter = HtmlFormatter.from_options(request.html, options)

    removed = formatter.filter_content()
    if request.element_id is not None:
        formatter.get_doc()
    html = formatter.get_text(request.element_id)

    logger.info(
        "format response",
        extra={
            "removed_count": len(removed),
            "flatten_count": len(options.flatten) + int(options.flatten_all),
            "element_id": request.element_id,
        },
    )

    return FormatResponse(
        html=html,
        removed=[formatter.node_html(node) for node in removed],
    )
