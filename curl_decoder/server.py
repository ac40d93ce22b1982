"""
FastAPI Server for curl-decoder

Provides API endpoints for:
- Parsing curl commands into entries
- Decoding curl commands into a request view
- Decomposing URLs
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from . import __version__, config
from .decoder import CurlParser, decode_curl, filter_entries, parse_url
from .exceptions import CurlDecoderError

logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(title="Curl Decoder API", version=__version__)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request Models
class CurlInput(BaseModel):
    curl_command: str
    part: Optional[str] = None  # method, header, data, flag or url
    strict: Optional[bool] = None  # None falls back to CURL_DECODER_STRICT


class UrlInput(BaseModel):
    url: str


def _resolve_strict(strict: Optional[bool]) -> bool:
    return config.STRICT_MODE if strict is None else strict


# API Endpoints
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.post("/api/parse")
async def parse_command(input: CurlInput):
    """Parse a curl command into its ordered entries."""
    try:
        parser = CurlParser(strict=_resolve_strict(input.strict))
        entries, remainder = parser.parse_with_remainder(input.curl_command)
        if input.part:
            entries = filter_entries(entries, input.part)
    except (CurlDecoderError, ValueError) as e:
        logger.info("Rejected curl command: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "success": True,
        "data": {
            "entries": [entry.to_dict() for entry in entries],
            "remainder": remainder,
        }
    }


@app.post("/api/decode")
async def decode_command(input: CurlInput):
    """Decode a curl command into method, URL, headers and body."""
    try:
        result = decode_curl(input.curl_command, strict=_resolve_strict(input.strict))
    except CurlDecoderError as e:
        logger.info("Rejected curl command: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return {"success": True, "data": result.to_dict()}


@app.post("/api/parse-url")
async def parse_url_endpoint(input: UrlInput):
    """Decompose a single URL."""
    try:
        result = parse_url(input.url)
    except CurlDecoderError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"success": True, "data": result.to_dict()}


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        app,
        host=host or config.API_HOST,
        port=port or config.API_PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run_server()
