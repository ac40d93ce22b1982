"""
Default configuration for curl-decoder.

Values come from environment variables when set, otherwise from the
defaults below. Configure via environment variables or DecoderConfig(...).apply().
"""

import os

# API Server
API_HOST = os.environ.get("CURL_DECODER_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("CURL_DECODER_PORT", "8000"))

# Origins allowed to call the API from a browser (comma-separated)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CURL_DECODER_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Logging
LOG_LEVEL = os.environ.get("CURL_DECODER_LOG_LEVEL", "WARNING").upper()

# Parsing
# Strict mode rejects commands whose trailing options could not be parsed
STRICT_MODE = os.environ.get("CURL_DECODER_STRICT", "").strip().lower() in ("1", "true", "yes", "on")
