"""Configuration helpers for building a client from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    api_key: str
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    api_key = os.getenv("YELP_API_KEY", "")
    timeout_raw = os.getenv("YELP_REQUEST_TIMEOUT")
    request_timeout = DEFAULT_REQUEST_TIMEOUT
    if timeout_raw:
        try:
            request_timeout = float(timeout_raw)
        except ValueError:
            logger.warning("YELP_REQUEST_TIMEOUT=%r is not numeric; using %s", timeout_raw, DEFAULT_REQUEST_TIMEOUT)

    if not api_key:
        logger.warning("YELP_API_KEY is not configured; Yelp requests will be rejected.")

    return Settings(api_key=api_key, request_timeout=request_timeout)
