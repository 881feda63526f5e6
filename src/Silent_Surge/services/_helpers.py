"""Shared helpers for the signal adapter modules.

Consolidates safe type conversions, the ticker-mention matcher, and the
httpx client construction used by every HTTP-backed adapter.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Final

import httpx

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Shared constants
# ---------------------------------------------------------------------------

EXTERNAL_CALL_TIMEOUT_SECONDS: Final[float] = 15.0

# Characters allowed directly after a ticker for it to count as a mention
_TICKER_TRAILING: Final[str] = r"[\s,;.!?)\]]"


# ---------------------------------------------------------------------------
# Safe type conversions
# ---------------------------------------------------------------------------


def safe_float(value: object) -> float:
    """Convert a numeric value to float, treating NaN/None/garbage as 0.0.

    Strings may carry thousands separators (``"1,23,456"``).
    """
    if value is None:
        return 0.0
    try:
        float_val = float(str(value).replace(",", ""))
        if math.isnan(float_val) or math.isinf(float_val):
            return 0.0
        return float_val
    except (ValueError, TypeError):
        return 0.0


def safe_int(value: object) -> int:
    """Convert a numeric value to int, treating NaN/None as 0."""
    return int(safe_float(value))


# ---------------------------------------------------------------------------
# Mention matching
# ---------------------------------------------------------------------------


def ticker_pattern(ticker: str) -> re.Pattern[str]:
    """Compile a case-insensitive pattern matching *ticker* as a whole token.

    The ticker must start the text or follow whitespace, ``$`` or ``#``, and
    must end the text or be followed by whitespace or closing punctuation,
    so ``TCS`` matches ``"I like $TCS today"`` but not ``"PETROLTCS"``.
    """
    return re.compile(
        rf"(?:^|[\s$#]){re.escape(ticker)}(?={_TICKER_TRAILING}|$)",
        re.IGNORECASE,
    )


def match_ticker(ticker: str, text: str) -> bool:
    """Return True if *text* mentions *ticker* as a bounded token."""
    if not ticker or not text:
        return False
    return ticker_pattern(ticker).search(text) is not None


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


def build_http_client(
    *,
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the shared-shape httpx client each adapter owns.

    *transport* is injectable so tests can serve canned responses.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=5.0, read=EXTERNAL_CALL_TIMEOUT_SECONDS, write=10.0, pool=5.0
        ),
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        headers=headers,
        transport=transport,
        follow_redirects=True,
    )
