"""API base URL, request defaults, and the client-side error sentinel.

This module defines the Scryfall API endpoint and the fixed values used
when a failure cannot be expressed as a Scryfall error object.
"""

from __future__ import annotations

#: Base URL for the public Scryfall API.
API_BASE = "https://api.scryfall.com"

#: Package version, reported in the User-Agent header.
VERSION = "0.1.0"

#: User-Agent sent with every request (Scryfall requires one).
USER_AGENT = f"scryfall-sdk/{VERSION}"

#: Default HTTP request timeout in seconds.
DEFAULT_TIMEOUT = 30.0

#: Headers sent with every request unless overridden.
DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}

#: ``code`` of the synthetic error built for transport and decode failures.
CLIENT_ERROR_CODE = "CLIENT_ERR"

#: ``status`` of the synthetic error built for transport and decode failures.
CLIENT_ERROR_STATUS = 599
