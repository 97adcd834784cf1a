"""Blocking client for the ledger service, one shared ``requests.Session``."""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import requests

from edge_proxy.core.config import settings

logger = logging.getLogger(__name__)

http = requests.Session()


class BackendUnavailable(Exception):
    """The ledger service could not be reached or answered with a non-JSON body."""


def forward(method: str, path: str, body: Optional[bytes] = None) -> Tuple[int, Any]:
    """
    Sends the call to the ledger service unchanged and returns its status code
    and decoded JSON body. Upstream error statuses are returned, not raised.
    """
    url = f"{settings.BACKEND_URL.rstrip('/')}{path}"
    headers = {"Content-Type": "application/json"} if body is not None else None
    try:
        r = http.request(
            method,
            url,
            data=body,
            headers=headers,
            timeout=settings.BACKEND_TIMEOUT,
        )
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        raise BackendUnavailable(f"{method} {url}: {e}") from e
    return r.status_code, data
