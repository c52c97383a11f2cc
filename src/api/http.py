# src/api/http.py
import logging
from typing import Any

import requests
from requests.exceptions import RequestException

from src.config import HTTP_TIMEOUT_S, USER_AGENT
from src.errors import UpstreamError
from src.utils import report_error

logger = logging.getLogger("weatherdash")

_HEADERS = {"User-Agent": USER_AGENT}


def forward_get(
    url: str, params: dict[str, Any], timeout: float = HTTP_TIMEOUT_S
) -> tuple[int, Any]:
    """Single GET, no retry. Returns (status, decoded JSON body).

    A network failure or a body that is not JSON raises UpstreamError.
    """
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=_HEADERS)
    except RequestException as e:
        logger.warning("GET %s failed: %s", url, e)
        raise UpstreamError(f"request to {url} failed") from e

    try:
        body = resp.json()
    except ValueError as e:
        logger.warning("GET %s returned non-JSON body (status %s)", url, resp.status_code)
        raise UpstreamError(f"invalid JSON from {url}", status=resp.status_code) from e

    return resp.status_code, body


def http_get_json(url: str, timeout: float = HTTP_TIMEOUT_S) -> Any:
    try:
        resp = requests.get(url, timeout=timeout, headers=_HEADERS)
        resp.raise_for_status()
        return resp.json()
    except Exception as e:
        report_error(f"http_get_json: {url}", e)
        raise
