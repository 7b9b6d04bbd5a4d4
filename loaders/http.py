"""
Shared HTTP plumbing for the loaders: bounded timeouts, one retry on
transient failures, and mapping of requests errors onto loaders.errors.
"""

import logging
from typing import Any, Dict

import requests
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from loaders.errors import MalformedResponse, NetworkFailure

log = logging.getLogger(__name__)


def _is_transient(error: BaseException) -> bool:
    return isinstance(error, NetworkFailure) and error.transient


# One retry, then give up and let the caller fall back
retry_transient = retry(
    retry=retry_if_exception(_is_transient),
    stop=stop_after_attempt(2),
    wait=wait_exponential(multiplier=0.5, max=2),
    reraise=True,
)


def get_json(session: requests.Session, url: str, params: Dict[str, Any], timeout: float) -> Any:
    """
    GET a URL and decode its JSON body.

    Raises:
        NetworkFailure: connection error, timeout, or non-2xx status.
            Server errors, 429 and connection problems are transient.
        MalformedResponse: body is not JSON.
    """
    try:
        response = session.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as e:
        status = getattr(e.response, "status_code", None)
        transient = status is None or status >= 500 or status == 429
        raise NetworkFailure(f"HTTP {status} from {url}", transient=transient, status_code=status) from e
    except requests.RequestException as e:
        raise NetworkFailure(f"Request to {url} failed: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponse(f"Invalid JSON from {url}") from e
