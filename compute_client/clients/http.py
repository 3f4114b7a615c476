import logging
from typing import Any

import httpx


logger = logging.getLogger(__name__)


class RequestFailure(RuntimeError):
    def __init__(
        self,
        *,
        method: str,
        url: str,
        error_type: str,
        detail: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        self.method = method
        self.url = url
        self.error_type = error_type
        self.detail = detail
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(f"request failed: {method} {url} ({error_type}: {detail})")


def send_request(
    client: httpx.Client, method: str, url: str, **kwargs: Any
) -> httpx.Response:
    """Issue a single request; any non-2xx status raises ``RequestFailure``."""
    try:
        response = client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        body = (exc.response.text or "").strip()
        detail = f"HTTP {status_code}: {body[:240]}" if body else f"HTTP {status_code}"
        logger.warning("compute request failed %s %s: %s", method, url, detail)
        raise RequestFailure(
            method=method,
            url=url,
            error_type=exc.__class__.__name__,
            detail=detail,
            status_code=status_code,
            response_text=exc.response.text,
        ) from exc
    except httpx.RequestError as exc:
        logger.warning("compute request error %s %s: %s", method, url, exc)
        raise RequestFailure(
            method=method,
            url=url,
            error_type=exc.__class__.__name__,
            detail=str(exc),
        ) from exc
    logger.debug("compute request ok %s %s status=%s", method, url, response.status_code)
    return response
