from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import requests
from requests import Response

from forecast_service.core.exceptions import UpstreamError


@dataclass
class RequestConfig:
    timeout: float = 5.0
    headers: Mapping[str, str] = field(default_factory=dict)


class HttpProvider:
    """Base class that adds default headers and timeouts for HTTP providers.

    No retries are performed: a single failed call surfaces as
    :class:`UpstreamError` straight away.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        return requests.Session()

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Rate limited by provider: %s", response.text)
            raise UpstreamError(f"HTTP 429: {self._error_detail(response)}")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise UpstreamError(f"HTTP {response.status_code}: {self._error_detail(response)}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        headers = {**self.request_config.headers, **kwargs.pop("headers", {})}
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request to %s timed out", url, exc_info=exc)
            raise UpstreamError(f"timeout after {self.request_config.timeout}s") from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", url, exc_info=exc)
            raise UpstreamError(f"request failed: {exc}") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise UpstreamError("invalid json") from exc
        if not isinstance(data, dict):
            raise UpstreamError("unexpected json document")
        return data

    @staticmethod
    def _error_detail(response: Response) -> str:
        # Problem documents carry a human readable "detail" (or at least "title").
        try:
            body = response.json()
        except ValueError:
            return response.reason or "error"
        if isinstance(body, dict):
            detail = body.get("detail") or body.get("title")
            if isinstance(detail, str) and detail:
                return detail
        return response.reason or "error"


__all__ = ["HttpProvider", "RequestConfig"]
