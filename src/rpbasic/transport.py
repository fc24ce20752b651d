#
# src/rpbasic/transport.py
#
"""
HTTP boundary to the ReportPortal API, built on httpx.
"""

from typing import Any

import httpx
import structlog

from rpbasic.config.models import ReportPortalConfig
from rpbasic.exceptions import ReportPortalHTTPError, TransportError

log = structlog.get_logger("transport")

# name -> (filename, content, content type, extra headers)
MultipartFiles = dict[str, tuple[str | None, str | bytes, str, dict[str, str]]]


class HttpTransport:
    """
    Sends JSON and multipart requests relative to the configured endpoint.

    With ``allow_http_errors`` set, 4xx/5xx responses are returned like any
    other; otherwise they raise ReportPortalHTTPError.
    """

    def __init__(self, config: ReportPortalConfig, client: httpx.Client | None = None):
        self.allow_http_errors = config.allow_http_errors
        self._client = client or httpx.Client(
            base_url=config.base_uri,
            headers={"Authorization": f"bearer {config.uuid}"},
            verify=config.verify_ssl,
            timeout=config.timeout,
        )
        self._log = log.bind(base_url=str(self._client.base_url))

    def post_json(self, path: str, body: Any) -> httpx.Response:
        return self._send("POST", path, json=body)

    def put_json(self, path: str, body: Any) -> httpx.Response:
        return self._send("PUT", path, json=body)

    def post_multipart(self, path: str, files: MultipartFiles) -> httpx.Response:
        return self._send("POST", path, files=files)

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            self._log.error("Request to ReportPortal failed", method=method, path=path, error=str(e))
            raise TransportError(f"{method} {path} failed: {e}", details=e) from e

        self._log.debug(
            "ReportPortal response received",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if not self.allow_http_errors:
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                self._log.error(
                    "ReportPortal returned an error status",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                    response_text=response.text,
                )
                raise ReportPortalHTTPError(
                    f"{method} {path} was rejected",
                    status_code=response.status_code,
                    response_text=response.text,
                    details=e,
                ) from e
        return response


# 🔼⚙️
