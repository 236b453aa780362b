import logging
import time
from typing import Any, Dict, List, Optional

import httpx

from .observability import log_event

DEFAULT_API_URL = "https://api.linear.app/graphql"
PERSONAL_API_KEY_PREFIX = "lin_api_"


class LinearClientError(Exception):
    """Base error for client failures."""


class LinearHTTPError(LinearClientError):
    def __init__(
        self,
        *,
        status_code: int,
        url: str,
        message: str,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} POST {url}: {message}")
        self.status_code = status_code
        self.url = url
        self.message = message
        self.response_json = response_json
        self.response_text = response_text


class LinearGraphQLError(LinearClientError):
    """The request reached Linear but the GraphQL layer reported errors."""

    def __init__(self, errors: List[Dict[str, Any]]):
        messages = [
            str(e.get("message") or e) if isinstance(e, dict) else str(e)
            for e in errors
        ]
        super().__init__("; ".join(messages) or "GraphQL request failed")
        self.errors = errors


class LinearParseError(LinearClientError):
    pass


def authorization_header(access_token: str) -> str:
    """Personal API keys are sent raw; OAuth access tokens use the Bearer scheme."""
    if access_token.startswith(PERSONAL_API_KEY_PREFIX):
        return access_token
    return f"Bearer {access_token}"


class LinearClient:
    """
    Shared async client for the Linear GraphQL API.
    - Owns one long-lived httpx session with auth and timeouts
    - Returns the raw ``data`` object of each response
    - Single attempt per call; no business logic
    """

    def __init__(
        self,
        *,
        access_token: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 10.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        access_token = (access_token or "").strip()
        api_url = (api_url or "").strip()

        if not access_token:
            raise ValueError("access_token must be provided.")
        if not api_url:
            raise ValueError("api_url must be provided.")

        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("linear_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={
                "Authorization": authorization_header(access_token),
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout_seconds,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "LinearClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        *,
        operation: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Run one GraphQL document and return its ``data`` object.
        - Raises LinearHTTPError on non-2xx HTTP responses
        - Raises LinearGraphQLError when the body carries an ``errors`` array
        - Raises LinearParseError if the body isn't a JSON object
        - Raises LinearClientError on network/timeout errors
        """
        body: Dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables

        start = time.perf_counter()
        try:
            resp = await self.http.post(self.api_url, json=body)
        except httpx.TimeoutException as exc:
            self._log_call(operation, start, status="exception", error=exc)
            raise LinearClientError(
                f"Timeout calling Linear ({operation or 'graphql'}): {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            self._log_call(operation, start, status="exception", error=exc)
            raise LinearClientError(
                f"Network error calling Linear ({operation or 'graphql'}): {exc}"
            ) from exc

        self._log_call(operation, start, status=resp.status_code)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp)

        payload = self._safe_json(resp)
        errors = payload.get("errors")
        if errors:
            raise LinearGraphQLError(errors if isinstance(errors, list) else [errors])

        data = payload.get("data")
        if not isinstance(data, dict):
            raise LinearParseError(
                f"Expected a 'data' object from {self.api_url}, "
                f"got {type(data).__name__}"
            )
        return data

    def _log_call(
        self,
        operation: Optional[str],
        start: float,
        *,
        status: Any,
        error: Optional[BaseException] = None,
    ) -> None:
        duration_ms = int((time.perf_counter() - start) * 1000)
        fields: Dict[str, Any] = {
            "operation": operation,
            "status": status,
            "duration_ms": duration_ms,
        }
        if error is not None:
            fields["error_type"] = type(error).__name__
        log_event("op_call", **fields)

    def _safe_json(self, resp: httpx.Response) -> Dict[str, Any]:
        try:
            data = resp.json()
        except Exception as exc:
            snippet = (resp.text or "")[:500]
            raise LinearParseError(
                f"Expected JSON from {self.api_url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

        if not isinstance(data, dict):
            raise LinearParseError(
                f"Expected top-level JSON object from {self.api_url}, "
                f"got {type(data).__name__}"
            )
        return data

    def _to_http_error(self, resp: httpx.Response) -> LinearHTTPError:
        response_json: Optional[Dict[str, Any]] = None
        response_text: Optional[str] = None
        message = "request failed"

        try:
            parsed = resp.json()
            if isinstance(parsed, dict):
                response_json = parsed
                # Linear reports most failures as GraphQL errors, even with 4xx
                errors = parsed.get("errors")
                if isinstance(errors, list) and errors and isinstance(errors[0], dict):
                    message = errors[0].get("message") or message
                else:
                    message = parsed.get("message") or parsed.get("error") or message
        except Exception:
            response_text = (resp.text or "")[:500]

        return LinearHTTPError(
            status_code=resp.status_code,
            url=self.api_url,
            message=message,
            response_json=response_json,
            response_text=response_text,
        )
