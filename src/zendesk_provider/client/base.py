"""Base ZendeskClient class and the HTTP helpers every mixin builds on."""
from typing import Any, Dict, List, Optional
import json
import logging
import urllib.request
import urllib.parse
import urllib.error
import base64

from zenpy import Zenpy
from zendesk_provider.exceptions import (
    ZendeskError,
    ZendeskAPIError,
    ZendeskNetworkError,
    ZendeskNotFoundError,
    ZendeskRateLimitError,
)

logger = logging.getLogger("zendesk-provider")


# Helper: urllib request with 429/5xx retry and backoff
# Exponential backoff with jitter, honouring a numeric Retry-After header.
# POST is not idempotent: it is only retried on 429, which Zendesk rejects unprocessed.
def _urlopen_with_retry(req, max_attempts: int = 5):
    import time
    import random
    import urllib.request
    import urllib.error

    retry_all = req.get_method() != "POST"
    last_err = None
    for attempt in range(max_attempts):
        try:
            return urllib.request.urlopen(req)
        except urllib.error.HTTPError as e:
            code = getattr(e, "code", None)
            server_error = isinstance(code, int) and 500 <= code < 600
            if code == 429 or (retry_all and server_error):
                if attempt < max_attempts - 1:
                    delay = None
                    headers = getattr(e, "headers", None) or getattr(e, "hdrs", None)
                    if headers:
                        retry_after = headers.get("Retry-After") or headers.get("retry-after")
                        if retry_after and retry_after.strip().isdigit():
                            delay = int(retry_after.strip())
                    if delay is None:
                        delay = min(2 ** attempt + random.random(), 30)
                    logger.debug(f"HTTP {code} from {req.full_url}, retrying in {delay:.1f}s")
                    time.sleep(delay)
                    last_err = e
                    continue
            error_body = e.read().decode() if hasattr(e, 'fp') and e.fp else "No response body"
            message = f"HTTP Error: {e.code} - {e.reason}"
            if code == 404:
                raise ZendeskNotFoundError(message, status_code=404, response_body=error_body)
            if code == 429:
                raise ZendeskRateLimitError(message, status_code=429, response_body=error_body)
            raise ZendeskAPIError(message, status_code=e.code, response_body=error_body)
        except urllib.error.URLError as e:
            if retry_all and attempt < max_attempts - 1:
                delay = min(2 ** attempt + random.random(), 30)
                time.sleep(delay)
                last_err = e
                continue
            raise ZendeskNetworkError(f"Network Error: {str(e)}")
    if last_err:
        raise ZendeskError(f"Max retries exceeded: {str(last_err)}")
    raise ZendeskError("Unknown error during URL open.")


class ZendeskClientBase:
    """Base class for ZendeskClient with core initialization and HTTP helpers."""

    def __init__(self, subdomain: str, email: str, token: str):
        """
        Initialize the zenpy client (macros, webhooks) and the direct API settings.
        """
        self.client = Zenpy(
            subdomain=subdomain,
            email=email,
            token=token
        )

        self.subdomain = subdomain
        self.email = email
        self.token = token
        self.base_url = f"https://{subdomain}.zendesk.com/api/v2"
        credentials = f"{email}/token:{token}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode('ascii')
        self.auth_header = f"Basic {encoded_credentials}"

    def _build_url(self, path: str, params: Dict[str, Any] | None = None) -> str:
        query = urllib.parse.urlencode(params or {})
        return f"{self.base_url}{path}{('?' + query) if query else ''}"

    def _send(self, method: str, url: str, payload: Any = None) -> Dict[str, Any]:
        data = json.dumps(payload).encode('utf-8') if payload is not None else None
        req = urllib.request.Request(url, data=data, method=method)
        req.add_header('Authorization', self.auth_header)
        req.add_header('Content-Type', 'application/json')
        with _urlopen_with_retry(req) as response:
            raw = response.read().decode('utf-8')
        if not raw.strip():
            return {}
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ZendeskAPIError(f"Invalid JSON from {method} {url}: {e}", response_body=raw)

    def _request(
        self,
        method: str,
        path: str,
        payload: Any = None,
        params: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        return self._send(method, self._build_url(path, params), payload)

    def _get_json(self, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        return self._request('GET', path, params=params)

    # GET a fully-qualified URL (e.g. next_page)
    def _get_json_url(self, url: str) -> Dict[str, Any]:
        return self._send('GET', url)

    def _post_json(self, path: str, payload: Any) -> Dict[str, Any]:
        return self._request('POST', path, payload=payload)

    def _put_json(self, path: str, payload: Any) -> Dict[str, Any]:
        return self._request('PUT', path, payload=payload)

    def _delete(self, path: str) -> None:
        self._request('DELETE', path)

    def _list_all(
        self,
        path: str,
        items_key: str,
        params: Dict[str, Any] | None = None,
    ) -> List[Dict[str, Any]]:
        """Collect `items_key` across every page, following next_page links."""
        items: List[Dict[str, Any]] = []
        seen_pages: set[str] = set()
        next_url: Optional[str] = None

        while True:
            data = self._get_json_url(next_url) if next_url else self._get_json(path, params)
            items.extend(data.get(items_key) or [])
            next_url = data.get('next_page')
            if not next_url or next_url in seen_pages:
                break
            seen_pages.add(next_url)

        return items
