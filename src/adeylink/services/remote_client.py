"""HTTP client for the AdeyLink marketplace backend."""

import asyncio
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import ApiPaths

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (requests.ConnectionError, requests.Timeout)


class RemoteError(Exception):
    """A request failed: unreachable backend, non-2xx status or undecodable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _path(template: str, resource_id: str) -> str:
    return template.format(id=quote(str(resource_id), safe=""))


class RemoteClient:
    """Async facade over the backend's REST endpoints.

    Blocking ``requests`` calls run in a worker thread so concurrent
    workflows keep sharing one event loop. Reads use the public key unless a
    user token is given; writes always need the user token.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        public_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.effective_base_url).rstrip("/")
        self.public_key = public_key if public_key is not None else settings.public_anon_key
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.max_retries = max(1, max_retries if max_retries is not None else settings.max_retries)
        self.retry_delay = retry_delay if retry_delay is not None else settings.retry_delay

    def _headers(self, token: Optional[str], with_body: bool) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {token or self.public_key}"}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _send(self, method: str, path: str, token: Optional[str] = None,
              payload: Optional[Dict[str, Any]] = None) -> Any:
        """Issue one request and return the decoded JSON body."""
        response = requests.request(
            method,
            f"{self.base_url}{path}",
            headers=self._headers(token, payload is not None),
            json=payload,
            timeout=self.timeout,
        )
        if not response.ok:
            logger.error(f"{method} {path} failed: {response.status_code} - {response.text[:200]}")
            raise RemoteError(f"{method} {path} returned {response.status_code}", response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(f"{method} {path} returned invalid JSON: {e}", response.status_code)

    def _send_with_retry(self, method: str, path: str, token: Optional[str] = None,
                         payload: Optional[Dict[str, Any]] = None) -> Any:
        # Writes are not idempotent (follow is a toggle), so only reads retry.
        attempts = self.max_retries if method == "GET" else 1
        retrying = Retrying(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(multiplier=self.retry_delay, max=settings.retry_backoff * 10),
            retry=retry_if_exception_type(TRANSPORT_ERRORS),
            reraise=True,
        )
        try:
            return retrying(self._send, method, path, token, payload)
        except TRANSPORT_ERRORS as e:
            logger.error(f"{method} {path} unreachable: {e}")
            raise RemoteError(f"{method} {path} unreachable: {e}")
        except requests.RequestException as e:
            logger.error(f"{method} {path} request error: {e}")
            raise RemoteError(f"{method} {path} request error: {e}")

    async def request(self, method: str, path: str, token: Optional[str] = None,
                      payload: Optional[Dict[str, Any]] = None) -> Any:
        return await asyncio.to_thread(self._send_with_retry, method, path, token, payload)

    # Reads

    async def get_user(self, user_id: str) -> Dict[str, Any]:
        return await self.request("GET", _path(ApiPaths.USER, user_id))

    async def get_seller_products(self, seller_id: str) -> Any:
        return await self.request("GET", _path(ApiPaths.SELLER_PRODUCTS, seller_id))

    async def get_seller_reviews(self, seller_id: str) -> Any:
        return await self.request("GET", _path(ApiPaths.SELLER_REVIEWS, seller_id))

    async def get_seller_videos(self, seller_id: str) -> Any:
        return await self.request("GET", _path(ApiPaths.SELLER_VIDEOS, seller_id))

    async def get_follow_status(self, seller_id: str, access_token: str) -> bool:
        data = await self.request("GET", _path(ApiPaths.FOLLOW_STATUS, seller_id), token=access_token)
        return _following_flag(data)

    # Writes

    async def toggle_follow(self, seller_id: str, access_token: str) -> bool:
        """Toggle follow; returns the server's resulting membership."""
        data = await self.request("POST", _path(ApiPaths.FOLLOW, seller_id), token=access_token)
        return _following_flag(data)

    async def create_review(self, seller_id: str, rating: int, comment: str,
                            access_token: str) -> Any:
        payload = {"sellerId": seller_id, "rating": rating, "comment": comment}
        return await self.request("POST", ApiPaths.REVIEWS, token=access_token, payload=payload)


def _following_flag(data: Any) -> bool:
    if not isinstance(data, dict) or not isinstance(data.get("following"), bool):
        raise RemoteError(f"Missing 'following' flag in response: {data!r}")
    return data["following"]
