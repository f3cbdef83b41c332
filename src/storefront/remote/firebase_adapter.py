"""Firebase Realtime Database adapter over its REST API.

``GET {base}/{path}.json`` reads a node (``null`` when empty) and
``POST {base}/{path}.json`` appends a child, answering ``{"name": <key>}``.
"""

from typing import Any

import httpx
import structlog

from storefront.exceptions import RemoteCallError
from storefront.remote.port import RemoteDatabase, normalise_path

logger = structlog.get_logger(__name__)


class FirebaseDatabase(RemoteDatabase):
    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{normalise_path(path)}.json"

    def _params(self) -> dict[str, str]:
        return {"auth": self.auth_token} if self.auth_token else {}

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self._url(path)
        try:
            response = await self._client.request(method, url, params=self._params(), **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("Remote database rejected request", method=method, path=path, status=exc.response.status_code)
            raise RemoteCallError(
                f"{method} {path} failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.CookieConflict) as exc:
            logger.warning("Remote database unreachable", method=method, path=path, error=str(exc))
            raise RemoteCallError(f"{method} {path} failed: {exc}") from exc
        except ValueError as exc:
            raise RemoteCallError(f"{method} {path} returned a non-JSON body") from exc

    async def get(self, path: str) -> Any | None:
        return await self._request("GET", path)

    async def push(self, path: str, data: Any) -> str:
        body = await self._request("POST", path, json=data)
        key = body.get("name") if isinstance(body, dict) else None
        if not key:
            raise RemoteCallError(f"POST {path} did not return a key")
        return key

    async def aclose(self) -> None:
        await self._client.aclose()
