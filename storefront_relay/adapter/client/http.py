import math
from typing import Any
from urllib.parse import quote

import httpx


def segment(value: str | int) -> str:
    return quote(str(value), safe="")


def to_wire(payload: Any) -> Any:
    """Replace non-finite floats with None so the payload is valid JSON."""
    if isinstance(payload, float) and not math.isfinite(payload):
        return None
    if isinstance(payload, dict):
        return {key: to_wire(value) for key, value in payload.items()}
    if isinstance(payload, list):
        return [to_wire(item) for item in payload]
    return payload


def decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class UpstreamClient:
    def __init__(self, base_url: str, headers: dict[str, str], timeout: float | None = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = headers
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        payload: Any = None,
        params: dict[str, str | int] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {"headers": self.headers, "params": params}
        if payload is not None:
            kwargs["json"] = to_wire(payload)
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            response = await client.request(method, self.url(path), **kwargs)
            response.raise_for_status()
            return response

    async def get(self, path: str, params: dict[str, str | int] | None = None) -> httpx.Response:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        payload: Any = None,
        params: dict[str, str | int] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", path, payload=payload, params=params)

    async def put(self, path: str, payload: Any = None) -> httpx.Response:
        return await self.request("PUT", path, payload=payload)
