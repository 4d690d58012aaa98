import json
import re
from typing import Any, Iterable

from fastapi import HTTPException, Request

from storefront_relay.adapter.client.media import MediaUploader
from storefront_relay.common.config import Settings
from storefront_relay.service.relay import RelayService

_FORM_KEY = re.compile(r"[^\[\]]+|\[([^\[\]]*)\]")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_relay(request: Request) -> RelayService:
    return request.app.state.relay


def get_uploader(request: Request) -> MediaUploader:
    return request.app.state.uploader


def _form_path(key: str) -> list[str]:
    head, _, rest = key.partition("[")
    if not head or not rest:
        return [key]
    parts = [head]
    for match in _FORM_KEY.finditer("[" + rest):
        parts.append(match.group(1) if match.group(1) is not None else match.group())
    return parts


def nest_form(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Build nested objects from bracketed form keys.

    ``review[characteristics][fit]=3`` becomes
    ``{"review": {"characteristics": {"fit": "3"}}}``; ``photos[]`` and
    repeated keys collect into lists.
    """
    result: dict[str, Any] = {}
    for key, value in items:
        path = _form_path(key)
        append = len(path) > 1 and path[-1] == ""
        if append:
            path = path[:-1]
        *parents, leaf = path
        node = result
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        if leaf in node:
            existing = node[leaf]
            node[leaf] = existing + [value] if isinstance(existing, list) else [existing, value]
        else:
            node[leaf] = [value] if append else value
    return result


async def read_body(request: Request) -> Any:
    """JSON or urlencoded request body; ``{}`` when there is none."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        return nest_form(form.multi_items())
    if not content_type.startswith("application/json"):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid JSON body: {exc}") from exc
