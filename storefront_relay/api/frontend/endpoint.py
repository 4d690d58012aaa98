import logging
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse, Response

from storefront_relay.api.deps import get_settings
from storefront_relay.common.config import Settings

router = APIRouter(tags=["frontend"])

_logger = logging.getLogger(__name__)


def resolve_asset(dist_dir: Path, path: str) -> Path | None:
    """Return the bundle file ``path`` points at, or None if it is not one."""
    if not path:
        return None
    root = dist_dir.resolve()
    candidate = (root / path).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


@router.get("/{path:path}", include_in_schema=False)
def frontend(path: str, settings: Settings = Depends(get_settings)) -> Response:
    asset = resolve_asset(settings.dist_dir, path)
    if asset is not None:
        return FileResponse(asset)

    index = settings.dist_dir / "index.html"
    try:
        content = index.read_bytes()
    except OSError as exc:
        _logger.error("index_unavailable", extra={"path": str(index), "error": str(exc)})
        return JSONResponse(status_code=500, content={"error": "Failed to send index.html"})
    return Response(content=content, media_type="text/html")
