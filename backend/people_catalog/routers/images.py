"""Image file endpoint."""
import mimetypes
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from ..config import Settings
from ..dependencies import get_app_settings
from ..exceptions import ImageNotFoundError

router = APIRouter(prefix="/images", tags=["images"])


def resolve_image_path(images_dir: Path, filename: str) -> Optional[Path]:
    """
    Map a request path onto a file inside the image directory.

    Returns None for dotfiles, directories, missing files and anything that
    resolves outside the directory.
    """
    if any(part.startswith(".") for part in Path(filename).parts):
        return None

    root = images_dir.resolve()
    candidate = (root / filename).resolve()
    if root != candidate and root not in candidate.parents:
        return None
    if not candidate.is_file():
        return None
    return candidate


@router.api_route("/{filename:path}", methods=["GET", "HEAD"])
def get_image_file(filename: str, settings: Settings = Depends(get_app_settings)):
    """Get the raw image file."""
    filepath = resolve_image_path(settings.images_path, filename)
    if filepath is None:
        raise ImageNotFoundError()

    media_type, _ = mimetypes.guess_type(filepath.name)
    return FileResponse(filepath, media_type=media_type or "application/octet-stream")
