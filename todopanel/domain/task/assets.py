"""Asset classification by file extension.

Asset ids are opaque strings, but most of them are project-relative paths
such as ``Assets/Scripts/Player.cs``. For those, the extension tells what
kind of asset it is; ids without an extension belong to no type.
"""

from collections.abc import Sequence
from pathlib import PurePosixPath

from .models import Category

# Named quick filters for the task list
ASSET_TYPE_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "scripts": (".cs",),
    "scenes": (".unity",),
    "prefabs": (".prefab",),
    "textures": (".png", ".jpg", ".jpeg", ".tga", ".psd", ".tif", ".tiff", ".bmp", ".exr"),
}

CATEGORY_BY_EXTENSION: dict[str, Category] = {
    ".cs": Category.PROGRAMMING,
    ".png": Category.ART,
    ".jpg": Category.ART,
    ".jpeg": Category.ART,
    ".tga": Category.ART,
    ".psd": Category.ART,
    ".mat": Category.ART,
    ".prefab": Category.DESIGN,
    ".unity": Category.DESIGN,
    ".wav": Category.AUDIO,
    ".mp3": Category.AUDIO,
    ".ogg": Category.AUDIO,
    ".anim": Category.ANIMATION,
    ".controller": Category.ANIMATION,
}


def normalize_extension(extension: str) -> str:
    """``"PNG"``, ``".png"`` and ``"*.png"`` all become ``".png"``."""
    ext = extension.strip().lower().lstrip("*")
    if not ext:
        return ""
    return ext if ext.startswith(".") else f".{ext}"


def asset_extension(asset_id: str) -> str:
    """Lower-cased extension of an asset id, or "" if it has none."""
    return PurePosixPath(asset_id.replace("\\", "/")).suffix.lower()


def asset_name(asset_id: str) -> str:
    """Display name of an asset: the file name without its extension."""
    return PurePosixPath(asset_id.replace("\\", "/")).stem or asset_id


def extensions_for(asset_type: str) -> tuple[str, ...]:
    """Resolve a quick-filter name (``scripts``, ``textures``...) or a bare
    extension to the extensions it matches."""
    named = ASSET_TYPE_EXTENSIONS.get(asset_type.strip().lower())
    if named is not None:
        return named
    ext = normalize_extension(asset_type)
    return (ext,) if ext else ()


def infer_category(asset_ids: Sequence[str]) -> Category:
    """Category suggested by the first asset, General when unknown."""
    if not asset_ids:
        return Category.GENERAL
    return CATEGORY_BY_EXTENSION.get(asset_extension(asset_ids[0]), Category.GENERAL)
