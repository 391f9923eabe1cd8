"""Data directory resolution."""

from functools import lru_cache
from pathlib import Path
from typing import Optional
import os

from infrastructure.logging import get_module_logger
from infrastructure.persistence.errors import StoreError

logger = get_module_logger()


def _can_write(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return os.access(path, os.W_OK)


@lru_cache
def resolve_data_dir(
    override: Optional[str], default_dir: str, fallback_dir: str
) -> Path:
    """Pick the directory that holds the mapping document.

    Resolution order: the explicit ``override`` (created if needed), the
    project-local ``default_dir`` when it can be created and written, then
    ``fallback_dir`` under the system temp directory. The result is cached
    for the lifetime of the process; call ``resolve_data_dir.cache_clear()``
    to re-resolve.

    Raises:
        StoreError: If the override or the fallback cannot be created.
    """
    if override:
        path = Path(override)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"DATA_DIR {override} is not usable: {exc}") from exc
        logger.info("data_dir_resolved", data_dir=str(path), source="override")
        return path

    default_path = Path(default_dir)
    if _can_write(default_path):
        logger.info("data_dir_resolved", data_dir=str(default_path), source="default")
        return default_path

    fallback_path = Path(fallback_dir)
    try:
        fallback_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StoreError(
            f"Fallback data directory {fallback_dir} is not usable: {exc}"
        ) from exc
    logger.warning(
        "data_dir_fallback",
        data_dir=str(fallback_path),
        unwritable=str(default_path),
    )
    return fallback_path
