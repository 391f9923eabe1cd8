"""On-disk storage settings for the user room mapping document."""

import os
import tempfile
from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class StorageSettings(InfrastructureSettings):
    """Location of the mapping document.

    The data directory is resolved once per process: an explicit
    ``DATA_DIR`` wins, then ``DEFAULT_DATA_DIR`` if it is writable, then
    ``FALLBACK_DATA_DIR`` (a temp directory, for read-only deployments).

    Environment Variables:
        DATA_DIR: Explicit data directory override (optional)
    """

    DATA_DIR: Optional[str] = Field(default=None, alias="DATA_DIR")
    DEFAULT_DATA_DIR: str = Field(default_factory=lambda: os.path.join(os.getcwd(), "data"))
    FALLBACK_DATA_DIR: str = Field(
        default_factory=lambda: os.path.join(
            tempfile.gettempdir(), "doxyme-slack-calling"
        )
    )
    USERS_FILE: str = "users.json"
