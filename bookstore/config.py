"""
Configuration for the Authors domain.

Settings come from environment variables with sensible defaults, and are
validated by a Pydantic model so that bad values fail at startup rather
than in the middle of a request.

Environment variables:
- BOOKSTORE_MAX_NAME_LENGTH: maximum author name length (default 64)
- BOOKSTORE_CASE_SENSITIVE_NAMES: "true"/"false", name uniqueness policy
- BOOKSTORE_DEFAULT_SORTING: sorting used when a listing names none
- BOOKSTORE_MAX_PAGE_SIZE: upper bound for a listing page
- LOG_LEVEL / LOG_FORMAT: root logger configuration
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from bookstore.domain.author import AuthorConstants


class AuthorSettings(BaseModel):
    """Tunable limits and policies for authors."""

    max_name_length: int = Field(
        default=AuthorConstants.MAX_NAME_LENGTH,
        ge=1,
        le=AuthorConstants.MAX_NAME_LENGTH,
    )
    case_sensitive_names: bool = True
    default_sorting: str = "name"
    max_page_size: int = Field(default=1000, gt=0)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AuthorSettings:
    """Build AuthorSettings from environment variables.

    Args:
        environ: Mapping to read from, defaults to ``os.environ``

    Returns:
        Validated settings

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    values = {}
    for field_name, var in (
        ("max_name_length", "BOOKSTORE_MAX_NAME_LENGTH"),
        ("case_sensitive_names", "BOOKSTORE_CASE_SENSITIVE_NAMES"),
        ("default_sorting", "BOOKSTORE_DEFAULT_SORTING"),
        ("max_page_size", "BOOKSTORE_MAX_PAGE_SIZE"),
    ):
        raw = environ.get(var)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    # Pydantic coerces "64" -> 64 and "false" -> False
    return AuthorSettings.model_validate(values)


DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(name: str) -> int:
    """Map a level name such as "debug" to its number.

    Unknown names print a notice and resolve to INFO, since logging is not
    configured yet at this point.
    """
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    print(f"Invalid log level: {name.strip().upper()}, using INFO")
    return logging.INFO


def setup_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    """Configure the root logger from LOG_LEVEL and LOG_FORMAT.

    Replaces any handlers already installed on the root logger.
    """
    if environ is None:
        environ = os.environ

    logging.basicConfig(
        level=resolve_log_level(environ.get("LOG_LEVEL") or "INFO"),
        format=environ.get("LOG_FORMAT") or DEFAULT_LOG_FORMAT,
        force=True,
    )
