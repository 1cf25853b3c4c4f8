"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, ordinaldate.toml only carries
overrides. No file at all is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class BatchConfig(BaseModel):
    """[batch] section: line handling for ``ordinaldate check``."""

    model_config = {"frozen": True}

    skip_blank: bool = True
    comment_prefix: str = "#"
    fail_fast: bool = False
