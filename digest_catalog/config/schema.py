# digest_catalog/config/schema.py
"""
Pydantic schema for digest-catalog configuration.

Rules:
- Strict validation
- No unknown keys
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReconcileConfig(BaseModel):
    chunk_size: int = Field(
        default=8192,
        gt=0,
        description="Number of bytes read per chunk while hashing a file",
    )
    sort_files: bool = Field(
        default=True,
        description="Process files sorted by name instead of directory-listing order",
    )
    indent: int = Field(
        default=4,
        ge=1,
        description="Indentation used when writing the catalog document",
    )
    strict_algorithm: bool = Field(
        default=False,
        description="Match a file only against the digest recorded for the selected algorithm",
    )
    skip_unreadable: bool = Field(
        default=False,
        description="Skip files that cannot be read instead of aborting the run",
    )

    model_config = ConfigDict(extra="forbid")
