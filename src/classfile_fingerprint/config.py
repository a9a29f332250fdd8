from __future__ import annotations

import os
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_ALGORITHM, DEFAULT_OUTPUT_DIR
from .errors import UnsupportedAlgorithm
from .hasher import resolve_algorithm


class FingerprintConfig(BaseSettings):
    """Configuration loaded from GitHub Actions inputs, overridable from the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        frozen=True,
        extra="ignore",
    )

    algorithm: str = Field(
        default=DEFAULT_ALGORITHM,
        description="Digest algorithm (hashlib or JDK MessageDigest name, e.g. SHA-256)",
    )
    output_dir: Path = Field(
        default=Path(DEFAULT_OUTPUT_DIR),
        description="Build output directory receiving classfile.<algorithm>",
    )
    archives: List[Path] = Field(
        default_factory=list,
        description="Resolved dependency archives, in processing order",
    )
    classpath: str = Field(
        default="",
        description="Path-separator joined classpath appended after archives",
    )
    verbose: bool = Field(default=False, description="Log every class entry")

    @field_validator("algorithm", mode="before")
    @classmethod
    def _validate_algorithm(cls, value: str) -> str:
        if isinstance(value, str):
            value = value.strip()
        try:
            resolve_algorithm(value)
        except UnsupportedAlgorithm as exc:
            raise ValueError(str(exc)) from exc
        return value

    def archive_paths(self) -> list[Path]:
        """Archives followed by classpath elements, in order."""
        paths = list(self.archives)
        for element in self.classpath.split(os.pathsep):
            element = element.strip()
            if element:
                paths.append(Path(element))
        return paths
