# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from random import Random
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = (
    "CollectionSettings",
    "default_rng",
    "settings",
)


class CollectionSettings(BaseSettings, frozen=True):
    """Library settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="TYPED_COLLECTIONS_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal[
        "CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"
    ] = Field(
        default="WARNING",
        description="Level of the 'typed_collections' package logger",
    )

    random_seed: int | None = Field(
        default=None,
        description=(
            "Seed of the shared generator used by random() and shuffle() "
            "when no generator is passed explicitly"
        ),
    )

    @field_validator("log_level", mode="before")
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


settings = CollectionSettings()

_rng = Random(settings.random_seed)


def default_rng() -> Random:
    """Shared generator for sampling and shuffling."""
    return _rng
