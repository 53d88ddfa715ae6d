"""Assistant configuration and per-session preferences.

``AssistantConfig`` mirrors ``args/assistant.yaml``. ``Preferences`` is the
per-session settings object the caller passes into every call; nothing in
the core keeps a copy of it between calls.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from jarvis import CONFIG_PATH

logger = logging.getLogger(__name__)


class SummaryLength(str, Enum):
    """How much detail a spoken summary carries."""

    CONCISE = "concise"
    MEDIUM = "medium"
    DETAILED = "detailed"
    EVERYTHING = "everything"

    @property
    def item_limit(self) -> Optional[int]:
        """Number of emails narrated, or None for all of them."""
        return SUMMARY_LIMITS[self]

    @property
    def includes_details(self) -> bool:
        """Whether previews, attendees and tomorrow's items are read out."""
        return self in (SummaryLength.DETAILED, SummaryLength.EVERYTHING)


SUMMARY_LIMITS: dict[SummaryLength, Optional[int]] = {
    SummaryLength.CONCISE: 3,
    SummaryLength.MEDIUM: 5,
    SummaryLength.DETAILED: 7,
    SummaryLength.EVERYTHING: None,
}


# =============================================================================
# Preferences (supplied by the caller on every invocation)
# =============================================================================

class Preferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary_length: SummaryLength = Field(default=SummaryLength.MEDIUM)
    priority_contacts: frozenset[str] = Field(default_factory=frozenset)
    reminder_default_time: int = Field(default=60, ge=1)

    @field_validator("priority_contacts", mode="before")
    @classmethod
    def _normalize_contacts(cls, value):
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return frozenset(str(v).strip().lower() for v in value if str(v).strip())


# =============================================================================
# AssistantConfig (args/assistant.yaml)
# =============================================================================

class SummaryConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    preview_chars: int = Field(default=100, ge=1)


class AssistantConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    wake_phrase: str = Field(default="hey jarvis")
    preferences: Preferences = Field(default_factory=Preferences)
    summaries: SummaryConfig = Field(default_factory=SummaryConfig)


def load_config(path: Path | str | None = None) -> AssistantConfig:
    """Load and validate the assistant config, falling back to defaults."""
    yaml_path = Path(path) if path is not None else CONFIG_PATH

    try:
        if yaml_path.exists():
            with open(yaml_path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            raw = {}

        return AssistantConfig.model_validate(raw)
    except Exception as e:
        logger.warning(f"Config validation failed for {yaml_path}: {e}, using defaults")
        return AssistantConfig()


__all__ = [
    "AssistantConfig",
    "Preferences",
    "SUMMARY_LIMITS",
    "SummaryConfig",
    "SummaryLength",
    "load_config",
]
