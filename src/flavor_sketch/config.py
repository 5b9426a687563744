"""Environment-driven configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from flavor_sketch.schema import is_hex_color

DEFAULT_BACKGROUND_COLOR = "#FDFBF7"
DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_color(value: str | None, default: str) -> str:
    if value is None:
        return default
    value = value.strip()
    return value if is_hex_color(value) else default


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    infer_color: bool = True
    translate: bool = True
    fallback_color: str = DEFAULT_BACKGROUND_COLOR

    @classmethod
    def from_env(cls, api_key: str | None = None) -> "Settings":
        """Read settings from the environment.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY, then API_KEY.
        """
        return cls(
            api_key=api_key or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
            text_model=os.getenv("FLAVOR_SKETCH_TEXT_MODEL", DEFAULT_TEXT_MODEL),
            image_model=os.getenv("FLAVOR_SKETCH_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
            infer_color=_parse_bool(os.getenv("FLAVOR_SKETCH_INFER_COLOR"), True),
            translate=_parse_bool(os.getenv("FLAVOR_SKETCH_TRANSLATE"), True),
            fallback_color=_parse_color(
                os.getenv("FLAVOR_SKETCH_FALLBACK_COLOR"), DEFAULT_BACKGROUND_COLOR
            ),
        )
