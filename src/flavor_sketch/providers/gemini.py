"""Gemini gateway implementation."""

from __future__ import annotations

import base64
import logging

from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from flavor_sketch.config import Settings
from flavor_sketch.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GatewayError,
    MalformedColorResponse,
    MalformedTranslationResponse,
    NoImageData,
    RateLimitError,
)
from flavor_sketch.prompts import build_color_prompt, build_image_prompt, build_translation_prompt
from flavor_sketch.providers.base import BaseGateway
from flavor_sketch.schema import BeanDetails, ImageResult, TranslationPayload, is_hex_color


class GeminiGateway(BaseGateway):
    """Gemini API gateway."""

    def __init__(self, settings: Settings, *, client=None):
        """Initialize Gemini gateway.

        Args:
            settings: Configuration carrying the API key and model names.
            client: Pre-built client exposing `aio.models.generate_content`.

        Raises:
            ConfigurationError: If settings carry no API key.
        """
        if not settings.api_key:
            raise ConfigurationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.logger = logging.getLogger(__name__)
        self.settings = settings
        self.client = client if client is not None else genai.Client(api_key=settings.api_key)

    async def infer_background_color(self, notes: str) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.settings.text_model,
                contents=[build_color_prompt(notes)],
            )
            return self._parse_color(response.text)
        except Exception:
            self.logger.warning(
                "color inference failed, using fallback %s",
                self.settings.fallback_color,
                exc_info=True,
            )
            return self.settings.fallback_color

    async def generate_image(self, notes: str, background_color: str) -> ImageResult:
        """Generate the flavor illustration.

        Raises:
            RateLimitError: If API rate limit is exceeded
            AuthenticationError: If API key is rejected
            GatewayError: If the call fails for any other reason
            NoImageData: If no part of the response carries an image
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.settings.image_model,
                contents=[build_image_prompt(notes, background_color)],
                config=types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"]),
            )
        except errors.ClientError as e:
            message = str(e).lower()
            if "rate" in message or "quota" in message:
                raise RateLimitError(f"API rate limit exceeded: {e}") from e
            if "auth" in message or "key" in message or "permission" in message:
                raise AuthenticationError(f"Invalid API key: {e}") from e
            raise GatewayError(f"Image generation failed: {e}") from e
        except Exception as e:
            raise GatewayError(f"Image generation failed: {e}") from e

        return self._extract_image(response)

    async def translate(self, notes: str, details: BeanDetails) -> TranslationPayload:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.settings.text_model,
                contents=[build_translation_prompt(notes, details)],
                config=types.GenerateContentConfig(response_mime_type="application/json"),
            )
            return self._parse_translation(response.text)
        except Exception:
            self.logger.warning("translation failed, keeping original text", exc_info=True)
            return TranslationPayload(notes=notes, details=details)

    @staticmethod
    def _parse_color(text: str | None) -> str:
        value = (text or "").strip()
        if not is_hex_color(value):
            raise MalformedColorResponse(f"Expected #RRGGBB, got {value[:40]!r}")
        return value

    @staticmethod
    def _parse_translation(text: str | None) -> TranslationPayload:
        if not text:
            raise MalformedTranslationResponse("Empty translation response")
        try:
            payload = TranslationPayload.model_validate_json(text)
        except ValidationError as e:
            raise MalformedTranslationResponse(f"Translation does not match input shape: {e}") from e

        missing = set(BeanDetails.model_fields) - payload.details.model_fields_set
        if missing:
            raise MalformedTranslationResponse(
                f"Translation is missing detail fields: {', '.join(sorted(missing))}"
            )
        return payload

    @staticmethod
    def _extract_image(response) -> ImageResult:
        for candidate in getattr(response, "candidates", None) or []:
            content = getattr(candidate, "content", None)
            for part in getattr(content, "parts", None) or []:
                inline = getattr(part, "inline_data", None)
                if not inline or not inline.data:
                    continue
                mime_type = getattr(inline, "mime_type", None) or "image/png"
                if not mime_type.startswith("image/"):
                    continue
                data = inline.data
                if isinstance(data, str):
                    data = base64.b64decode(data)
                return ImageResult(data=data, mime_type=mime_type)

        raise NoImageData("No image data found in response")
