"""Gateways for flavor-sketch."""

from flavor_sketch.providers.base import BaseGateway
from flavor_sketch.providers.gemini import GeminiGateway

__all__ = ["BaseGateway", "GeminiGateway"]
