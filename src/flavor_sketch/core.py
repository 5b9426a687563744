"""Wiring helpers for running generation cycles."""

from flavor_sketch.config import Settings
from flavor_sketch.orchestrator import FlavorCardOrchestrator
from flavor_sketch.providers.base import BaseGateway
from flavor_sketch.schema import BeanDetails, CardState
from flavor_sketch.store import CardStore


def _build_gemini_gateway(settings: Settings) -> BaseGateway:
    from flavor_sketch.providers.gemini import GeminiGateway

    return GeminiGateway(settings)


def build_orchestrator(
    *,
    api_key: str | None = None,
    settings: Settings | None = None,
    store: CardStore | None = None,
) -> FlavorCardOrchestrator:
    """Build an orchestrator backed by the Gemini gateway.

    Args:
        api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
        settings: Full settings. Defaults to `Settings.from_env(api_key)`.
        store: Store to drive. A fresh one is created if omitted.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    settings = settings or Settings.from_env(api_key)
    return FlavorCardOrchestrator(
        _build_gemini_gateway(settings),
        store,
        infer_color=settings.infer_color,
        translate=settings.translate,
        fallback_color=settings.fallback_color,
    )


async def generate_card(
    notes: str,
    details: BeanDetails | None = None,
    *,
    api_key: str | None = None,
    settings: Settings | None = None,
) -> CardState:
    """Generate a flavor card for the given notes.

    Returns:
        The terminal card state. Blank notes leave the card idle.
    """
    store = CardStore(notes=notes, details=details)
    orchestrator = build_orchestrator(api_key=api_key, settings=settings, store=store)
    await orchestrator.generate()
    return store.state
