"""Generation orchestrator: drives one request to a terminal card state."""

from __future__ import annotations

import asyncio
import logging

from flavor_sketch.config import DEFAULT_BACKGROUND_COLOR
from flavor_sketch.exceptions import FlavorSketchError
from flavor_sketch.providers.base import BaseGateway
from flavor_sketch.schema import (
    CardState,
    ErrorState,
    GeneratingState,
    GenerationRequest,
    GenerationResult,
    ImageResult,
    SuccessState,
    TranslationPayload,
    is_hex_color,
)
from flavor_sketch.store import CardStore

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong while drawing."


class FlavorCardOrchestrator:
    """Coordinates gateway calls and owns the card state transitions.

    States move `idle -> generating -> success | error`, and from a terminal
    state straight back to `generating`. Only one cycle runs at a time.
    """

    def __init__(
        self,
        gateway: BaseGateway,
        store: CardStore | None = None,
        *,
        infer_color: bool = True,
        translate: bool = True,
        fallback_color: str = DEFAULT_BACKGROUND_COLOR,
    ):
        if not is_hex_color(fallback_color):
            raise ValueError(f"fallback_color must be #RRGGBB, got {fallback_color!r}")
        self.gateway = gateway
        self.store = store or CardStore()
        self.infer_color = infer_color
        self.translate = translate
        self.fallback_color = fallback_color

    def begin(self) -> GenerationRequest | None:
        """Snapshot the live input and enter the generating state.

        Returns:
            The request to run, or None if notes are blank or a cycle is
            already in flight.
        """
        if self.store.is_generating:
            logger.debug("generation already in flight, ignoring trigger")
            return None
        if not self.store.notes.strip():
            return None

        request = self.store.snapshot()
        self.store._transition(GeneratingState(request=request))
        return request

    async def run(self, request: GenerationRequest) -> CardState:
        """Run both branches for a request and write the terminal state."""
        image_outcome, translation_outcome = await asyncio.gather(
            self._image_branch(request),
            self._translation_branch(request),
            return_exceptions=True,
        )

        try:
            state = self._merge(request, image_outcome, translation_outcome)
        except Exception:
            logger.exception("failed to build card state")
            state = ErrorState(message=GENERIC_ERROR_MESSAGE)

        self.store._transition(state)
        return state

    def _merge(self, request: GenerationRequest, image_outcome, translation_outcome) -> CardState:
        if isinstance(image_outcome, BaseException):
            return ErrorState(message=self._error_message(image_outcome))

        image, background_color = image_outcome
        if isinstance(translation_outcome, BaseException):
            logger.warning(
                "translation branch failed, keeping original text: %s", translation_outcome
            )
            translation_outcome = TranslationPayload(notes=request.notes, details=request.details)
        return SuccessState(
            result=GenerationResult(
                image=image,
                background_color=background_color,
                translated_notes=translation_outcome.notes,
                translated_details=translation_outcome.details,
            )
        )

    async def generate(self) -> CardState | None:
        """Run one full cycle from the live input.

        Returns:
            The terminal state, or None if the trigger was rejected.
        """
        request = self.begin()
        if request is None:
            return None
        return await self.run(request)

    def trigger(self) -> asyncio.Task | None:
        """Start a cycle in the background on the running event loop."""
        request = self.begin()
        if request is None:
            return None
        return asyncio.get_running_loop().create_task(self.run(request))

    async def _image_branch(self, request: GenerationRequest) -> tuple[ImageResult, str]:
        background_color = self.fallback_color
        if self.infer_color:
            try:
                inferred = await self.gateway.infer_background_color(request.notes)
            except Exception:
                logger.warning("color inference raised, using fallback", exc_info=True)
            else:
                if is_hex_color(inferred):
                    background_color = inferred
                else:
                    logger.warning("ignoring invalid background color %r", inferred)
        image = await self.gateway.generate_image(request.notes, background_color)
        return image, background_color

    async def _translation_branch(self, request: GenerationRequest) -> TranslationPayload:
        if not self.translate:
            return TranslationPayload(notes=request.notes, details=request.details)
        return await self.gateway.translate(request.notes, request.details)

    @staticmethod
    def _error_message(error: BaseException) -> str:
        if isinstance(error, FlavorSketchError):
            logger.error("image generation failed: %s", error)
            return str(error) or GENERIC_ERROR_MESSAGE
        logger.error("unexpected image generation failure", exc_info=error)
        return GENERIC_ERROR_MESSAGE
