"""Card state store: live input plus the current generation state."""

from __future__ import annotations

from flavor_sketch.presets import get_preset
from flavor_sketch.schema import (
    BeanDetails,
    CardState,
    CardView,
    ErrorState,
    FlavorRatings,
    GeneratingState,
    GenerationRequest,
    IdleState,
    SuccessState,
)


class CardStore:
    """Holds what the user is typing and the last generation outcome.

    The live input and the committed result are kept apart: a card that was
    generated from a snapshot keeps showing that snapshot's (translated) text
    while the user edits the form for the next one.
    """

    def __init__(
        self,
        notes: str = "",
        details: BeanDetails | None = None,
        ratings: FlavorRatings | None = None,
    ):
        self.notes = notes
        self.details = details or BeanDetails()
        self.ratings = ratings or FlavorRatings()
        self._state: CardState = IdleState()

    @property
    def state(self) -> CardState:
        return self._state

    @property
    def is_generating(self) -> bool:
        return isinstance(self._state, GeneratingState)

    def set_notes(self, notes: str) -> None:
        self.notes = notes

    def set_detail(self, field: str, value: str) -> None:
        if field not in BeanDetails.model_fields:
            raise ValueError(f"Unknown detail field: {field}")
        self.details = BeanDetails(**{**self.details.model_dump(), field: value})

    def set_rating(self, dimension: str, value: int) -> None:
        if dimension not in FlavorRatings.model_fields:
            raise ValueError(f"Unknown rating dimension: {dimension}")
        self.ratings = FlavorRatings(**{**self.ratings.model_dump(), dimension: value})

    def select_preset(self, preset_id: str) -> None:
        self.notes = get_preset(preset_id).notes

    def snapshot(self) -> GenerationRequest:
        return GenerationRequest(notes=self.notes, details=self.details)

    def view(self) -> CardView:
        """Build the render data for the current state."""
        state = self._state
        if isinstance(state, SuccessState):
            result = state.result
            return CardView(
                status=state.status,
                notes=result.translated_notes,
                details=result.translated_details,
                ratings=self.ratings,
                image=result.image,
                background_color=result.background_color,
            )
        return CardView(
            status=state.status,
            notes=self.notes,
            details=self.details,
            ratings=self.ratings,
            error_message=state.message if isinstance(state, ErrorState) else None,
        )

    def _transition(self, state: CardState) -> None:
        self._state = state
