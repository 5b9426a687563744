"""flavor-sketch: Turn coffee tasting notes into illustrated record cards."""

from flavor_sketch.core import build_orchestrator, generate_card
from flavor_sketch.orchestrator import FlavorCardOrchestrator
from flavor_sketch.schema import (
    BeanDetails,
    CardState,
    ErrorState,
    FlavorRatings,
    GeneratingState,
    GenerationRequest,
    GenerationResult,
    IdleState,
    ImageResult,
    SuccessState,
)
from flavor_sketch.store import CardStore

__version__ = "0.1.0"

__all__ = [
    "build_orchestrator",
    "generate_card",
    "FlavorCardOrchestrator",
    "CardStore",
    "BeanDetails",
    "CardState",
    "ErrorState",
    "FlavorRatings",
    "GeneratingState",
    "GenerationRequest",
    "GenerationResult",
    "IdleState",
    "ImageResult",
    "SuccessState",
    "__version__",
]
