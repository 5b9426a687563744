"""Base gateway interface."""

from abc import ABC, abstractmethod

from flavor_sketch.schema import BeanDetails, ImageResult, TranslationPayload


class BaseGateway(ABC):
    """Abstract adapter around a generative image/text service."""

    @abstractmethod
    async def infer_background_color(self, notes: str) -> str:
        """Infer a pastel background color for the tasting notes.

        Args:
            notes: Free-text tasting notes

        Returns:
            A `#RRGGBB` color. Falls back to a default color on any failure.
        """
        pass

    @abstractmethod
    async def generate_image(self, notes: str, background_color: str) -> ImageResult:
        """Draw the tasting notes on the given background color.

        Raises:
            NoImageData: If the response carries no image
            GatewayError: If the call itself fails
        """
        pass

    @abstractmethod
    async def translate(self, notes: str, details: BeanDetails) -> TranslationPayload:
        """Convert Simplified Chinese text to Traditional Chinese.

        Returns:
            The translated payload, or the original notes/details on any failure.
        """
        pass
