"""Data models for flavor-sketch."""

import base64
import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

RatingValue = Annotated[int, Field(ge=1, le=5)]


def is_hex_color(value: object) -> bool:
    """Return True if value is a `#RRGGBB` color code."""
    return isinstance(value, str) and bool(HEX_COLOR_PATTERN.match(value))


class BeanDetails(BaseModel):
    """Optional descriptive fields about the bean and brew."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    roaster: str = ""
    brewing_method: str = ""
    roast_level: str = ""
    process_method: str = ""
    origin: str = ""
    elevation: str = ""


class FlavorRatings(BaseModel):
    """1-5 ratings across four taste dimensions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sweetness: RatingValue = 3
    acidity: RatingValue = 3
    bitterness: RatingValue = 3
    body: RatingValue = 3


class GenerationRequest(BaseModel):
    """Snapshot of the input at the moment generation was triggered."""

    model_config = ConfigDict(frozen=True)

    notes: str
    details: BeanDetails = Field(default_factory=BeanDetails)


class ImageResult(BaseModel):
    """Image payload returned by the image model."""

    model_config = ConfigDict(frozen=True, ser_json_bytes="base64")

    data: bytes
    mime_type: str = "image/png"

    @property
    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


class TranslationPayload(BaseModel):
    """Shape of the translation request and response."""

    model_config = ConfigDict(extra="forbid")

    notes: str
    details: BeanDetails


class GenerationResult(BaseModel):
    """Merged output of one successful generation cycle."""

    model_config = ConfigDict(frozen=True)

    image: ImageResult
    background_color: str
    translated_notes: str
    translated_details: BeanDetails

    @field_validator("background_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not is_hex_color(value):
            raise ValueError(f"not a #RRGGBB color: {value!r}")
        return value


class IdleState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class GeneratingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["generating"] = "generating"
    request: GenerationRequest


class SuccessState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    result: GenerationResult


class ErrorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: str


CardState = Annotated[
    IdleState | GeneratingState | SuccessState | ErrorState,
    Field(discriminator="status"),
]


class CardView(BaseModel):
    """Everything the presentation layer needs to draw the card."""

    status: Literal["idle", "generating", "success", "error"]
    notes: str
    details: BeanDetails
    ratings: FlavorRatings
    image: ImageResult | None = None
    background_color: str | None = None
    error_message: str | None = None
