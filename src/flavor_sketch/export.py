"""Saving generated illustrations."""

import re
from io import BytesIO
from pathlib import Path

from PIL import Image

from flavor_sketch.exceptions import FlavorSketchError
from flavor_sketch.schema import BeanDetails, ImageResult


def default_filename(details: BeanDetails) -> str:
    """File name for a card, derived from the bean name."""
    stem = re.sub(r"[\s\\/]+", "-", details.name.strip()).strip("-.").lower() or "flavor-card"
    return f"{stem}.png"


def save_png(image: ImageResult, path: str | Path) -> Path:
    """Write the image to `path` as PNG.

    Raises:
        FlavorSketchError: If the payload cannot be decoded as an image.
    """
    path = Path(path)
    try:
        with Image.open(BytesIO(image.data)) as pil_image:
            path.parent.mkdir(parents=True, exist_ok=True)
            pil_image.save(path, format="PNG")
    except OSError as e:
        raise FlavorSketchError(f"Failed to save image: {e}") from e
    return path
