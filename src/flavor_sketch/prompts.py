"""Prompt text sent to the generation models."""

import json

from flavor_sketch.schema import BeanDetails, TranslationPayload


def build_color_prompt(notes: str) -> str:
    """Prompt asking for a pastel background color for the notes."""
    return f"""You are given coffee tasting notes.
Pick the single most dominant flavor and think of the color most associated with it
(e.g. strawberry -> red, matcha -> green, jasmine -> white-yellow).
Turn that color into a very light pastel tone that works as a card background
with black text printed on top of it. The text must stay easy to read.

Return only the hex color code in the form #RRGGBB, no additional text.

Tasting notes:
\"\"\"{notes}\"\"\"
"""


def build_image_prompt(notes: str, background_color: str) -> str:
    """Prompt for the square flavor illustration."""
    return f"""Create a square digital illustration representing these coffee tasting notes: "{notes}".

Style Guide:
- Art Style: Mix of Y2K vector illustration aesthetic and organic hand-drawn sketch styles.
- Composition: Artfully arranged ingredients (fruits, flowers, chocolates, etc.) corresponding to the tasting notes.
- Layout Constraints: DO NOT display any single specific food item more than 2 times.
  For example, if 'strawberry' is mentioned, draw at most 1 or 2 strawberries, never a pile.
  Keep the composition airy, simple, and balanced with plenty of negative space.
- Technique: Looks like a high-quality marker or ink drawing.
- Color Palette: Warm, cozy, vibrant but slightly desaturated (retro feel).
- Text: DO NOT include any text, letters, words or characters in the illustration.
- Background: Flat, solid color filling the whole canvas, exactly hex code {background_color}.
  No gradients, no paper texture, no shadows on the background.

Do not make it photorealistic. Make it illustrative and artistic."""


def build_translation_prompt(notes: str, details: BeanDetails) -> str:
    """Prompt converting Simplified Chinese input to Traditional Chinese."""
    payload = TranslationPayload(notes=notes, details=details)
    source = json.dumps(payload.model_dump(), ensure_ascii=False, sort_keys=True, indent=2)
    return f"""You are given a JSON object with coffee tasting notes and bean details.
For every string value:
- If it contains Simplified Chinese, convert it to Traditional Chinese.
- If it is English, Traditional Chinese, or any other language, return it unchanged, character for character.
- Empty strings stay empty.

Return a JSON object with exactly the same keys and structure as the input.
Return valid JSON only, no additional text.

Input:
{source}
"""
