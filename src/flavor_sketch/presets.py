"""Quick-mix presets for the tasting notes field."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Preset:
    id: str
    label: str
    notes: str


PRESETS: tuple[Preset, ...] = (
    Preset(id="1", label="Ethiopian Style", notes="Jasmine, bergamot, apricot"),
    Preset(id="2", label="Classic Roast", notes="Dark chocolate, toasted nut, caramel"),
    Preset(id="3", label="Summer Blend", notes="Strawberry, vanilla, citrus peel"),
)


def get_preset(preset_id: str) -> Preset:
    """Look up a preset by id.

    Raises:
        KeyError: If no preset has that id.
    """
    for preset in PRESETS:
        if preset.id == preset_id:
            return preset
    raise KeyError(f"Unknown preset: {preset_id}")
