"""Command-line interface for flavor-sketch."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

from flavor_sketch import __version__
from flavor_sketch.config import Settings
from flavor_sketch.core import build_orchestrator
from flavor_sketch.exceptions import ConfigurationError, FlavorSketchError
from flavor_sketch.export import default_filename, save_png
from flavor_sketch.presets import PRESETS
from flavor_sketch.schema import BeanDetails, CardView, ErrorState, FlavorRatings
from flavor_sketch.store import CardStore

DETAIL_OPTIONS = [
    ("name", "Bean name"),
    ("roaster", "Roaster"),
    ("brewing_method", "Brewing method"),
    ("roast_level", "Roast level"),
    ("process_method", "Process method"),
    ("origin", "Origin"),
    ("elevation", "Elevation"),
]


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="flavor-sketch",
        description="Draw a flavor card from coffee tasting notes",
    )
    parser.add_argument("notes", nargs="?", default="", help="Tasting notes")
    parser.add_argument(
        "--preset",
        choices=[preset.id for preset in PRESETS],
        help="Use a quick-mix preset instead of NOTES",
    )
    for field, label in DETAIL_OPTIONS:
        parser.add_argument(f"--{field.replace('_', '-')}", dest=field, default="", help=label)
    for dimension in FlavorRatings.model_fields:
        parser.add_argument(
            f"--{dimension}", type=int, choices=range(1, 6), help=f"{dimension.capitalize()} rating (1-5)"
        )
    parser.add_argument("--out", help="Where to save the illustration (default: <bean-name>.png)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--api-key",
        help="Gemini API key (default: GEMINI_API_KEY env var)",
    )
    parser.add_argument("--no-translate", action="store_true", help="Skip Chinese conversion")
    parser.add_argument("--no-color", action="store_true", help="Skip background color inference")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"flavor-sketch {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    details = BeanDetails(**{field: getattr(args, field) for field, _ in DETAIL_OPTIONS})
    store = CardStore(notes=args.notes, details=details)
    if args.preset:
        store.select_preset(args.preset)
    for dimension in FlavorRatings.model_fields:
        value = getattr(args, dimension)
        if value is not None:
            store.set_rating(dimension, value)
    if not store.notes.strip():
        print("Error: tasting notes are required", file=sys.stderr)
        return 1

    settings = Settings.from_env(args.api_key)
    settings = replace(
        settings,
        infer_color=settings.infer_color and not args.no_color,
        translate=settings.translate and not args.no_translate,
    )

    try:
        orchestrator = build_orchestrator(settings=settings, store=store)
        state = asyncio.run(orchestrator.generate())
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if isinstance(state, ErrorState):
        print(f"Error: {state.message}", file=sys.stderr)
        return 1

    view = store.view()
    try:
        path = save_png(view.image, args.out or default_filename(view.details))
    except FlavorSketchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = view.model_dump(mode="json", exclude={"image"})
        payload["image_path"] = str(path)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_formatted(view, str(path))

    return 0


def _print_formatted(view: CardView, path: str) -> None:
    """Print card in human-readable format."""
    print()
    print(f"  {view.details.name or 'Mystery Bean'}")
    print()

    fields = [(label, getattr(view.details, field)) for field, label in DETAIL_OPTIONS[1:]]
    fields += [
        ("Notes", view.notes),
        ("Ratings", _format_ratings(view)),
        ("Background", view.background_color),
        ("Saved to", path),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<16} {display}")

    print()


def _format_ratings(view: CardView) -> str:
    """Format ratings as `sweetness 3, acidity 4, ...`."""
    return ", ".join(f"{name} {value}" for name, value in view.ratings.model_dump().items())


if __name__ == "__main__":
    sys.exit(main())
