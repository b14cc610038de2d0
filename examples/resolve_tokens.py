#!/usr/bin/env python3
"""
Example: Resolving design values to theme tokens.

Two theme files are extracted concurrently and merged, then a batch of
values taken from a design document is resolved against the result.
Values with no token are listed for review, with the nearest theme color
where one is close.

Usage:
    python examples/resolve_tokens.py
"""

import asyncio
import json
import tempfile
from pathlib import Path

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.matching import resolve_values
from chuk_mcp_tokens.models import DesignValue
from chuk_mcp_tokens.sources import extract_sources

BASE_THEME = {
    "tokens": {
        "masterPalette": {"blue500": "#3B82F6", "gray500": "#6B7280"},
        "spacing": {"sm": 8, "md": 16, "lg": 24},
        "radius": {"md": 8},
    }
}

APP_THEME = {
    "colors": {"primary": "#3b82f6", "surface": "#FFFFFF"},
    "shadows": {
        "sm": {"offsetX": 0, "offsetY": 1, "blur": 3, "color": "#0000001A"},
        "md": {"offsetX": 0, "offsetY": 4, "blur": 8, "color": "#0000001A"},
    },
    "typography": {
        "body": {"fontFamily": "Inter", "fontSize": 16, "fontWeight": 400, "lineHeight": 24},
        "heading": {"bold": {"fontSize": 24, "lineHeight": 32}},
    },
}

DESIGN_VALUES = [
    {"category": "color", "hex": "#3b82f6"},
    {"category": "color", "hex": "#3C83F5"},
    {"category": "spacing", "value": 16},
    {"category": "spacing", "value": 12},
    {"category": "radii", "value": 8},
    {"category": "shadow", "offsetY": 2, "blur": 5, "color": "#0000001A"},
    {"category": "shadow", "offsetY": 12, "blur": 32},
    {"category": "typography", "fontSize": 16, "fontWeight": 400, "lineHeight": 25},
    {"category": "typography", "fontSize": 24, "fontWeight": 700, "lineHeight": 32},
]


async def main() -> None:
    """Demonstrate extraction and matching."""
    print("CHUK Tokens Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_tokens/library"
    config = ConfigLoader(library_path=library_path).get_config("default")

    with tempfile.TemporaryDirectory() as tmp:
        paths = []
        for name, tree in (("base.json", BASE_THEME), ("theme.json", APP_THEME)):
            path = Path(tmp) / name
            path.write_text(json.dumps(tree))
            paths.append(path)

        index = await extract_sources(paths, config.extraction)

    print("Extracted index:")
    for category, count in index.summary().items():
        print(f"  {category}: {count}")
    print(f"  #3B82F6 -> {index.colors['#3B82F6']}")
    print()

    values = [DesignValue.parse(raw) for raw in DESIGN_VALUES]
    resolution = resolve_values(values, index, has_project_theme=True, config=config.matching)

    print("Resolved values:")
    for result in resolution.results:
        target = result.path if result.matched else "(unmapped)"
        print(f"  {result.category.value:<10} {result.normalized_value!s:<20} -> {target}")
        if result.matched:
            print(f"             via {result.strategy.value}")
    print()

    print("Unmapped values for review:")
    for category, items in resolution.unmapped.to_dict().items():
        print(f"  {category}: {items}")

    suggestions = resolution.unmapped.suggestions(index, config.matching.color_suggestion_threshold)
    for color, suggestion in suggestions.items():
        print(f"  {color} is close to {suggestion['path']} (dE {suggestion['distance']})")
    print()

    print("Done!")


if __name__ == "__main__":
    asyncio.run(main())
