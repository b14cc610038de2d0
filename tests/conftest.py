"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tokens.extraction import ThemeWalker
from chuk_mcp_tokens.models import ExtractionConfig, ProjectTokenIndex


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in config library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_tokens" / "library"


@pytest.fixture
def extraction_config() -> ExtractionConfig:
    """Default extraction configuration."""
    return ExtractionConfig()


@pytest.fixture
def sample_theme() -> dict[str, Any]:
    """A theme tree with every token category, in a few different shapes."""
    return {
        "colors": {
            "primary": "#3b82f6",
            "background": "#FFF",
            "text": {"muted": "#6B7280"},
            "brand-500": "#FF5500",
        },
        "spacing": {"xs": 4, "sm": 8, "md": 16, "lg": 24},
        "radius": {"sm": 4, "md": 8},
        "shadows": {
            "sm": {"offsetX": 0, "offsetY": 1, "blur": 3, "spread": 0, "color": "#0000001A"},
            "md": {"offsetX": 0, "offsetY": 4, "blur": 8, "spread": 0, "color": "#0000001A"},
        },
        "typography": {
            "body": {"fontFamily": "Inter", "fontSize": 16, "fontWeight": 400, "lineHeight": 24},
            "heading": {
                "bold": {"fontSize": 24, "lineHeight": 32},
            },
        },
        "zIndex": {"modal": 100},
        "breakpoints": [640, 768, 1024],
    }


@pytest.fixture
def sample_index(sample_theme: dict[str, Any]) -> ProjectTokenIndex:
    """Token index extracted from the sample theme."""
    return ThemeWalker().extract(sample_theme)


@pytest.fixture
def write_theme(temp_dir: Path):
    """Write a theme tree to a JSON file and return its path."""

    def _write(name: str, tree: Any) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(tree))
        return path

    return _write
