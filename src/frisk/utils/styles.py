from __future__ import annotations

"""
Terminal Style Mapping.

Maps node classifications to rich Style descriptors and renders them as
standard 8-color ANSI sequences. Every styled segment carries its own reset,
so segments can be concatenated freely.
"""

from typing import Dict

from rich.color import ColorSystem
from rich.style import Style

from frisk.domain.tree_models import Classification

# -----------------------------------------------------------------------------
# STYLE TABLE
# -----------------------------------------------------------------------------

_CLASSIFICATION_STYLES: Dict[Classification, Style] = {
    Classification.DIRECTORY: Style(color="blue", bold=True),
    Classification.SYMLINK: Style(color="cyan", bold=True),
    Classification.EXECUTABLE: Style(color="green", bold=True),
    Classification.IMAGE: Style(color="magenta", bold=True),
    Classification.ARCHIVE: Style(color="red", bold=True),
    Classification.ERROR: Style(color="red", bgcolor="black"),
    Classification.PLAIN: Style(),
}

PREFIX_STYLE = Style()
SIZE_STYLE = Style()
BYTES_STYLE = Style(dim=True)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def style_for(classification: Classification) -> Style:
    """Return the style descriptor used to print a node name."""
    return _CLASSIFICATION_STYLES[classification]


def colorize(text: str, style: Style, color: bool = True) -> str:
    """
    Render a text segment with the given style.

    Args:
        text: Segment to style.
        style: Style descriptor.
        color: When False, the text is returned unchanged.

    Returns:
        str: The segment wrapped in ANSI codes and a trailing reset,
             or the bare text for null styles.
    """
    if not color:
        return text
    return style.render(text, color_system=ColorSystem.STANDARD)
