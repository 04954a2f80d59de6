from __future__ import annotations

"""
Entry Classifier.

Resolves the classification of a non-directory entry from its name and
metadata. Checks run in a fixed precedence and the first match wins, so a
symlink to an image is a symlink, and an executable archive is executable.
"""

import stat
from typing import Iterable

from frisk.domain.constants import ARCHIVE_EXTENSIONS, IMAGE_EXTENSIONS
from frisk.domain.tree_models import Classification


def classify_entry(name: str, is_symlink: bool, target_mode: int) -> Classification:
    """
    Classify a leaf entry.

    Args:
        name: Entry file name (last path component).
        is_symlink: Whether the entry itself is a symbolic link.
        target_mode: st_mode of the entry, following links.

    Returns:
        Classification: The first matching tag, PLAIN if none match.
    """
    if is_symlink:
        return Classification.SYMLINK
    if stat.S_ISREG(target_mode) and target_mode & stat.S_IXUSR:
        return Classification.EXECUTABLE
    if has_extension(name, IMAGE_EXTENSIONS):
        return Classification.IMAGE
    if has_extension(name, ARCHIVE_EXTENSIONS):
        return Classification.ARCHIVE
    return Classification.PLAIN


def has_extension(name: str, extensions: Iterable[str]) -> bool:
    """Case-sensitive suffix match that also covers multi-part extensions."""
    # A dotfile such as ".zip" has no extension
    return any(name.endswith(ext) and len(name) > len(ext) for ext in extensions)
