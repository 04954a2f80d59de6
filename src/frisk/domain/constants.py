from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the extension sets used for classification, the default
ignore list for rendering, and the unit ladder of the size formatter.
"""

from typing import Tuple

APP_VERSION = "1.0.0"
APP_NAME = "frisk"

IMAGE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff")

# Multi-part suffixes are listed explicitly and matched against the file name
ARCHIVE_EXTENSIONS: Tuple[str, ...] = (".zip", ".tar", ".tar.gz", ".tar.bz2", ".rar", ".7z")

DEFAULT_IGNORE: Tuple[str, ...] = (".git", "node_modules")

SIZE_UNITS: Tuple[str, ...] = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

UNLIMITED_DEPTH = -1
