from __future__ import annotations

"""
Size Tree Data Models.

Provides the immutable node type produced by the scanner, the closed set of
classifications that drive rendering, and the single domain exception raised
when the scan root itself cannot be read.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class Classification(Enum):
    """Mutually exclusive tag of a scanned entry."""
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    EXECUTABLE = "executable"
    IMAGE = "image"
    ARCHIVE = "archive"
    ERROR = "error"
    PLAIN = "plain"


class ScanMode(Enum):
    """Scheduling strategy used by the tree builder."""
    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SizeTreeNode:
    """
    A single entry of the size tree.

    Attributes:
        path: Filesystem path of the entry, as joined from the scan root.
        size_bytes: Own size for leaves, sum of children for directories,
                    0 for error nodes.
        classification: Tag resolved by the classifier.
        children: Child nodes in directory enumeration order.
        error: Reason of the failure for error nodes.
    """
    path: str
    size_bytes: int
    classification: Classification = Classification.PLAIN
    children: Tuple["SizeTreeNode", ...] = ()
    error: Optional[str] = None

    @property
    def name(self) -> str:
        """Last path component, or the path itself for filesystem roots."""
        return os.path.basename(os.path.normpath(self.path)) or self.path

    @property
    def is_directory(self) -> bool:
        return self.classification is Classification.DIRECTORY

    @property
    def is_error(self) -> bool:
        return self.classification is Classification.ERROR


def iter_nodes(root: SizeTreeNode) -> Iterator[SizeTreeNode]:
    """Yield every node of the tree in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class RootScanError(Exception):
    """Raised when the scan root cannot be enumerated as a directory."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot scan '{path}': {reason}")
        self.path = path
        self.reason = reason
