from __future__ import annotations

"""
Unit tests for the Entry Classifier.

Verifies the precedence order (symlink, executable, image, archive, plain)
and suffix-based extension matching.
"""

import stat

import pytest

from frisk.core.analysis.classifier import classify_entry, has_extension
from frisk.domain.tree_models import Classification

REGULAR = stat.S_IFREG | 0o644
EXECUTABLE = stat.S_IFREG | 0o755


def test_symlink_wins_over_everything() -> None:
    assert classify_entry("photo.png", True, EXECUTABLE) is Classification.SYMLINK
    assert classify_entry("backup.zip", True, REGULAR) is Classification.SYMLINK


def test_executable_wins_over_extension() -> None:
    assert classify_entry("installer.zip", False, EXECUTABLE) is Classification.EXECUTABLE


def test_only_owner_execute_bit_counts() -> None:
    group_only = stat.S_IFREG | 0o654
    assert classify_entry("tool", False, group_only) is Classification.PLAIN


def test_executable_requires_regular_file() -> None:
    fifo = stat.S_IFIFO | 0o755
    assert classify_entry("pipe", False, fifo) is Classification.PLAIN


@pytest.mark.parametrize("name", ["a.jpg", "b.jpeg", "c.png", "d.gif", "e.bmp", "f.tiff"])
def test_image_extensions(name: str) -> None:
    assert classify_entry(name, False, REGULAR) is Classification.IMAGE


@pytest.mark.parametrize("name", ["a.zip", "b.tar", "c.tar.gz", "d.tar.bz2", "e.rar", "f.7z"])
def test_archive_extensions(name: str) -> None:
    assert classify_entry(name, False, REGULAR) is Classification.ARCHIVE


@pytest.mark.parametrize("name", ["notes.txt", "Makefile", "archive.gz", "png", ".zip"])
def test_everything_else_is_plain(name: str) -> None:
    assert classify_entry(name, False, REGULAR) is Classification.PLAIN


def test_has_extension_is_suffix_based() -> None:
    assert has_extension("data.tar.gz", [".tar.gz"])
    assert not has_extension("data.tar.gz.part", [".tar.gz"])


@pytest.mark.parametrize("name", ["PHOTO.PNG", "Scan.Jpg", "X.ZIP", "data.TAR.GZ"])
def test_extension_match_is_case_sensitive(name: str) -> None:
    assert classify_entry(name, False, REGULAR) is Classification.PLAIN
