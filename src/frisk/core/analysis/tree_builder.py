from __future__ import annotations

"""
Size Tree Builder.

Walks a directory hierarchy and produces an immutable size tree whose
directory sizes are aggregated bottom-up. Two schedulers share the same
per-entry logic: a sequential depth-first walk, and a concurrent walk that
fans out one task per directory entry onto a bounded thread pool and joins
all of them, in enumeration order, before aggregating.

Failures are isolated at the entry that caused them: an unreadable file or
subdirectory becomes a zero-sized error node and its siblings are scanned
as usual. Only a root that cannot be enumerated aborts the scan.
"""

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Union

from frisk.core.analysis.classifier import classify_entry
from frisk.domain.tree_models import (
    Classification,
    RootScanError,
    ScanMode,
    SizeTreeNode,
    iter_nodes,
)

logger = logging.getLogger(__name__)

DirectoryScanner = Callable[[str], SizeTreeNode]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_size_tree(
        path: str,
        mode: Union[ScanMode, str] = ScanMode.CONCURRENT,
        max_workers: Optional[int] = None,
) -> SizeTreeNode:
    """
    Scan a directory and return its size tree.

    Args:
        path: Root directory to scan.
        mode: Scheduling strategy (sequential or concurrent).
        max_workers: Pool size for the concurrent strategy. None uses the
                     ThreadPoolExecutor default.

    Returns:
        SizeTreeNode: The root node; children keep enumeration order.

    Raises:
        RootScanError: If the root path cannot be enumerated as a directory.
        ValueError: If max_workers is smaller than 1.
    """
    mode = ScanMode(mode)
    logger.info(f"Scanning '{path}' ({mode.value})")

    # Root enumeration failures are fatal and must not become error nodes
    entries = _list_root_entries(path)

    if mode is ScanMode.SEQUENTIAL:
        root = _assemble(path, [_scan_entry(e, _scan_directory_sequential) for e in entries])
    else:
        workers = resolve_worker_count(max_workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="FriskScanner") as executor:
            scanner = _ConcurrentScanner(executor, workers)
            root = scanner.assemble_entries(path, entries)

    _log_summary(root)
    return root


def resolve_worker_count(max_workers: Optional[int]) -> int:
    """Resolve the pool size, mirroring the ThreadPoolExecutor default."""
    if max_workers is None:
        return min(32, (os.cpu_count() or 1) + 4)
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, received {max_workers}")
    return max_workers

# -----------------------------------------------------------------------------
# CONCURRENT SCHEDULER
# -----------------------------------------------------------------------------

class _ConcurrentScanner:
    """
    Fork/join scheduler over a shared bounded pool.

    A child is submitted only while a worker slot is free; otherwise the
    dispatching thread scans it inline. Submitted tasks therefore never wait
    for a thread, which keeps nested joins free of deadlocks.
    """

    def __init__(self, executor: ThreadPoolExecutor, slots: int) -> None:
        self._executor = executor
        self._slots = threading.BoundedSemaphore(slots)

    def scan_directory(self, path: str) -> SizeTreeNode:
        return self.assemble_entries(path, _list_entries(path))

    def assemble_entries(self, path: str, entries: List[os.DirEntry]) -> SizeTreeNode:
        futures = [self._dispatch(entry) for entry in entries]
        children = [self._join(entry, future) for entry, future in zip(entries, futures)]
        return _assemble(path, children)

    def _dispatch(self, entry: os.DirEntry) -> "Future[SizeTreeNode]":
        if self._slots.acquire(blocking=False):
            try:
                return self._executor.submit(self._run_in_slot, entry)
            except BaseException:
                self._slots.release()
                raise

        future: "Future[SizeTreeNode]" = Future()
        try:
            future.set_result(_scan_entry(entry, self.scan_directory))
        except Exception as e:
            future.set_exception(e)
        return future

    def _run_in_slot(self, entry: os.DirEntry) -> SizeTreeNode:
        try:
            return _scan_entry(entry, self.scan_directory)
        finally:
            self._slots.release()

    @staticmethod
    def _join(entry: os.DirEntry, future: "Future[SizeTreeNode]") -> SizeTreeNode:
        try:
            return future.result()
        except Exception as e:
            logger.warning(f"Scan task for '{entry.path}' failed: {e}")
            return _error_node(entry.path, e)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (PER-ENTRY LOGIC)
# -----------------------------------------------------------------------------

def _scan_directory_sequential(path: str) -> SizeTreeNode:
    entries = _list_entries(path)
    return _assemble(path, [_scan_entry(e, _scan_directory_sequential) for e in entries])


def _scan_entry(entry: os.DirEntry, recurse: DirectoryScanner) -> SizeTreeNode:
    """
    Produce the node of one directory entry, isolating filesystem errors.

    Directories are handed to `recurse`; everything else is a leaf. Symbolic
    links are never followed for descent.
    """
    try:
        if entry.is_dir(follow_symlinks=False):
            return recurse(entry.path)
        return _scan_leaf(entry)
    except OSError as e:
        logger.debug(f"Isolated unreadable entry '{entry.path}': {e}")
        return _error_node(entry.path, e)


def _scan_leaf(entry: os.DirEntry) -> SizeTreeNode:
    """Read leaf metadata and classify it. Raises OSError on failure."""
    own = entry.stat(follow_symlinks=False)
    is_symlink = entry.is_symlink()

    # Only checks that a link resolves; a dangling link raises here
    target = entry.stat(follow_symlinks=True) if is_symlink else own

    return SizeTreeNode(
        path=entry.path,
        size_bytes=own.st_size,
        classification=classify_entry(entry.name, is_symlink, target.st_mode),
    )


def _list_entries(path: str) -> List[os.DirEntry]:
    with os.scandir(path) as it:
        return list(it)


def _list_root_entries(path: str) -> List[os.DirEntry]:
    try:
        return _list_entries(path)
    except OSError as e:
        logger.error(f"Root path '{path}' cannot be scanned: {e}")
        raise RootScanError(path, e.strerror or str(e)) from e


def _assemble(path: str, children: Iterable[SizeTreeNode]) -> SizeTreeNode:
    """Aggregate child sizes into a parent node; empty directories stay PLAIN."""
    ordered = tuple(children)
    return SizeTreeNode(
        path=path,
        size_bytes=sum(child.size_bytes for child in ordered),
        classification=Classification.DIRECTORY if ordered else Classification.PLAIN,
        children=ordered,
    )


def _error_node(path: str, error: BaseException) -> SizeTreeNode:
    return SizeTreeNode(
        path=path,
        size_bytes=0,
        classification=Classification.ERROR,
        error=str(error),
    )


def _log_summary(root: SizeTreeNode) -> None:
    total = 0
    errors = 0
    for node in iter_nodes(root):
        total += 1
        if node.is_error:
            errors += 1

    logger.info(f"Scan complete: {total} entries, {root.size_bytes} bytes")
    if errors:
        logger.warning(f"{errors} entries could not be read and were counted as 0 bytes")
