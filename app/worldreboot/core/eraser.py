"""Recursive erasure of world folder contents.

Provides the two deletion primitives used by a regeneration run:

- delete_recursively: remove a path and everything beneath it, deepest first.
- erase_contents: empty a root folder while keeping the folder itself.

Neither function raises on filesystem errors. Every OS call is wrapped so
that a failure becomes an ErasureError value, is logged, and is folded into
the boolean result.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class ErasureErrorKind(str, Enum):
    """Kind of failure encountered while erasing a tree."""

    ENUMERATION_FAILED = "enumeration_failed"
    DELETION_FAILED = "deletion_failed"


@dataclass(frozen=True, slots=True)
class ErasureError:
    """A filesystem failure captured as a value.

    Attributes:
        kind: Whether listing or deleting failed.
        path: Path the failing call operated on.
        message: Underlying OS error message.
    """

    kind: ErasureErrorKind
    path: Path
    message: str

    @classmethod
    def from_os_error(cls, kind: ErasureErrorKind, path: Path, error: OSError) -> "ErasureError":
        """Build an ErasureError from a caught OSError."""
        return cls(kind=kind, path=path, message=error.strerror or str(error))


def _collect_nodes(path: Path) -> list[Path] | ErasureError:
    """List path and every node beneath it, top-down.

    Symlinks are returned as nodes but never followed. Any failure to
    stat or list a directory abandons the whole walk.

    Returns:
        All reachable nodes including path, or the enumeration error.
    """
    nodes: list[Path] = []
    pending = [path]
    current = path
    try:
        # lstat raises for a vanished path before anything is collected
        path.lstat()
        while pending:
            current = pending.pop()
            nodes.append(current)
            if current.is_dir() and not current.is_symlink():
                pending.extend(current.iterdir())
    except OSError as e:
        return ErasureError.from_os_error(ErasureErrorKind.ENUMERATION_FAILED, current, e)
    return nodes


def _delete_node(node: Path) -> ErasureError | None:
    """Delete a single file, symlink or (empty) directory."""
    try:
        if node.is_dir() and not node.is_symlink():
            node.rmdir()
        else:
            node.unlink()
    except OSError as e:
        return ErasureError.from_os_error(ErasureErrorKind.DELETION_FAILED, node, e)
    return None


def delete_recursively(path: Path) -> bool:
    """Delete a path and, if it is a directory, all of its descendants.

    Nodes are sorted and deleted in reverse order, so every descendant is
    attempted before its ancestors. A failed deletion is logged and the
    remaining nodes are still attempted; the ancestor of a node that could
    not be removed will then fail as well.

    If the subtree cannot be enumerated nothing is deleted.

    Args:
        path: File or directory to delete.

    Returns:
        True if every node was deleted, False otherwise.
    """
    path = Path(path)
    nodes = _collect_nodes(path)
    if isinstance(nodes, ErasureError):
        logger.error("Failed to walk path %s: %s", nodes.path, nodes.message)
        return False

    success = True
    for node in sorted(nodes, reverse=True):
        error = _delete_node(node)
        if error is None:
            logger.debug("Deleted %s", node)
            continue
        logger.error("Failed to delete %s: %s", error.path, error.message)
        success = False

    return success


def erase_contents(root_path: Path) -> bool:
    """Delete everything inside root_path but keep root_path itself.

    A missing root, or one that is not a directory, is treated as
    nothing to delete.

    Args:
        root_path: Folder whose contents should be removed.

    Returns:
        True if the root is absent or every entry was removed,
        False if listing the root or any deletion failed.
    """
    root_path = Path(root_path)
    try:
        # is_dir() still raises on errors other than a missing path (e.g. EACCES)
        if not root_path.is_dir():
            return True
        entries = sorted(root_path.iterdir())
    except OSError as e:
        error = ErasureError.from_os_error(ErasureErrorKind.ENUMERATION_FAILED, root_path, e)
        logger.error("Error reading world folder %s: %s", root_path.name, error.message)
        return False

    success = True
    for entry in entries:
        if not delete_recursively(entry):
            success = False

    return success
