"""Raw reads of on-disk repository metadata.

These helpers read the small text files the fast resolution path depends
on. They return bytes so callers decide how to treat undecodable names.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from gitline.exceptions import MetadataReadError

if TYPE_CHECKING:
    from pathlib import Path

    from gitline.repository._models import RepositoryHandle

_PACKED_REFS: Final = "packed-refs"


def read_metadata_file(path: Path) -> bytes | None:
    """Read a metadata file.

    Args:
        path: File to read.

    Returns:
        The file contents, or None if the file does not exist.

    Raises:
        MetadataReadError: If the file exists but cannot be read.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except IsADirectoryError:
        return None
    except OSError as e:
        msg = f"Unable to read {path}: {e}"
        raise MetadataReadError(msg, path=path) from e


def _read_packed_ref(common_dir: Path, refname: bytes) -> bytes | None:
    data = read_metadata_file(common_dir / _PACKED_REFS)
    if data is None:
        return None
    for line in data.splitlines():
        # Header comments and peeled "^<sha>" lines never name a ref
        if not line or line.startswith((b"#", b"^")):
            continue
        sha, _, name = line.partition(b" ")
        if name.strip() == refname:
            return sha
    return None


def read_ref(handle: RepositoryHandle, refname: bytes) -> bytes | None:
    """Read a reference without following symbolic targets.

    Names under ``refs/`` live in the common directory, shared by every
    worktree; other names such as ``HEAD`` are per-worktree. Loose files
    take precedence over ``packed-refs``.

    Args:
        handle: Repository to read from.
        refname: Fully qualified reference name, e.g. ``b"refs/heads/main"``.

    Returns:
        The first line of the reference (a hex object id or a
        ``ref: <target>`` line), or None if the reference does not exist.

    Raises:
        MetadataReadError: If a reference file exists but cannot be read.
    """
    base = handle.common_dir if refname.startswith(b"refs/") else handle.git_dir
    contents = read_metadata_file(base / os.fsdecode(refname))
    if contents:
        lines = contents.splitlines()
        first = lines[0].strip() if lines else b""
        if first:
            return first
    if refname.startswith(b"refs/"):
        return _read_packed_ref(handle.common_dir, refname)
    return None
