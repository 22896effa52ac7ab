"""Repository discovery.

This package locates a repository's working tree and metadata directories
by probing the filesystem only. It never loads the object model, so the
fast resolution path can use it without importing dulwich.

Functions:
    locate_repository: Walk up from a path to the enclosing repository.
    read_metadata_file: Read a metadata file, None when absent.
    read_ref: Read a loose or packed reference without following it.

Models:
    RepositoryHandle: Paths of a discovered repository.
"""

from gitline.repository._locator import locate_repository
from gitline.repository._metadata import read_metadata_file, read_ref
from gitline.repository._models import RepositoryHandle

__all__ = [
    "RepositoryHandle",
    "locate_repository",
    "read_metadata_file",
    "read_ref",
]
