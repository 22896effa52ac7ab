"""Repository discovery by walking parent directories."""

from pathlib import Path
from typing import Final

from gitline.exceptions import NotARepositoryError
from gitline.repository._models import RepositoryHandle

_DOT_GIT: Final = ".git"
_GITDIR_PREFIX: Final = "gitdir:"


def _looks_like_git_dir(path: Path) -> bool:
    """Check for the minimal layout of a bare metadata directory."""
    return (
        (path / "HEAD").is_file()
        and (path / "objects").is_dir()
        and (path / "refs").is_dir()
    )


def read_gitfile(path: Path) -> Path:
    """Resolve a ``.git`` redirect file to the metadata directory it names.

    Worktrees and submodules replace the ``.git`` directory with a file
    holding a single ``gitdir: <path>`` line. Relative targets are resolved
    against the directory containing the file.

    Args:
        path: Path to the redirect file.

    Returns:
        The resolved metadata directory.

    Raises:
        NotARepositoryError: If the file is unreadable, malformed, or points
            at a directory that does not exist.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Unable to read gitfile {path}: {e}"
        raise NotARepositoryError(msg, path=path) from e

    lines = content.splitlines()
    first_line = lines[0].strip() if lines else ""
    if not first_line.startswith(_GITDIR_PREFIX):
        msg = f"Invalid gitfile format: {path}"
        raise NotARepositoryError(msg, path=path)

    target = Path(first_line[len(_GITDIR_PREFIX) :].strip())
    if not target.is_absolute():
        target = path.parent / target
    target = target.resolve()
    if not target.is_dir():
        msg = f"gitfile {path} points to missing directory {target}"
        raise NotARepositoryError(msg, path=path)
    return target


def _read_commondir(git_dir: Path) -> Path:
    """Return the shared metadata directory for ``git_dir``.

    Linked worktrees carry a ``commondir`` file pointing back at the main
    repository's metadata directory, usually as a relative path.
    """
    commondir_file = git_dir / "commondir"
    try:
        value = commondir_file.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return git_dir
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Unable to read {commondir_file}: {e}"
        raise NotARepositoryError(msg, path=commondir_file) from e

    if not value:
        return git_dir
    common = Path(value)
    if not common.is_absolute():
        common = git_dir / common
    return common.resolve()


def _handle_for(work_dir: Path | None, git_dir: Path) -> RepositoryHandle:
    return RepositoryHandle(
        work_dir=work_dir,
        git_dir=git_dir,
        common_dir=_read_commondir(git_dir),
    )


def locate_repository(start: Path | str | None = None) -> RepositoryHandle:
    """Find the repository enclosing ``start``.

    Each directory from ``start`` up to the filesystem root is checked in
    turn for a ``.git`` directory, then a ``.git`` redirect file, then for
    being a bare metadata directory itself. The first match wins.

    Args:
        start: Directory (or file) to start from. Defaults to the current
            working directory.

    Returns:
        Handle describing the discovered repository.

    Raises:
        NotARepositoryError: If ``start`` does not exist, no repository is
            found, or a redirect file is malformed.
    """
    origin = Path(start) if start is not None else Path.cwd()
    try:
        current = origin.resolve(strict=True)
    except OSError as e:
        msg = f"Path does not exist: {origin}"
        raise NotARepositoryError(msg, path=origin) from e

    if not current.is_dir():
        current = current.parent

    while True:
        dot_git = current / _DOT_GIT
        if dot_git.is_dir():
            return _handle_for(current, dot_git)
        if dot_git.is_file():
            return _handle_for(current, read_gitfile(dot_git))
        if _looks_like_git_dir(current):
            return _handle_for(None, current)

        parent = current.parent
        if parent == current:
            break
        current = parent

    msg = f"Not a git repository (or any of the parent directories): {origin}"
    raise NotARepositoryError(msg, path=origin)
