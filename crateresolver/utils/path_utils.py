"""Path normalization utilities shared by the layout and matching code."""
from pathlib import Path
from typing import Iterator, Union


def normalize_path(path: Union[Path, str]) -> Path:
    """Return an absolute, symlink-resolved form of ``path``.

    The path does not need to exist. Two paths naming the same file compare
    equal after normalization.
    """
    return Path(path).expanduser().resolve()


def relative_posix(path: Union[Path, str], root_path: Union[Path, str]) -> str:
    """
    Return ``path`` relative to ``root_path`` with forward slashes.

    Args:
        path: Absolute or relative path inside the root.
        root_path: Project root directory.

    Returns:
        Forward-slash relative path string (e.g. ``src/bin/tool.rs``).

    Raises:
        ValueError: If ``path`` is not located under ``root_path``.

    Examples:
        >>> relative_posix(Path("/work/proj/src/lib.rs"), Path("/work/proj"))
        'src/lib.rs'
    """
    rel_path = normalize_path(path).relative_to(normalize_path(root_path))
    return str(rel_path).replace("\\", "/")


def iter_ancestors(start: Path, stop: Union[Path, None] = None) -> Iterator[Path]:
    """
    Yield ``start`` and each of its parents, nearest first.

    When ``stop`` is given the walk ends after yielding it; if ``start`` is
    not under ``stop`` the walk continues to the filesystem root.
    """
    current = start
    while True:
        yield current
        if stop is not None and current == stop:
            return
        parent = current.parent
        if parent == current:
            return
        current = parent
