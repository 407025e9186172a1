"""Project directory discovery.

A project is any directory containing a ``.astro`` marker directory. The
search starts at the working directory and walks up to the filesystem root.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from astro_cli.core.exceptions import ProjectSearchError


def find_dir_in_path(name: str, start: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest directory called ``name`` in ``start`` or its ancestors.

    Args:
        name: Directory name to look for (e.g. ``.astro``)
        start: Directory to start from, defaults to the working directory

    Returns:
        Path of the first match, or None if no ancestor contains one

    Raises:
        ProjectSearchError: If the filesystem cannot be inspected
    """
    try:
        current = Path(start) if start is not None else Path.cwd()
        current = current.absolute()

        for directory in (current, *current.parents):
            candidate = directory / name
            if candidate.is_dir():
                logger.debug(f"Found {name} directory at {candidate}")
                return candidate
    except OSError as e:
        raise ProjectSearchError(start=str(start) if start else None, reason=str(e), cause=e) from e

    return None


def same_directory(first: Path, second: Path) -> bool:
    """Whether two paths point at the same directory once symlinks are resolved."""
    try:
        return first.resolve() == second.resolve()
    except OSError:
        # Unresolvable paths are compared as given
        return first.absolute() == second.absolute()
