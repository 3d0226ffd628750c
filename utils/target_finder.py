import logging
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

TARGET_PATTERNS = ("*.sln", "*.csproj")


def glob_any(directory: Path, patterns: Sequence[str] = TARGET_PATTERNS) -> List[Path]:
    """
    Return the matches of the first pattern that matches anything in ``directory``.

    Solutions take precedence over projects in the same directory.
    """
    for pattern in patterns:
        files = sorted(path for path in directory.glob(pattern) if path.is_file())
        if files:
            return files
    return []


def find_dotnet_target(start_dir: Path, stop_dir: Optional[Path] = None, max_iter: int = 10) -> Optional[Path]:
    """
    Find the nearest .sln or .csproj by walking up from ``start_dir``.
    
    Args:
        start_dir: Directory of the test source file
        stop_dir: Directory at which the walk ends without searching it
            (normally the working directory)
        max_iter: Maximum number of directories to search
        
    Returns:
        Path of the single target found, or None when nothing or more than
        one candidate is found
    """
    directory = Path(start_dir).resolve()
    stop = Path(stop_dir).resolve() if stop_dir is not None else None

    for iteration in range(1, max_iter + 1):
        if directory == Path(directory.anchor) or directory == stop:
            break
        logger.debug(f"Iter {iteration}: {directory}")

        targets = glob_any(directory)
        if len(targets) == 1:
            logger.debug(f"target: {targets[0]}")
            return targets[0]
        if targets:
            names = ", ".join(str(target) for target in targets)
            logger.warning(f"Multiple targets found at {directory}: {names}")
            return None
        logger.debug(f"No targets found in {directory}")

        parent = directory.parent
        if parent == directory:
            break
        directory = parent

    return None
