"""Plan file discovery for the CLI."""

import glob
from pathlib import Path
from typing import Iterable, List


def resolve_plan_files(patterns: Iterable[str]) -> List[str]:
    """
    Expand file paths and glob patterns into an ordered, deduplicated file list.
    
    Each pattern's matches are sorted so output is reproducible; patterns keep
    the order they were given in. A file matched by several patterns is kept
    at its first position.
    
    Args:
        patterns: File paths or glob patterns (``**`` is recursive)
        
    Returns:
        Ordered list of plan file paths
        
    Raises:
        FileNotFoundError: If a pattern matches no files
    """
    files: List[str] = []
    seen = set()
    
    for pattern in patterns:
        matches = sorted(
            path for path in glob.glob(pattern, recursive=True)
            if Path(path).is_file()
        )
        if not matches:
            raise FileNotFoundError(f"Failed to read file({pattern}). No files found")
        
        for path in matches:
            key = Path(path).resolve()
            if key in seen:
                continue
            seen.add(key)
            files.append(path)
    
    return files
