"""CLI utilities package."""

from pathlib import Path
from typing import Optional
import click
from .file_resolver import resolve_plan_files


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def write_output(text: str, output: Optional[str] = None) -> None:
    """Write rendered text to a file, or to stdout when no output path is given."""
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text + "\n")
        return
    click.echo(text)


__all__ = ["resolve_plan_files", "format_error", "write_output"]
