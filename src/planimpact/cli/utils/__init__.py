"""CLI utilities package."""

from pathlib import Path
from typing import Optional
import click
from ...utils.errors import PlanImpactError
from ...utils.logging import get_logger
from .file_resolver import resolve_file_path

logger = get_logger("cli.utils")


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


def write_output(text: str, output: Optional[str], quiet: bool = False) -> None:
    """Write rendered output to a file, or to stdout when no file is given."""
    if output:
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(text)
                if not text.endswith("\n"):
                    f.write("\n")
        except OSError as e:
            raise PlanImpactError(f"Failed to write output to {output_path}: {e}") from e
        if not quiet:
            click.echo(f"Output saved to: {output_path}", err=True)
        return
    
    try:
        click.echo(text)
    except UnicodeEncodeError:
        click.echo(text.encode('ascii', errors='replace').decode('ascii'))


__all__ = ["resolve_file_path", "format_error", "write_output"]
