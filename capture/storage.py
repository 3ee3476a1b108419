"""
Output directory resolution and artifact naming.

Convention:
- screenshots: {output_dir}/{viewport_name}-{theme}.png
- pdf:         {output_dir}/output-{theme}.pdf

Artifacts at the same path are overwritten (no skip-if-exists). The output
directory is never created here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from capture.constants import PDF_FILENAME_STEM, SCREENSHOT_EXTENSION, Theme
from capture.errors import OutputDirMissing


def resolve_output_dir(output_dir: Union[str, Path]) -> Path:
    """
    Resolve `output_dir` to an absolute path and require that it is an existing directory.

    Relative paths resolve against the current working directory.
    """
    path = Path(output_dir).expanduser().resolve()
    if not path.is_dir():
        raise OutputDirMissing(f'Output directory "{path}" does not exist')
    return path


def build_screenshot_path(output_dir: Path, viewport_name: str, theme: Theme) -> Path:
    return output_dir / f"{viewport_name}-{theme}.{SCREENSHOT_EXTENSION}"


def build_pdf_path(output_dir: Path, theme: Theme) -> Path:
    return output_dir / f"{PDF_FILENAME_STEM}-{theme}.pdf"
