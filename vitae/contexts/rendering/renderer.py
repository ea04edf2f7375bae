"""
External Renderer Module

Wraps the `resumed` command line tool, which turns a JSON Resume file into a
themed HTML page (`render`) or a PDF (`export`).
"""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol

from vitae.config import RENDERER_EXECUTABLE
from vitae.contexts.rendering.logger import _log_debug, log_render_result


@dataclass
class RenderResult:
    """
    Result of one renderer invocation.

    Attributes:
        success: Whether the renderer exited cleanly and produced its output
        output_path: Path to the generated file (None if failed)
        command: Command line that was executed
        returncode: Exit status of the renderer process (None if it never ran)
        stdout: Standard output from the renderer
        stderr: Standard error from the renderer
        errors: Human-readable failure reasons
    """

    success: bool
    output_path: Optional[Path] = None
    command: List[str] = field(default_factory=list)
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)


class Renderer(Protocol):
    """Anything that can turn a resume file into HTML and PDF documents."""

    def render(self, input_path: Path, output_path: Path, theme: str) -> RenderResult: ...

    def export(self, input_path: Path, output_path: Path, theme: str) -> RenderResult: ...


class ResumedRenderer:
    """
    Renderer backed by `resumed`, launched through npx by default.

    Args:
        executable: Program that launches resumed (e.g., "npx")
        cwd: Working directory for the renderer process (theme packages are
            resolved from here)
        verbose: Log renderer stdout/stderr even on success
    """

    def __init__(
        self,
        executable: str = RENDERER_EXECUTABLE,
        cwd: Optional[Path] = None,
        verbose: bool = False,
    ):
        self.executable = executable
        self.cwd = cwd
        self.verbose = verbose

    def render(self, input_path: Path, output_path: Path, theme: str) -> RenderResult:
        """Render the resume to a themed HTML document."""
        return self._run("render", input_path, output_path, theme)

    def export(self, input_path: Path, output_path: Path, theme: str) -> RenderResult:
        """Export the resume to PDF (requires a headless browser on the host)."""
        return self._run("export", input_path, output_path, theme)

    def build_command(
        self, subcommand: str, input_path: Path, output_path: Path, theme: str
    ) -> List[str]:
        return [
            self.executable,
            "resumed",
            subcommand,
            str(input_path),
            "-o",
            str(output_path),
            "-t",
            theme,
        ]

    def _run(self, subcommand: str, input_path: Path, output_path: Path, theme: str) -> RenderResult:
        output_path = Path(output_path)

        # Render next to the target and move it into place only on success,
        # so a failed run leaves the previously published file intact
        partial_path = partial_output_path(output_path)
        if partial_path.exists():
            partial_path.unlink()
        cmd = self.build_command(subcommand, input_path, partial_path, theme)

        _log_debug(f"Running: {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            result = RenderResult(
                success=False,
                command=cmd,
                errors=[f"Renderer executable not found: {self.executable}"],
            )
            log_render_result(result, verbose=self.verbose)
            return result

        errors = []
        if proc.returncode != 0:
            errors.append(f"{subcommand} exited with status {proc.returncode}")
            last_line = _last_line(proc.stderr)
            if last_line:
                errors.append(last_line)

        if not partial_path.exists():
            errors.append(f"Output file was not generated: {output_path}")

        if errors:
            if partial_path.exists():
                partial_path.unlink()
        else:
            partial_path.replace(output_path)

        result = RenderResult(
            success=not errors,
            output_path=output_path if not errors else None,
            command=cmd,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
            errors=errors,
        )
        log_render_result(result, verbose=self.verbose)
        return result


def partial_output_path(output_path: Path) -> Path:
    """Hidden sibling the renderer writes to before it replaces output_path."""
    return output_path.with_name(f".{output_path.stem}.partial{output_path.suffix}")


def _last_line(text: str) -> str:
    """Last non-empty line of process output, usually the most useful diagnostic."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return lines[-1] if lines else ""
