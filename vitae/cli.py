"""
Resume Build CLI

Commands:
    build - Build the resume site into the output directory

Examples:\n

    vitae build                               # Build ./resume.json into ./dist

    vitae build --root ~/cv --no-pdf          # Build another project, skip the PDF

    vitae build --theme jsonresume-theme-flat # Use a different theme
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vitae import config
from vitae.contexts.publishing import BuildConfig, VitaeBuildError, build_resume
from vitae.contexts.publishing.logger import _log_error, setup_build_logger
from vitae.utils.timestamp import now

app = typer.Typer(
    help="Build a JSON Resume into HTML, JSON, YAML and PDF outputs",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Project directory containing the resume, assets/ and CNAME",
            file_okay=False,
        ),
    ] = Path("."),
    resume_file: Annotated[
        Path,
        typer.Option("--resume", help="Resume JSON file, relative to the root"),
    ] = Path(config.RESUME_FILE),
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output directory, relative to the root"),
    ] = Path(config.DIST_DIR),
    theme: Annotated[
        str,
        typer.Option("--theme", "-t", help="Theme package passed to the renderer"),
    ] = config.THEME,
    no_pdf: Annotated[
        bool,
        typer.Option("--no-pdf", help="Skip the PDF export"),
    ] = False,
    no_profile_image: Annotated[
        bool,
        typer.Option("--no-profile-image", help="Do not add basics.image to the HTML masthead"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Also write a debug log under this directory"),
    ] = Path(config.LOGS_PATH) if config.LOGS_PATH else None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output, including renderer stdout/stderr"),
    ] = False,
):
    """
    Build the resume site.

    Renders index.html, writes resume.json and resume.yaml, copies assets/ and
    CNAME, then exports resume.pdf. A failed PDF export only produces a warning.

    Examples:\n

        $ vitae build                          # Full build

        $ vitae build --no-pdf                 # Skip PDF (no headless browser)

        $ vitae build --no-profile-image       # Plain theme masthead
    """
    session_log_dir = log_dir / f"build_{now()}" if log_dir is not None else None
    setup_build_logger(session_log_dir, theme=theme, verbose=verbose)

    build_config = BuildConfig(
        root_dir=root.resolve(),
        resume_file=resume_file,
        dist_dir=output,
        theme=theme,
        inject_image=not no_profile_image,
        export_pdf=not no_pdf,
        verbose=verbose,
    )

    try:
        result = build_resume(build_config)
    except VitaeBuildError as e:
        _log_error(str(e))
        typer.secho("✗ Build failed", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        _log_error(f"Filesystem error: {e}")
        typer.secho("✗ Build failed", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    if result.warnings:
        typer.secho(
            f"✓ Build succeeded with {len(result.warnings)} warning(s)",
            fg=typer.colors.YELLOW,
            bold=True,
        )
    else:
        typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
    raise typer.Exit(code=0)


if __name__ == "__main__":
    app()
