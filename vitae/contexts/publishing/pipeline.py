"""
Resume Build Pipeline

Turns one JSON Resume file into a publishable output directory:

    dist/index.html    rendered resume (optionally with a profile image)
    dist/resume.json   JSON copy of the data
    dist/resume.yaml   YAML copy of the data
    dist/resume.pdf    PDF export (skipped with a warning if the export fails)
    dist/assets/       copy of the assets directory, if present
    dist/CNAME         copy of the domain-mapping file, if present

Steps run strictly in order. Loading the data and rendering the HTML are fatal
on failure; the PDF export is the only step allowed to fail.
"""

import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from vitae import config
from vitae.contexts.publishing.exceptions import RenderError
from vitae.contexts.publishing.logger import (
    _log_debug,
    _log_error,
    _log_warning,
    log_build_start,
    log_build_summary,
    log_step,
)
from vitae.contexts.publishing.profile_image import inject_profile_image
from vitae.contexts.publishing.resume_data import (
    get_name,
    get_profile_image,
    load_resume,
    write_json_copy,
    write_yaml_copy,
)
from vitae.contexts.publishing.static_files import copy_assets, copy_domain_file
from vitae.contexts.rendering import Renderer, ResumedRenderer

PDF_WARNING = "PDF generation failed (Puppeteer/Chrome may not be available)"


@dataclass
class BuildConfig:
    """
    Settings for one build. Relative paths are resolved against root_dir.

    Attributes:
        root_dir: Project directory holding the resume, assets and domain file
        resume_file: Resume JSON file
        dist_dir: Output directory
        assets_dir: Static asset source directory
        domain_file: Domain-mapping file copied into the output root
        theme: Theme passed to the renderer
        inject_image: Add basics.image to the rendered masthead
        export_pdf: Attempt the PDF export
        verbose: Log renderer output even on success
    """

    root_dir: Path = field(default_factory=Path.cwd)
    resume_file: Path = Path(config.RESUME_FILE)
    dist_dir: Path = Path(config.DIST_DIR)
    assets_dir: Path = Path(config.ASSETS_DIR)
    domain_file: Path = Path(config.DOMAIN_FILE)
    theme: str = config.THEME
    inject_image: bool = True
    export_pdf: bool = True
    verbose: bool = False

    def resolve(self, path: Path) -> Path:
        return Path(self.root_dir) / path

    @property
    def resume_path(self) -> Path:
        return self.resolve(self.resume_file)

    @property
    def output_dir(self) -> Path:
        return self.resolve(self.dist_dir)

    @property
    def output_assets_dir(self) -> Path:
        return self.output_dir / "assets"


@dataclass
class BuildResult:
    """
    Outcome of a build.

    Attributes:
        dist_dir: Output directory
        artifacts: Paths written, in build order
        warnings: Recoverable problems (e.g., PDF export failure)
        html_path: Rendered HTML page
        json_path: JSON copy
        yaml_path: YAML copy
        pdf_path: PDF export (None if skipped or failed)
        assets_dir: Copied asset tree (None if there was nothing to copy)
        domain_file: Copied domain-mapping file (None if absent)
        image_injected: Whether the profile image was added to the HTML
        elapsed_time: Wall-clock build time in seconds
    """

    dist_dir: Path
    artifacts: List[Path] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    html_path: Optional[Path] = None
    json_path: Optional[Path] = None
    yaml_path: Optional[Path] = None
    pdf_path: Optional[Path] = None
    assets_dir: Optional[Path] = None
    domain_file: Optional[Path] = None
    image_injected: bool = False
    elapsed_time: float = 0.0


def ensure_output_dirs(build_config: BuildConfig) -> None:
    """Create the output directory and its assets subdirectory (idempotent)."""
    build_config.output_dir.mkdir(parents=True, exist_ok=True)
    build_config.output_assets_dir.mkdir(parents=True, exist_ok=True)


def add_profile_image(html_path: Path, resume: dict) -> bool:
    """
    Rewrite the rendered page in place to show basics.image in the masthead.

    The file is left untouched when the resume has no image or the page has no
    matching masthead.

    Returns:
        True if the file was rewritten
    """
    image_url = get_profile_image(resume)
    if image_url is None:
        _log_debug("No basics.image in resume; skipping profile image")
        return False

    html = html_path.read_text(encoding="utf-8")
    updated = inject_profile_image(html, image_url, get_name(resume))
    if updated is html:
        return False

    html_path.write_text(updated, encoding="utf-8")
    return True


def build_resume(build_config: BuildConfig, renderer: Optional[Renderer] = None) -> BuildResult:
    """
    Run the full build.

    Args:
        build_config: Build settings
        renderer: Collaborator producing HTML and PDF (default: ResumedRenderer
            running in build_config.root_dir)

    Returns:
        BuildResult describing the output set

    Raises:
        ResumeLoadError: If the resume file is missing or malformed
        RenderError: If the HTML render fails
        OSError: If an output directory or copy cannot be written
    """
    if renderer is None:
        renderer = ResumedRenderer(cwd=build_config.root_dir, verbose=build_config.verbose)

    start_time = time.time()
    resume_path = build_config.resume_path
    dist_dir = build_config.output_dir
    theme = build_config.theme

    log_build_start(resume_path, dist_dir, theme)

    ensure_output_dirs(build_config)
    resume = load_resume(resume_path)

    result = BuildResult(dist_dir=dist_dir)

    log_step(1, "Rendering HTML...")
    html_path = dist_dir / config.HTML_OUTPUT
    render_result = renderer.render(resume_path, html_path, theme)
    if not render_result.success:
        _log_error("Failed to render HTML")
        raise RenderError(f"Failed to render HTML with theme '{theme}'", render_result)
    result.html_path = html_path
    result.artifacts.append(html_path)

    if build_config.inject_image:
        log_step(2, "Adding profile image...")
        result.image_injected = add_profile_image(html_path, resume)

    log_step(3, f"Copying {config.JSON_OUTPUT}...")
    result.json_path = write_json_copy(resume, dist_dir / config.JSON_OUTPUT)
    result.artifacts.append(result.json_path)

    log_step(4, f"Generating {config.YAML_OUTPUT}...")
    result.yaml_path = write_yaml_copy(resume, dist_dir / config.YAML_OUTPUT)
    result.artifacts.append(result.yaml_path)

    log_step(5, "Copying assets...")
    result.assets_dir = copy_assets(
        build_config.resolve(build_config.assets_dir), build_config.output_assets_dir
    )
    if result.assets_dir is not None:
        result.artifacts.append(result.assets_dir)

    result.domain_file = copy_domain_file(build_config.resolve(build_config.domain_file), dist_dir)
    if result.domain_file is not None:
        log_step(6, f"Copied {result.domain_file.name}...")
        result.artifacts.append(result.domain_file)

    if build_config.export_pdf:
        log_step(7, "Generating PDF...")
        result.pdf_path = _export_pdf(renderer, resume_path, dist_dir / config.PDF_OUTPUT, theme)
        if result.pdf_path is not None:
            result.artifacts.append(result.pdf_path)
        else:
            _log_warning(f"Warning: {PDF_WARNING}")
            result.warnings.append(PDF_WARNING)
    else:
        _log_debug("PDF export disabled")

    result.elapsed_time = time.time() - start_time
    log_build_summary(dist_dir, result.artifacts, result.warnings, result.elapsed_time)

    return result


def _export_pdf(renderer: Renderer, resume_path: Path, pdf_path: Path, theme: str) -> Optional[Path]:
    """Run the PDF export. Returns the PDF path, or None if the export failed."""
    try:
        export_result = renderer.export(resume_path, pdf_path, theme)
    except (OSError, subprocess.SubprocessError) as e:
        _log_debug(f"PDF export raised: {e}")
        return None

    if not export_result.success:
        return None
    return export_result.output_path or pdf_path
