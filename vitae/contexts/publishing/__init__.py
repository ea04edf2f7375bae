"""
Publishing Context

Responsibilities:
- Loads the resume data file
- Sequences the build steps and writes the output directory
- Post-processes rendered HTML (profile image)
- Writes JSON and YAML copies of the data
- Copies static assets and the domain-mapping file

Owns: Build orchestration, output directory layout
Never: Renders documents itself (delegates to the rendering context)
"""

from vitae.contexts.publishing.exceptions import (
    RenderError,
    ResumeLoadError,
    VitaeBuildError,
)
from vitae.contexts.publishing.pipeline import BuildConfig, BuildResult, build_resume

__all__ = [
    # Orchestration
    "build_resume",
    "BuildConfig",
    "BuildResult",
    # Fatal errors
    "VitaeBuildError",
    "ResumeLoadError",
    "RenderError",
]
