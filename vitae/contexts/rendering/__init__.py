"""
Rendering Context

Responsibilities:
- Invokes the external resume renderer for HTML and PDF output
- Detects renderer failure from exit status and output presence
- Surfaces renderer diagnostics

Owns: External process invocation
Never: Touches resume data or post-processes rendered output
"""

from vitae.contexts.rendering.renderer import Renderer, RenderResult, ResumedRenderer

__all__ = ["Renderer", "RenderResult", "ResumedRenderer"]
