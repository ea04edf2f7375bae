"""Shared fixtures: sample resume data, a project directory and a fake renderer."""

import json
import sys
from pathlib import Path

import pytest
from loguru import logger

from vitae.contexts.rendering import RenderResult

MASTHEAD_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Jane Doe</title>
</head>
<body>
<header class="masthead">
  <h1>Jane Doe</h1>
  <h2>Staff Engineer</h2>
  <article><p>Builds things.</p></article>
</header>
<main><section id="work"><h3>Work</h3></section></main>
</body>
</html>
"""


class FakeRenderer:
    """
    Stand-in for ResumedRenderer that writes canned output.

    Set fail_render / fail_export to simulate a renderer exiting non-zero.
    """

    def __init__(self, html: str = MASTHEAD_HTML, fail_render: bool = False, fail_export: bool = False):
        self.html = html
        self.fail_render = fail_render
        self.fail_export = fail_export
        self.calls = []

    def render(self, input_path, output_path, theme):
        self.calls.append(("render", Path(input_path), Path(output_path), theme))
        if self.fail_render:
            return RenderResult(success=False, returncode=1, errors=["render exited with status 1"])
        Path(output_path).write_text(self.html, encoding="utf-8")
        return RenderResult(success=True, output_path=Path(output_path), returncode=0)

    def export(self, input_path, output_path, theme):
        self.calls.append(("export", Path(input_path), Path(output_path), theme))
        if self.fail_export:
            return RenderResult(
                success=False, returncode=1, errors=["Could not find Chrome"]
            )
        Path(output_path).write_bytes(b"%PDF-1.4\n%fake\n")
        return RenderResult(success=True, output_path=Path(output_path), returncode=0)


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore a plain stderr sink after tests that reconfigure loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sample_resume():
    return {
        "basics": {
            "name": "Jane Doe",
            "label": "Staff Engineer",
            "image": "https://example.com/jane.jpg",
            "email": "jane@example.com",
            "location": {"city": "Zürich", "countryCode": "CH"},
            "profiles": [{"network": "GitHub", "username": "janedoe"}],
        },
        "work": [
            {
                "name": "Acme",
                "position": "Engineer",
                "startDate": "2019-04-01",
                "highlights": ["Shipped: the thing", "Cut costs by 30%", "yes"],
                "remote": True,
                "teamSize": 12,
                "rating": 4.5,
                "endDate": None,
            }
        ],
        "skills": [{"name": "Python", "keywords": ["typer", "pytest", "0123", "true"]}],
        "meta": {"version": "v1.0.0", "note": "# not a comment", "empty": "", "list": []},
    }


@pytest.fixture
def project_dir(tmp_path, sample_resume):
    """A project root holding resume.json, an assets tree and a CNAME file."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "resume.json").write_text(json.dumps(sample_resume, indent=4), encoding="utf-8")

    assets = root / "assets"
    (assets / "img").mkdir(parents=True)
    (assets / "img" / "jane.jpg").write_bytes(b"\xff\xd8\xff\xe0fakejpeg")
    (assets / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")

    (root / "CNAME").write_text("resume.example.com\n", encoding="utf-8")
    return root


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def make_renderer():
    """Factory for FakeRenderer instances with custom behaviour."""
    return FakeRenderer
