"""Unit tests for ResumedRenderer using a stand-in executable."""

import stat
import sys
from pathlib import Path

import pytest

from vitae.contexts.rendering import ResumedRenderer
from vitae.contexts.rendering.renderer import partial_output_path

skip_on_windows = pytest.mark.skipif(
    sys.platform == "win32", reason="stand-in renderer is a POSIX shell script"
)

# Arguments: resumed <subcommand> <input> -o <output> -t <theme>
SUCCEEDING_SCRIPT = """#!/bin/sh
echo "rendering $3 with $7"
printf '<html>%s</html>' "$2" > "$5"
"""

FAILING_SCRIPT = """#!/bin/sh
echo "starting" >&2
echo "Error: theme not found" >&2
exit 3
"""

SILENT_SCRIPT = """#!/bin/sh
exit 0
"""


def _make_executable(path: Path, content: str) -> str:
    path.write_text(content, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.mark.unit
def test_build_command():
    renderer = ResumedRenderer(executable="npx")

    cmd = renderer.build_command("render", Path("resume.json"), Path("dist/index.html"), "even")

    assert cmd == [
        "npx",
        "resumed",
        "render",
        "resume.json",
        "-o",
        str(Path("dist/index.html")),
        "-t",
        "even",
    ]


@pytest.mark.unit
def test_missing_executable_is_a_failed_result(tmp_path):
    renderer = ResumedRenderer(executable=str(tmp_path / "does-not-exist"))

    result = renderer.render(tmp_path / "resume.json", tmp_path / "index.html", "even")

    assert result.success is False
    assert result.returncode is None
    assert "not found" in result.errors[0]


@pytest.mark.unit
@skip_on_windows
def test_render_success(tmp_path):
    executable = _make_executable(tmp_path / "fake-npx", SUCCEEDING_SCRIPT)
    renderer = ResumedRenderer(executable=executable, cwd=tmp_path)
    output = tmp_path / "index.html"

    result = renderer.render(tmp_path / "resume.json", output, "even")

    assert result.success is True
    assert result.returncode == 0
    assert result.output_path == output
    assert output.read_text(encoding="utf-8") == "<html>render</html>"
    assert "with even" in result.stdout


@pytest.mark.unit
@skip_on_windows
def test_export_uses_export_subcommand(tmp_path):
    executable = _make_executable(tmp_path / "fake-npx", SUCCEEDING_SCRIPT)
    renderer = ResumedRenderer(executable=executable, cwd=tmp_path)
    output = tmp_path / "resume.pdf"

    result = renderer.export(tmp_path / "resume.json", output, "even")

    assert result.success is True
    assert result.command[2] == "export"
    assert output.read_text(encoding="utf-8") == "<html>export</html>"


@pytest.mark.unit
@skip_on_windows
def test_nonzero_exit_fails(tmp_path):
    executable = _make_executable(tmp_path / "fake-npx", FAILING_SCRIPT)
    renderer = ResumedRenderer(executable=executable, cwd=tmp_path)

    result = renderer.render(tmp_path / "resume.json", tmp_path / "index.html", "even")

    assert result.success is False
    assert result.returncode == 3
    assert result.output_path is None
    assert "Error: theme not found" in result.errors
    assert "starting" in result.stderr


@pytest.mark.unit
@skip_on_windows
def test_missing_output_fails(tmp_path):
    executable = _make_executable(tmp_path / "fake-npx", SILENT_SCRIPT)
    renderer = ResumedRenderer(executable=executable, cwd=tmp_path)

    result = renderer.render(tmp_path / "resume.json", tmp_path / "index.html", "even")

    assert result.success is False
    assert result.returncode == 0
    assert any("not generated" in err for err in result.errors)


@pytest.mark.unit
@skip_on_windows
def test_missing_output_keeps_previous_file(tmp_path):
    executable = _make_executable(tmp_path / "fake-npx", SILENT_SCRIPT)
    renderer = ResumedRenderer(executable=executable, cwd=tmp_path)
    output = tmp_path / "resume.pdf"
    output.write_bytes(b"%PDF old")

    result = renderer.export(tmp_path / "resume.json", output, "even")

    assert result.success is False
    assert output.read_bytes() == b"%PDF old"


@pytest.mark.unit
@skip_on_windows
def test_failed_render_keeps_previous_file(tmp_path):
    executable = _make_executable(tmp_path / "fake-npx", FAILING_SCRIPT)
    renderer = ResumedRenderer(executable=executable, cwd=tmp_path)
    output = tmp_path / "index.html"
    output.write_text("<html>published</html>", encoding="utf-8")

    result = renderer.render(tmp_path / "resume.json", output, "even")

    assert result.success is False
    assert output.read_text(encoding="utf-8") == "<html>published</html>"
    assert not partial_output_path(output).exists()


@pytest.mark.unit
@skip_on_windows
def test_success_replaces_previous_file(tmp_path):
    executable = _make_executable(tmp_path / "fake-npx", SUCCEEDING_SCRIPT)
    renderer = ResumedRenderer(executable=executable, cwd=tmp_path)
    output = tmp_path / "index.html"
    output.write_text("<html>old</html>", encoding="utf-8")

    result = renderer.render(tmp_path / "resume.json", output, "even")

    assert result.success is True
    assert output.read_text(encoding="utf-8") == "<html>render</html>"
    assert not partial_output_path(output).exists()


@pytest.mark.unit
def test_partial_output_path_is_hidden_sibling():
    assert partial_output_path(Path("dist/resume.pdf")) == Path("dist/.resume.partial.pdf")
