"""
Resume data loading and serialization.

The resume record is loaded once and written back out as JSON and YAML. Both
copies are derived from the same in-memory mapping so they always describe the
same data.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vitae.contexts.publishing.exceptions import ResumeLoadError


def load_resume(resume_path: Path) -> Dict[str, Any]:
    """
    Load a JSON Resume file.

    Args:
        resume_path: Path to the resume JSON file

    Returns:
        The resume record as a nested dict

    Raises:
        ResumeLoadError: If the file is missing, unreadable, not valid JSON,
            or does not contain a JSON object at the top level
    """
    resume_path = Path(resume_path)

    if not resume_path.is_file():
        raise ResumeLoadError("Resume file not found", resume_path=resume_path)

    try:
        text = resume_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResumeLoadError("Could not read resume file", resume_path, e) from e

    try:
        resume = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResumeLoadError("Resume file is not valid JSON", resume_path, e) from e

    if not isinstance(resume, dict):
        raise ResumeLoadError(
            f"Resume must be a JSON object, got {type(resume).__name__}",
            resume_path=resume_path,
        )

    return resume


def get_profile_image(resume: Dict[str, Any]) -> Optional[str]:
    """Return basics.image if set to a non-empty string, else None."""
    basics = resume.get("basics")
    if not isinstance(basics, dict):
        return None

    image = basics.get("image")
    if isinstance(image, str) and image.strip():
        return image
    return None


def get_name(resume: Dict[str, Any]) -> str:
    """Return basics.name, or an empty string when absent."""
    basics = resume.get("basics")
    if isinstance(basics, dict) and basics.get("name") is not None:
        return str(basics["name"])
    return ""


def resume_to_json(resume: Dict[str, Any]) -> str:
    """Serialize the record as pretty-printed JSON (2-space indent, key order kept)."""
    return json.dumps(resume, indent=2, ensure_ascii=False)


def resume_to_yaml(resume: Dict[str, Any]) -> str:
    """Serialize the record as YAML (key order kept, strings written verbatim)."""
    return yaml.safe_dump(resume, sort_keys=False, allow_unicode=True)


def write_json_copy(resume: Dict[str, Any], output_path: Path) -> Path:
    """Write the JSON copy of the record. Returns output_path."""
    output_path.write_text(resume_to_json(resume), encoding="utf-8")
    return output_path


def write_yaml_copy(resume: Dict[str, Any], output_path: Path) -> Path:
    """Write the YAML copy of the record. Returns output_path."""
    output_path.write_text(resume_to_yaml(resume), encoding="utf-8")
    return output_path


def load_yaml_copy(yaml_path: Path) -> Dict[str, Any]:
    """Read a YAML copy back into a plain dict."""
    return yaml.safe_load(yaml_path.read_text(encoding="utf-8"))
