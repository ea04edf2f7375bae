"""Copies of static inputs (asset tree, domain-mapping file) into the output directory."""

import shutil
from pathlib import Path
from typing import Optional


def copy_assets(source_dir: Path, dest_dir: Path) -> Optional[Path]:
    """
    Recursively copy the asset tree into dest_dir, merging with existing content.

    Returns:
        dest_dir if anything was copied, None if source_dir does not exist
    """
    if not source_dir.is_dir():
        return None

    shutil.copytree(source_dir, dest_dir, dirs_exist_ok=True)
    return dest_dir


def copy_domain_file(source_file: Path, dest_dir: Path) -> Optional[Path]:
    """
    Copy the domain-mapping file (e.g., CNAME) verbatim into dest_dir.

    Returns:
        Path of the copy, or None if source_file does not exist
    """
    if not source_file.is_file():
        return None

    target = dest_dir / source_file.name
    shutil.copy2(source_file, target)
    return target
