#!/usr/bin/env python3
"""
Resume Build Script

Builds resume.json in the current directory into dist/ (HTML, JSON, YAML, PDF,
assets). Same as the `vitae` console command.

Examples:\n

    build_resume.py build                 # Full build

    build_resume.py build --no-pdf        # Skip the PDF export
"""

from vitae.cli import app

if __name__ == "__main__":
    app()
