"""
vitae - build a JSON Resume into a publishable site

Reads one JSON Resume file and produces a static output directory with a themed
HTML page, JSON and YAML copies of the data, a PDF export and any static assets.

Architecture:
- Rendering Context: Invokes the external `resumed` renderer (HTML and PDF)
- Publishing Context: Sequences the build steps and writes the output set
"""

__version__ = "0.1.0"
