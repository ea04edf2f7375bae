"""
Build configuration defaults.

Values come from the environment (or a .env file in the working directory) and
fall back to the defaults below. CLI options override them per invocation.
"""

import os

from dotenv import load_dotenv

load_dotenv()

THEME = os.getenv("VITAE_THEME", "jsonresume-theme-even")
RESUME_FILE = os.getenv("VITAE_RESUME_FILE", "resume.json")
DIST_DIR = os.getenv("VITAE_DIST_DIR", "dist")
ASSETS_DIR = os.getenv("VITAE_ASSETS_DIR", "assets")
DOMAIN_FILE = os.getenv("VITAE_DOMAIN_FILE", "CNAME")
RENDERER_EXECUTABLE = os.getenv("VITAE_RENDERER", "npx")
LOGS_PATH = os.getenv("VITAE_LOGS_PATH")

# Output file names inside DIST_DIR
HTML_OUTPUT = "index.html"
JSON_OUTPUT = "resume.json"
YAML_OUTPUT = "resume.yaml"
PDF_OUTPUT = "resume.pdf"
