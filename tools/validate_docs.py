#!/usr/bin/env python3
"""
Validate docs.json in the current directory and check every category/fileName exists.
Usage:
  python tools/validate_docs.py [--catalog docs.json] [--root .] [--forbid-traversal] [--plain] [--json]
"""
import os
import sys

# Run from a checkout without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from docs_catalog.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
