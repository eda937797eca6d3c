#!/usr/bin/env python3
"""
console-linenumbers v1.2.0
Sequential line numbers for build console output.

Usage:
    python run.py [--settings PATH] [--enable | --disable | --status] [FILE ...]
    # or
    python -m console_linenumbers.runner

Requirements:
    - Python 3.9+
    - pydantic, filelock (pip install -e .)
"""

import sys
import os

# Ensure Python 3.9+
if sys.version_info < (3, 9):
    print("Error: Python 3.9 or higher is required", file=sys.stderr)
    print(f"Current version: {sys.version}", file=sys.stderr)
    sys.exit(1)

# Add the project directory to path so 'console_linenumbers' can be imported
project_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_dir)

from console_linenumbers import main

if __name__ == "__main__":
    sys.exit(main())
