#!/usr/bin/env python3
"""Companion binary launcher - Main Entry Point"""

import sys
from pathlib import Path

# Ensure the script directory is in Python's module search path
# This allows imports to work regardless of where the script is run from
script_dir = Path(__file__).parent.resolve()
if str(script_dir) not in sys.path:
    sys.path.insert(0, str(script_dir))

from invoke_binary.launcher import run

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
