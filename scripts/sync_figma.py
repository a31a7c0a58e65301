"""Sync the Figma design index (READ-ONLY on the Figma side).

Usage:
    FIGMA_TOKEN=... FIGMA_TEAM_ID=... python scripts/sync_figma.py
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))
from figma_index.cli import main


if __name__ == "__main__":
    sys.exit(main())
