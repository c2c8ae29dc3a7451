#!/usr/bin/env python3
"""
Mood Log CLI.

Entry point for running from a source checkout without installing.

Usage:
    python cli.py --help
    python cli.py 今日のタスク とても 疲れた
    python cli.py タスク完了 満足 --verbose
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from moodlog.cli.main import main

if __name__ == "__main__":
    main()
