#!/usr/bin/env python3
"""Run FitStreak API server."""

import sys
import os

# Add package to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fitstreak.main import run

if __name__ == "__main__":
    run()
