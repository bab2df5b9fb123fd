#!/usr/bin/env python3
"""Launch the winget updater command line.

Usage:
    python run.py [--config config.yaml] [--debug] [--trace] [--verbose] parse [FILE]
    python run.py classify --id ID --exit-code N [--stdout FILE] [--stderr FILE]
    python run.py batch [RESULTS.yaml]
"""
import sys

from winget_updater.main import main

if __name__ == "__main__":
    sys.exit(main())
