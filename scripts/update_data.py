#!/usr/bin/env python3
"""Collect one fire risk record per zone and store it."""
import sys
sys.path.insert(0, '.')

from firerisk.commands import collect_main

if __name__ == '__main__':
    collect_main()
