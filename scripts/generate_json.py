#!/usr/bin/env python3
"""Write public/data/fire-data.json from today's stored records."""
import sys
sys.path.insert(0, '.')

from firerisk.commands import generate_main

if __name__ == '__main__':
    generate_main()
