#!/usr/bin/env python3
"""
Main script for running buffer preparation calculations.
"""

# Usage overview:
# 1) Single recipe:  python main.py -b tris --ph 7.4 --volume 0.5 --temperature 37
# 2) Batch recipes:  python main.py --batch requests.csv --save --plot
# 3) Reference:      python main.py --list

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from bufferprep.cli import main

if __name__ == "__main__":
    sys.exit(main())
