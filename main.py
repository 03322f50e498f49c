#!/usr/bin/env python3
"""
stackcat - Concatenative stack-machine interpreter

Usage modes:
1. Interactive REPL:       python main.py
2. Run a file:             python main.py program.cat
3. Continue after errors:  python main.py --keep-going program.cat
4. Help:                   python main.py --help
"""

import sys

from stackcat.cli import main

if __name__ == "__main__":
    sys.exit(main())
