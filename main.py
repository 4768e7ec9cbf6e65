#!/usr/bin/env python3
"""
Terminal Minesweeper - Main entry point.

Usage:
    python main.py [--easy | --medium | --hard] [--color | --nocolor]
    python main.py [-w WIDTH] [-h HEIGHT] [-m MINES]
"""
from terminal.cli import main


if __name__ == "__main__":
    main()
