#!/usr/bin/env python3
"""
run.py - Main entry point for the Puissance 4 game

Usage:
    python run.py play [--players 1|2] [--seed S] [--resume FILE] [--autosave FILE]
    python run.py benchmark [--games N] [--seed S]
"""

import sys

from puissance4.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
