#!/usr/bin/env python3
"""
BREAKOUT Launcher
==================
Run this script to start the game.
"""

from breakout.main import main

if __name__ == "__main__":
    main()
