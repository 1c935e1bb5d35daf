#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

    python main.py build left.jpg right.jpg -o mosaic.png

Or use the module directly:

    python -m image_mosaic.cli plan a.png b.png c.png
"""

from image_mosaic.cli import app

if __name__ == "__main__":
    app()
