"""
PassLens Module Entry Point
============================

Allows running the PassLens CLI via: python -m passlens
"""

from passlens.cli import main

if __name__ == "__main__":
    main()
