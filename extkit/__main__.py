"""
extkit CLI Entry Point
======================

Allows running extkit as a module: python -m extkit
"""

from extkit.cli.main import main

if __name__ == "__main__":
    main()
