"""
Main module entry point.

This allows running the API as: python -m labs.main [--root]
"""

from .server import main

if __name__ == "__main__":
    main()
