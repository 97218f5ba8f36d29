"""
Main entry point for running line_bisect as a module.

This allows the package to be run with: python -m line_bisect
"""

from .src.cli import main

if __name__ == '__main__':
    main()
