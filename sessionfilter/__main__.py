"""
Package entry point.

Allows running the application via:

    python -m sessionfilter

This simply forwards execution to sessionfilter.cli.main().
"""

from sessionfilter.cli import main

if __name__ == "__main__":
    main()
