"""
Allow running equifyctl as a module: python -m equify.cli
"""

import sys
from .equifyctl import main

if __name__ == "__main__":
    sys.exit(main())
