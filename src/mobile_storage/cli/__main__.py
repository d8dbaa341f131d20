"""
Allow running mobilectl as a module: python -m mobile_storage.cli
"""

import sys
from .mobilectl import main

if __name__ == "__main__":
    sys.exit(main())
