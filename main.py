#!/usr/bin/env python
"""
Pixel Filter Toolkit root-level launcher
"""

import sys
from pathlib import Path

# Add project root to sys.path so pixelfilter is importable without installing
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from pixelfilter.main import main

if __name__ == "__main__":
    sys.exit(main())
