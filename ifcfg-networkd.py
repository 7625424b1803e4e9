#!/usr/bin/env python3
# ./ifcfg-networkd.py

from __future__ import annotations

import sys
from pathlib import Path

# Allow imports from the repo checkout when not installed
sys.path.insert(0, str(Path(__file__).resolve().parent))

from ifcfg_networkd.main import main

if __name__ == "__main__":
    sys.exit(main())
