#!/usr/bin/env python3
"""Run the cold plunge physics regression checks.

Exits non-zero with the ToleranceExceeded traceback on the first mismatch.
"""

import logging
import os
import sys

# Allow running from a checkout without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from tools.physics_checks import PHYSICS_CHECKS, run_all


def main(checks=PHYSICS_CHECKS):
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    run_all(checks)


if __name__ == "__main__":
    main()
