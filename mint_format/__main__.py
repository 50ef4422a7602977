# -*- coding: utf-8 -*-
"""Location: ./mint_format/__main__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Allow ``python -m mint_format``.
"""

# Standard
import sys

# First-Party
from mint_format.cli import main

if __name__ == "__main__":
    sys.exit(main())
