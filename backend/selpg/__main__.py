"""python -m selpg"""

import sys

from .cli import main

sys.exit(main())
