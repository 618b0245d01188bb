"""Allow running probtree as ``python -m probtree``."""

import sys

from probtree.cli import main

sys.exit(main())
