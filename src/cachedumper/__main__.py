"""Allow running as python -m cachedumper"""
import sys

from .cli import main

sys.exit(main())
