import sys

from .presenter import main

sys.exit(main())
