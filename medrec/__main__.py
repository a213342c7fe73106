import sys

from medrec.cli import main

sys.exit(main())
