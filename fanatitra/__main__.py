import sys

from fanatitra.cli import main

sys.exit(main())
