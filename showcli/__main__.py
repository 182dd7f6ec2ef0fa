import sys

from showcli.cli import main

sys.exit(main())
