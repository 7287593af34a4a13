import sys

from rosterweb.cli import main

sys.exit(main())
