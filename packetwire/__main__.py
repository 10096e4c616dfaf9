import sys

from packetwire.cli import main

sys.exit(main())
