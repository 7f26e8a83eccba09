import sys

from digital_presence.cli import main

sys.exit(main())
