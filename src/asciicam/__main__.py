import sys

from asciicam.cli import main

sys.exit(main())
