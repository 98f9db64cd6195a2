import sys

from hufftext.cli import main

sys.exit(main())
