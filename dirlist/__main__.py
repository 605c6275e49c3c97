import sys

from dirlist.cli import main

sys.exit(main())
