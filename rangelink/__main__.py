import sys

from rangelink.cli import main

sys.exit(main())
