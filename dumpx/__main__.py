import sys

from dumpx.main import main

sys.exit(main())
