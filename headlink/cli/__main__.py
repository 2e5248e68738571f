import sys

from headlink.cli import main

sys.exit(main())
