import sys

from dvd_logo.app import main

sys.exit(main())
