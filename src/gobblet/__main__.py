import sys

from gobblet.app import main

sys.exit(main())
