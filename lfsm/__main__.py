import sys

from lfsm.demo import main

sys.exit(main())
