import sys

from patterns.demo import main

sys.exit(main())
