import sys

from pacman_engine.app import main

sys.exit(main())
