import sys

from collider_gen.cli import main

sys.exit(main())
