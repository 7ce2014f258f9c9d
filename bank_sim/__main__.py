import sys

from bank_sim.cli import main

sys.exit(main())
