import sys

from sudokugen.client import main

sys.exit(main())
