import sys

from parity_oracle.cli import main

sys.exit(main())
