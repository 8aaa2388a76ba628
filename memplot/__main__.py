import sys

from memplot.cli.cli import main

sys.exit(main())
