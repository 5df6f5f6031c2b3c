import sys

from tickets_analyzer.cli import main

sys.exit(main())
