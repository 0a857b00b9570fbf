import sys

from merchants_guide.cli import main

sys.exit(main())
