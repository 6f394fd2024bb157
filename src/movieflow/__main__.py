import sys

from movieflow.cli import main

sys.exit(main())
