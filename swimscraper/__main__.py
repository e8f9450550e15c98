import sys

from .scraper import main

sys.exit(main())
