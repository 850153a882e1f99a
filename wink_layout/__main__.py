import sys

from wink_layout.main import main

sys.exit(main())
