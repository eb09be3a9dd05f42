import sys

from rect_dodge.main import main

sys.exit(main())
