import sys

from shescape.shescape import main

sys.exit(main())
