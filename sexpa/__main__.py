import sys

from sexpa.interpreter import main

sys.exit(main())
