import sys

from fez.repl import main

sys.exit(main())
