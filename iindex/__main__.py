import sys

from iindex.demo import main

sys.exit(main())
