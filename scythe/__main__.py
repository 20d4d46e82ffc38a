import sys

from scythe.main import main


sys.exit(main())
