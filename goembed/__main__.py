import sys

from goembed.gen_res import main


sys.exit(main())
