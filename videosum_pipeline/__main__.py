import sys

from videosum_pipeline.main import main

sys.exit(main())
