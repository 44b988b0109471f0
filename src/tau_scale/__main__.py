import sys

from tau_scale.cli import main

sys.exit(main())
