import sys

from vyos_client.cli import main

sys.exit(main())
