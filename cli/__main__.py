"""
CLI 진입점

실행 방법:
    python -m cli dashboard
"""

import sys

from cli.main import main

if __name__ == "__main__":
    sys.exit(main())
