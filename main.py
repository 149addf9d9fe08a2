"""Pharma News - 국내 기사 중복 제거 진입점"""

import sys

from pharma_news.cli import main


if __name__ == "__main__":
    sys.exit(main())
