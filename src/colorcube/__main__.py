"""
Run with: python -m colorcube
"""
import sys

from colorcube.main import main

if __name__ == "__main__":
    sys.exit(main())
