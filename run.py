"""
Entry Point Script (Bootstrap)
==============================
Starts the application from a source checkout without installing it.

It is located outside the 'src' package and adds 'src' to 'sys.path' so
'from colorcube...' imports resolve.

Usage:
    $ python run.py [IMAGE]
"""
import os
import sys

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from colorcube.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
