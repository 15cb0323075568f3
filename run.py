"""
Entry Point Script (Bootstrap)
==============================
Runs the land generator from a source checkout without installing it.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It puts 'src' on 'sys.path' so that 'import landmesh' resolves.

Usage:
    $ python run.py --resolution 10 --show
"""
import os
import sys

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from landmesh.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
