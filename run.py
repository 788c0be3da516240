"""
Entry Point Script (Bootstrap)
==============================
Runs the command-line interface straight from a source checkout.

It lives outside the 'src' package and puts 'src' on 'sys.path' so that
'spatialgraph' resolves without installing the project.

Usage:
    $ python run.py [records.json] [-o scene.json]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from spatialgraph.main import main

if __name__ == "__main__":
    sys.exit(main())
