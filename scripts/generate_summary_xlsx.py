"""
Writes Project-Summary.xlsx two directories above this script.
Extra arguments are forwarded to ``crmkit summary`` (e.g. ``--output``).
"""
import os
import sys

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.append(os.path.dirname(SCRIPT_DIR))  # add repo root to path

from crmkit.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["summary", "--anchor", SCRIPT_DIR, *sys.argv[1:]]))
