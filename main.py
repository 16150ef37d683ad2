"""
Main entry point for funcgraph
Run from a checkout without installing: python main.py path/to/project
"""
import sys

from funcgraph.main import main


if __name__ == "__main__":
    sys.exit(main())
