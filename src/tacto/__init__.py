"""tacto: N×N tic-tac-toe with pluggable save/load backends."""

__version__ = "0.1.0"
