"""Assignment trail, variable activity and selection, and answer-file reading for CDCL SAT solvers."""

__version__ = "0.1.0"