"""Two-stack sorting with a limited instruction set, and an instruction checker."""

__version__ = "0.1.0"