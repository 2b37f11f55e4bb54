"""A tiny version control tool with commits, branches, a staging index and stashes."""

__version__ = "0.1.0"
__all__ = ["__version__"]