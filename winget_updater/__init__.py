"""Parse winget upgrade listings and classify per-package update results."""

__version__ = "0.1.0"
