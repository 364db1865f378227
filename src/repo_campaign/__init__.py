"""Load multi-repository campaigns from repos.txt and README.md."""

__version__ = "1.0.0"
