"""Terminal browser for paging through arXiv search results."""

__version__ = "1.0.0"
