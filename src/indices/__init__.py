"""Search engine built on the keyword index."""

from .search_engine import SearchEngine, build

__all__ = ['SearchEngine', 'build']
