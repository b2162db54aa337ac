from .fetch_search_hits import build_query, iter_search_pages

__all__ = ["build_query", "iter_search_pages"]
