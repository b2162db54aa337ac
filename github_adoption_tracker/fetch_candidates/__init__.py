from .fetch_candidate import EnrichmentError, fetch_candidate
from .fetch_candidates import fetch_candidates

__all__ = ["EnrichmentError", "fetch_candidate", "fetch_candidates"]
