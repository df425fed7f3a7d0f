"""
Application services.

Exports:
  - BatchFetchService: Named-collection batch lookups
"""

from batchfetch.application.services.batch_fetch_service import BatchFetchService

__all__ = ["BatchFetchService"]
