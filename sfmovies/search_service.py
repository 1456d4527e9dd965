"""
Query service module.
Fetches the dataset on every call and runs title search and autocomplete in memory.
"""

from typing import List  # type annotations for clarity

# Import project modules for the record type and the upstream client
from .models import MovieLocation  # location record
from .upstream_client import DatasetClient  # dataset fetcher

# Import loguru for console logging
from loguru import logger  # simple structured logger


# Maximum number of suggestions returned by autocomplete
AUTOCOMPLETE_LIMIT = 10


def filter_by_title(records: List[MovieLocation], query: str) -> List[MovieLocation]:
	"""Keep records whose title contains query, ignoring case. Order is preserved."""
	needle = query.lower()
	return [r for r in records if r.title is not None and needle in r.title.lower()]


def autocomplete_titles(records: List[MovieLocation], prefix: str, limit: int = AUTOCOMPLETE_LIMIT) -> List[str]:
	"""
	Distinct titles starting with prefix (ignoring case), sorted ascending, at most `limit`.
	Duplicates are detected on the exact title string, so "Vertigo" and "VERTIGO" both survive.
	"""
	start = prefix.lower()
	matches = {r.title for r in records if r.title is not None and r.title.lower().startswith(start)}
	return sorted(matches)[:limit]


class MovieLocationService:
	"""
	Read-only queries over the film locations dataset.
	Every operation performs its own upstream fetch; upstream errors propagate unchanged.
	"""
	def __init__(self, client: DatasetClient):
		self.client = client  # upstream dataset client

	async def get_all(self) -> List[MovieLocation]:
		"""Return every record exactly as fetched."""
		return await self.client.fetch_all()

	async def filter_by_title(self, query: str) -> List[MovieLocation]:
		"""Return records whose title contains query, case-insensitively."""
		records = await self.client.fetch_all()  # full dataset
		matches = filter_by_title(records, query)  # in-memory scan
		logger.debug(f"[Service] Title filter '{query}' kept {len(matches)} of {len(records)} records")
		return matches

	async def autocomplete(self, prefix: str) -> List[str]:
		"""Return up to ten distinct titles starting with prefix."""
		records = await self.client.fetch_all()  # full dataset
		titles = autocomplete_titles(records, prefix)  # prefix match + dedupe + sort
		logger.debug(f"[Service] Autocomplete '{prefix}' -> {len(titles)} suggestions")
		return titles
