"""
Upstream client for the SF film locations dataset.
Fetches the whole dataset with one GET and maps it to records.
"""

from typing import List, Optional

import httpx
from loguru import logger

from .data_loader import DataLoader
from .errors import UpstreamBadStatus, UpstreamMalformedPayload, UpstreamUnreachable
from .models import MovieLocation


class DatasetClient:
	"""HTTP client for the public dataset endpoint."""

	def __init__(self, http_client: httpx.AsyncClient, dataset_url: str, loader: Optional[DataLoader] = None):
		"""
		Args:
			http_client: shared httpx AsyncClient (owned by the caller)
			dataset_url: full URL of the dataset JSON resource
			loader: payload mapper, a fresh DataLoader by default
		"""
		self._client = http_client
		self.dataset_url = dataset_url
		self._loader = loader or DataLoader()

	async def fetch_all(self) -> List[MovieLocation]:
		"""
		Download and parse the full dataset.

		Raises:
			UpstreamUnreachable: connection failure or timeout
			UpstreamBadStatus: non-2xx response
			UpstreamMalformedPayload: body is not a JSON array of records
		"""
		logger.debug(f"[Upstream] GET {self.dataset_url}")

		try:
			response = await self._client.get(self.dataset_url)
		except httpx.RequestError as e:
			logger.warning(f"[Upstream] Request to {self.dataset_url} failed: {e!r}")
			raise UpstreamUnreachable(f"Could not reach upstream dataset: {e}") from e

		if not response.is_success:
			logger.warning(f"[Upstream] {self.dataset_url} answered HTTP {response.status_code}")
			raise UpstreamBadStatus(response.status_code)

		try:
			payload = response.json()
		except ValueError as e:  # json.JSONDecodeError and UnicodeDecodeError
			logger.warning(f"[Upstream] Response body is not valid JSON: {e}")
			raise UpstreamMalformedPayload(f"Upstream dataset returned invalid JSON: {e}") from e

		records = self._loader.parse_payload(payload)
		logger.info(f"[Upstream] Fetched {len(records)} records")
		return records
