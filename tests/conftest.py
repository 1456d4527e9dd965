"""Shared fixtures: a small slice of the dataset and an in-memory dataset client."""

from typing import List

import pytest

from sfmovies.data_loader import DataLoader
from sfmovies.errors import UpstreamError
from sfmovies.models import MovieLocation


# Raw payload shaped like the real endpoint's answer
SAMPLE_PAYLOAD = [
	{
		"title": "San Francisco Story",
		"release_year": "1952",
		"locations": "Embarcadero",
		"actor_1": "Joel McCrea",
		"actor_2": "Yvonne De Carlo",
		"production_company": "Vinson Productions",
	},
	{"title": "The Rock", "release_year": "1996", "locations": "Alcatraz Island", "actor_1": "Sean Connery", "actor_2": "Nicolas Cage"},
	{"release_year": "2001", "locations": "Golden Gate Bridge"},
	{"title": "Bullitt", "release_year": "1968", "locations": "Taylor St", "actor_1": "Steve McQueen"},
	{"title": "Bullitt", "release_year": "1968", "locations": "Grace Cathedral", "actor_1": "Steve McQueen"},
	{"title": "Basic Instinct", "release_year": "1992", "locations": "Lombard St"},
	{"title": "the rocketeer", "release_year": "1991"},
]


class FakeDatasetClient:
	"""Stands in for DatasetClient: returns fixed records or raises a fixed error."""

	def __init__(self, records: List[MovieLocation] = None, error: UpstreamError = None):
		self.records = records or []
		self.error = error
		self.calls = 0

	async def fetch_all(self) -> List[MovieLocation]:
		self.calls += 1
		if self.error is not None:
			raise self.error
		return list(self.records)


@pytest.fixture
def sample_records() -> List[MovieLocation]:
	return DataLoader().parse_payload(SAMPLE_PAYLOAD)


@pytest.fixture
def fake_client(sample_records) -> FakeDatasetClient:
	return FakeDatasetClient(sample_records)
