"""
Data models for the SF Movies API.
Defines the record shape shared by the upstream client, the query service and the API.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, __eq__
# Import typing helpers for optional text fields
from typing import Optional, Tuple  # optional values and fixed-size tuples


# Upstream JSON keys, in the order they appear on a record
RECORD_FIELDS: Tuple[str, ...] = ('title', 'release_year', 'locations', 'actor_1', 'actor_2', 'actor_3')


@dataclass
class MovieLocation:
	"""
	One entry of the film locations dataset: a movie and one place it was shot.
	Values are kept verbatim from upstream; None means the key was absent or null.
	"""
	title: Optional[str] = None  # movie title as published upstream
	release_year: Optional[str] = None  # release year, kept as text
	locations: Optional[str] = None  # free-text shooting location
	actor_1: Optional[str] = None  # first credited actor
	actor_2: Optional[str] = None  # second credited actor
	actor_3: Optional[str] = None  # third credited actor
