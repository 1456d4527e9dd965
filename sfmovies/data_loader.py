"""
Payload mapping module.
Turns the decoded upstream JSON array into MovieLocation records.
"""

# Standard typing helpers
from typing import Any, Dict, List, Optional  # type hints

# Import our record data class and the error raised on bad payloads
from .models import RECORD_FIELDS, MovieLocation  # structured location record
from .errors import UpstreamMalformedPayload  # payload shape errors

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Maps the upstream payload to records.
	The payload must be a JSON array of objects; anything else is rejected as a whole.
	"""

	def parse_payload(self, payload: Any) -> List[MovieLocation]:
		"""
		Convert a decoded JSON document into a list of MovieLocation objects.
		Upstream order is preserved; unknown keys are ignored.
		"""
		# The dataset endpoint always answers with an array; an object usually means an error body
		if not isinstance(payload, list):
			raise UpstreamMalformedPayload(
				f"Expected a JSON array of records, got {type(payload).__name__}"
			)

		records = []  # accumulator for parsed records
		for index, item in enumerate(payload):  # keep index for diagnostics
			if not isinstance(item, dict):  # every element must be an object
				raise UpstreamMalformedPayload(
					f"Record at index {index} is {type(item).__name__}, expected an object"
				)
			records.append(self._parse_location_data(item, index))  # convert dict -> record

		logger.debug(f"[DataLoader] Parsed {len(records)} location records")  # summary
		return records  # return list

	def _parse_location_data(self, data: Dict[str, Any], index: int) -> MovieLocation:
		"""
		Convert one raw dictionary into a MovieLocation.
		Missing keys and JSON null both become None.
		"""
		values = {}  # field name -> text value
		for field in RECORD_FIELDS:  # only the keys we know about
			values[field] = self._as_text(data.get(field), field, index)
		return MovieLocation(**values)  # structured record

	def _as_text(self, value: Any, field: str, index: int) -> Optional[str]:
		"""
		Keep strings verbatim and render JSON numbers as text.
		Objects, arrays and booleans cannot stand in for a text field.
		"""
		if value is None:  # absent or null
			return None
		if isinstance(value, str):  # the common case
			return value
		# bool is a subclass of int, so check it first
		if isinstance(value, (int, float)) and not isinstance(value, bool):
			return str(value)  # e.g. release_year sent as a number
		raise UpstreamMalformedPayload(
			f"Record at index {index} has a non-text value for '{field}': {type(value).__name__}"
		)
