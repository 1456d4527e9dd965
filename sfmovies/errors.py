"""
Errors raised when the upstream film locations dataset cannot be used.
"""

from typing import Optional


class UpstreamError(Exception):
	"""Base class for every failure talking to the dataset host."""

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message


class UpstreamUnreachable(UpstreamError):
	"""The dataset host could not be reached (connection error or timeout)."""


class UpstreamBadStatus(UpstreamError):
	"""The dataset host answered with a non-success HTTP status."""

	def __init__(self, status_code: int, message: Optional[str] = None):
		super().__init__(message or f"Upstream dataset returned HTTP {status_code}")
		self.status_code = status_code


class UpstreamMalformedPayload(UpstreamError):
	"""The response body is not a JSON array of location records."""
