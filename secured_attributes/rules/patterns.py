# (c) Copyright Datacraft, 2026
"""Cache of compiled attribute patterns."""
import logging
import re

from .models import SecuredAttributesError

logger = logging.getLogger(__name__)


class PatternCompilationError(SecuredAttributesError, ValueError):
	"""Pattern declared on an attribute is not a valid regex."""

	def __init__(self, pattern: str, error: re.error):
		super().__init__(f"Invalid attribute pattern {pattern!r}: {error}")
		self.pattern = pattern
		self.error = error


class PatternCache:
	"""
	Compiled regex patterns keyed by their source.

	Patterns are compiled on first use and kept for the lifetime of the cache.
	Reads and inserts rely on atomic dict operations, so concurrent requests
	never wait on each other. Two threads compiling the same new pattern both
	get the instance that was stored first.
	"""

	def __init__(self):
		self._patterns: dict[str, re.Pattern] = {}

	def compiled(self, regex: str) -> re.Pattern:
		"""Return the compiled pattern for ``regex``, compiling it if needed."""
		pattern = self._patterns.get(regex)
		if pattern is None:
			try:
				pattern = re.compile(regex)
			except re.error as e:
				logger.error(f"Invalid attribute pattern: {regex}")
				raise PatternCompilationError(regex, e) from e
			pattern = self._patterns.setdefault(regex, pattern)
		return pattern

	def clear(self):
		"""Clear the pattern cache."""
		self._patterns.clear()

	def __contains__(self, regex: object) -> bool:
		return regex in self._patterns

	def __len__(self) -> int:
		return len(self._patterns)


# Process-wide cache
_pattern_cache = PatternCache()


def get_pattern_cache() -> PatternCache:
	"""Get the shared pattern cache."""
	return _pattern_cache
