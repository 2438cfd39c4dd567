# (c) Copyright Datacraft, 2026
"""Ordered chain of security rules."""
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from .models import SecurityRuleResult

logger = logging.getLogger(__name__)

# Position of the coarse grained secured-annotation rule in the chain
SECURED_ANNOTATION_RULE_ORDER = -200


class SecurityRule(ABC):
	"""A rule deciding whether a request may reach its route."""

	order: int = 0

	@abstractmethod
	def check(
		self,
		request: Any,
		route_match: Any | None,
		attributes: Mapping[str, Any] | None,
	) -> SecurityRuleResult:
		pass


class SecurityRuleChain:
	"""
	Evaluates security rules by ascending order.

	The first rule with an opinion decides. If every rule abstains the chain
	returns UNKNOWN and leaves the final answer to the caller.
	"""

	def __init__(self, rules: Iterable[SecurityRule] = ()):
		self._rules: list[SecurityRule] = sorted(rules, key=lambda r: r.order)

	@property
	def rules(self) -> list[SecurityRule]:
		return list(self._rules)

	def add(self, rule: SecurityRule) -> None:
		"""Add a rule, keeping the chain ordered."""
		self._rules.append(rule)
		self._rules.sort(key=lambda r: r.order)

	def check(
		self,
		request: Any,
		route_match: Any | None,
		attributes: Mapping[str, Any] | None,
	) -> SecurityRuleResult:
		for rule in self._rules:
			result = rule.check(request, route_match, attributes)
			if result != SecurityRuleResult.UNKNOWN:
				logger.debug(f"Security rule {type(rule).__name__} result={result.value}")
				return result

		logger.debug("No security rule has an opinion on the request")
		return SecurityRuleResult.UNKNOWN
