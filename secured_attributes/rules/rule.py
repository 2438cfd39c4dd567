# (c) Copyright Datacraft, 2026
"""Secured attributes security rule."""
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from . import attributes as attrs
from .chain import SecurityRule, SECURED_ANNOTATION_RULE_ORDER
from .models import AttributeRequirement, AttributeStrategy, SecurityRuleResult
from .patterns import PatternCache, get_pattern_cache
from .providers import EndpointRequirementsProvider, RouteRequirementsProvider
from .validators import DEFAULT_VALIDATOR, ValidatorRegistry, get_validator_registry

logger = logging.getLogger(__name__)


class SecuredAttributesRule(SecurityRule):
	"""
	Checks the authentication attributes required by a route.

	Requirements are evaluated in declaration order and evaluation stops at
	the first rejection. Otherwise the result of the last requirement is
	returned. Routes without requirements are left to other rules.
	"""

	ORDER = SECURED_ANNOTATION_RULE_ORDER - 100

	def __init__(
		self,
		registry: ValidatorRegistry | None = None,
		pattern_cache: PatternCache | None = None,
		provider: RouteRequirementsProvider | None = None,
		default_validator: str = DEFAULT_VALIDATOR,
		separator: str = '.',
	):
		self.registry = registry if registry is not None else get_validator_registry()
		self.pattern_cache = pattern_cache if pattern_cache is not None else get_pattern_cache()
		self.provider = provider if provider is not None else EndpointRequirementsProvider()
		self.default_validator = default_validator
		self.separator = separator

	@property
	def order(self) -> int:
		return self.ORDER

	def check(
		self,
		request: Any,
		route_match: Any | None,
		attributes: Mapping[str, Any] | None,
	) -> SecurityRuleResult:
		"""Check a request matched to ``route_match``."""
		requirements = self.provider.get_requirements(route_match)
		result = self.evaluate(request, requirements, attributes)
		logger.debug(f"Attributes security rule result={result.value}")
		return result

	def evaluate(
		self,
		request: Any,
		requirements: Sequence[AttributeRequirement],
		attributes: Mapping[str, Any] | None,
	) -> SecurityRuleResult:
		"""
		Evaluate requirements against the request attributes.

		Args:
			request: The incoming request, passed through to validators
			requirements: Requirements in declaration order
			attributes: Authentication attributes of the request

		Returns:
			UNKNOWN without requirements, else REJECTED on the first failing
			requirement or the result of the last one
		"""
		result = SecurityRuleResult.UNKNOWN
		if not requirements:
			return result

		if attributes is None:
			attributes = {}
		logger.debug(f"Checking secured attributes={attributes}")

		for requirement in requirements:
			strategy = requirement.strategy
			if strategy == AttributeStrategy.CONTAINS:
				result = self._attribute_contains(requirement, attributes)
			elif strategy == AttributeStrategy.MATCHES:
				result = self._attribute_matches(requirement, attributes)
			else:
				result = self._attribute_validator(request, requirement, attributes)

			if result == SecurityRuleResult.REJECTED:
				break

		return result

	def _attribute_contains(
		self,
		requirement: AttributeRequirement,
		attributes: Mapping[str, Any],
	) -> SecurityRuleResult:
		"""At least one expected value must be present."""
		logger.debug(
			f"Checks if attribute={requirement.name} contains={list(requirement.contains)}"
		)
		actual = attrs.find(attributes, requirement.name, self.separator)
		if set(actual).isdisjoint(requirement.contains):
			return SecurityRuleResult.REJECTED
		return SecurityRuleResult.ALLOWED

	def _attribute_matches(
		self,
		requirement: AttributeRequirement,
		attributes: Mapping[str, Any],
	) -> SecurityRuleResult:
		"""At least one value must match the whole pattern."""
		logger.debug(
			f"Checks if attribute={requirement.name} matches={requirement.matches}"
		)
		actual = attrs.find(attributes, requirement.name, self.separator)
		pattern = self.pattern_cache.compiled(requirement.matches)

		if any(pattern.fullmatch(value) for value in actual):
			return SecurityRuleResult.ALLOWED
		return SecurityRuleResult.REJECTED

	def _attribute_validator(
		self,
		request: Any,
		requirement: AttributeRequirement,
		attributes: Mapping[str, Any],
	) -> SecurityRuleResult:
		key = requirement.validator
		if key is None:
			key = self.default_validator
		logger.debug(f"Checks attribute={requirement.name} using validator={key}")
		return self.registry.resolve(key).validate(request, attributes)
