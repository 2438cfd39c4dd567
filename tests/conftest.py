import pytest

from secured_attributes.rules import (
	PatternCache, SecuredAttributesRule, SecuredAttributeValidator,
	SecurityRuleResult, ValidatorRegistry
)


class RecordingValidator(SecuredAttributeValidator):
	"""Returns a fixed result and records every call."""

	def __init__(self, result: SecurityRuleResult):
		self.result = result
		self.calls = []

	def validate(self, request, attributes):
		self.calls.append((request, attributes))
		return self.result


@pytest.fixture
def registry():
	return ValidatorRegistry()


@pytest.fixture
def pattern_cache():
	return PatternCache()


@pytest.fixture
def rule(registry, pattern_cache):
	return SecuredAttributesRule(registry=registry, pattern_cache=pattern_cache)


@pytest.fixture
def make_validator():
	return RecordingValidator
