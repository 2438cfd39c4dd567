# (c) Copyright Datacraft, 2026
"""Secured attribute requirement models."""
from collections.abc import Hashable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SecuredAttributesError(Exception):
	"""Base secured attributes error."""
	pass


class SecurityRuleResult(str, Enum):
	"""Decision of a security rule."""
	ALLOWED = 'allowed'
	REJECTED = 'rejected'
	UNKNOWN = 'unknown'  # abstain, defer to the next rule


class AttributeStrategy(str, Enum):
	"""How a requirement validates its attribute."""
	CONTAINS = 'contains'
	MATCHES = 'matches'
	VALIDATOR = 'validator'


class AttributeRequirement(BaseModel):
	"""
	Requirement on a single authentication attribute.

	At most one of ``contains``, ``matches`` or ``validator`` may be set.
	A requirement with none of them is checked by the default validator.
	"""
	model_config = ConfigDict(frozen=True)

	name: str = Field(min_length=1)
	contains: tuple[str, ...] = ()
	matches: str = ''
	validator: Hashable | None = None

	@model_validator(mode='after')
	def check_single_strategy(self) -> 'AttributeRequirement':
		declared = []
		if self.contains:
			declared.append(AttributeStrategy.CONTAINS)
		if self.matches:
			declared.append(AttributeStrategy.MATCHES)
		if self.validator is not None:
			declared.append(AttributeStrategy.VALIDATOR)
		if len(declared) > 1:
			names = ', '.join(s.value for s in declared)
			raise ValueError(
				f"Attribute '{self.name}' declares more than one strategy: {names}"
			)
		return self

	@property
	def strategy(self) -> AttributeStrategy:
		if self.contains:
			return AttributeStrategy.CONTAINS
		if self.matches:
			return AttributeStrategy.MATCHES
		return AttributeStrategy.VALIDATOR
