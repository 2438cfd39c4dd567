# (c) Copyright Datacraft, 2026
"""Attribute based security rule for FastAPI routes."""
from .rules import (
	AttributeRequirement, SecurityRuleResult, SecuredAttributesRule,
	SecurityRuleChain, SecuredAttributeValidator, ValidatorRegistry,
	attribute, secured_attributes
)
from .dependencies import SecuredAttributesGuard

__all__ = [
	'AttributeRequirement',
	'SecurityRuleResult',
	'SecuredAttributesRule',
	'SecurityRuleChain',
	'SecuredAttributeValidator',
	'ValidatorRegistry',
	'attribute',
	'secured_attributes',
	'SecuredAttributesGuard',
]
