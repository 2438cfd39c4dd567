# (c) Copyright Datacraft, 2026
"""Secured attributes security rule."""
from .models import (
	AttributeRequirement, AttributeStrategy, SecurityRuleResult,
	SecuredAttributesError
)
from .annotations import attribute, secured_attributes, get_declared_requirements
from .attributes import find
from .patterns import PatternCache, PatternCompilationError, get_pattern_cache
from .validators import (
	SecuredAttributeValidator, DefaultAttributeValidator, ValidatorRegistry,
	ValidatorResolutionError, get_validator_registry
)
from .providers import RouteRequirementsProvider, EndpointRequirementsProvider
from .chain import SecurityRule, SecurityRuleChain, SECURED_ANNOTATION_RULE_ORDER
from .rule import SecuredAttributesRule

__all__ = [
	'AttributeRequirement',
	'AttributeStrategy',
	'SecurityRuleResult',
	'SecuredAttributesError',
	'attribute',
	'secured_attributes',
	'get_declared_requirements',
	'find',
	'PatternCache',
	'PatternCompilationError',
	'get_pattern_cache',
	'SecuredAttributeValidator',
	'DefaultAttributeValidator',
	'ValidatorRegistry',
	'ValidatorResolutionError',
	'get_validator_registry',
	'RouteRequirementsProvider',
	'EndpointRequirementsProvider',
	'SecurityRule',
	'SecurityRuleChain',
	'SECURED_ANNOTATION_RULE_ORDER',
	'SecuredAttributesRule',
]
