import pytest

from secured_attributes.rules import (
	DefaultAttributeValidator, SecuredAttributeValidator, SecurityRuleResult,
	ValidatorRegistry, ValidatorResolutionError, get_validator_registry
)


class TenantValidator(SecuredAttributeValidator):

	def validate(self, request, attributes):
		if attributes.get('tenant') == 'acme':
			return SecurityRuleResult.ALLOWED
		return SecurityRuleResult.REJECTED


class TestValidatorRegistry:
	"""Validator registration and resolution"""

	def test_default_validator_registered(self, registry):
		validator = registry.resolve('default')
		assert isinstance(validator, DefaultAttributeValidator)
		assert validator.validate(None, {}) == SecurityRuleResult.UNKNOWN

	def test_register_and_resolve(self, registry):
		validator = TenantValidator()
		registry.register('tenant', validator)
		assert 'tenant' in registry
		assert registry.resolve('tenant') is validator

	def test_register_decorator(self, registry):
		@registry.register('tenant')
		class DecoratedValidator(TenantValidator):
			pass

		assert isinstance(registry.resolve('tenant'), DecoratedValidator)

	def test_constructor_validators(self):
		validator = TenantValidator()
		registry = ValidatorRegistry({'tenant': validator})
		assert registry.resolve('tenant') is validator
		assert 'default' in registry

	def test_register_rejects_non_validator(self, registry):
		with pytest.raises(TypeError):
			registry.register('broken', object())

	def test_unknown_key(self, registry):
		with pytest.raises(ValidatorResolutionError) as exc_info:
			registry.resolve('missing')
		assert exc_info.value.key == 'missing'
		assert isinstance(exc_info.value, LookupError)

	def test_resolve_by_class_key(self, registry):
		validator = TenantValidator()
		registry.register(TenantValidator, validator)
		assert registry.resolve(TenantValidator) is validator

	def test_resolve_by_class_instance(self, registry):
		validator = TenantValidator()
		registry.register('tenant', validator)
		assert registry.resolve(TenantValidator) is validator

	def test_same_instance_under_several_keys(self, registry):
		validator = TenantValidator()
		registry.register('tenant', validator)
		registry.register('organization', validator)
		assert registry.resolve(TenantValidator) is validator

	def test_ambiguous_class(self, registry):
		registry.register('a', TenantValidator())
		registry.register('b', TenantValidator())
		with pytest.raises(ValidatorResolutionError):
			registry.resolve(TenantValidator)

	def test_unregistered_class(self, registry):
		with pytest.raises(ValidatorResolutionError):
			registry.resolve(TenantValidator)

	def test_shared_registry(self):
		assert get_validator_registry() is get_validator_registry()
