from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from secured_attributes.rules import (
	AttributeRequirement, AttributeStrategy, EndpointRequirementsProvider,
	attribute, get_declared_requirements, secured_attributes
)


class TestAttributeRequirement:
	"""Requirement declaration"""

	def test_contains(self):
		requirement = attribute('roles', contains=['admin', 'ops'])
		assert requirement.contains == ('admin', 'ops')
		assert requirement.strategy == AttributeStrategy.CONTAINS

	def test_contains_single_value(self):
		assert attribute('roles', contains='admin').contains == ('admin',)

	def test_matches(self):
		requirement = attribute('tenant', matches='acme-.*')
		assert requirement.strategy == AttributeStrategy.MATCHES

	def test_validator(self):
		requirement = attribute('tenant', validator='tenant')
		assert requirement.strategy == AttributeStrategy.VALIDATOR

	def test_hashable_validator_key(self):
		requirement = attribute('tenant', validator=('tenant', 2))
		assert requirement.validator == ('tenant', 2)
		assert requirement.strategy == AttributeStrategy.VALIDATOR

	def test_unhashable_validator_key(self):
		with pytest.raises(ValidationError):
			attribute('tenant', validator=['tenant'])

	def test_no_strategy_uses_validator(self):
		requirement = attribute('tenant')
		assert requirement.validator is None
		assert requirement.strategy == AttributeStrategy.VALIDATOR

	def test_more_than_one_strategy(self):
		with pytest.raises(ValidationError):
			attribute('roles', contains=['admin'], matches='adm.*')

	def test_empty_name(self):
		with pytest.raises(ValidationError):
			attribute('')

	def test_immutable(self):
		requirement = attribute('roles', contains=['admin'])
		with pytest.raises(ValidationError):
			requirement.name = 'scopes'


class TestSecuredAttributes:
	"""Decorator and route provider"""

	def test_decorator_keeps_handler(self):
		def handler():
			return 'ok'

		decorated = secured_attributes(attribute('roles', contains=['admin']))(handler)
		assert decorated is handler
		assert handler() == 'ok'

	def test_declaration_order(self):
		@secured_attributes(attribute('a', contains=['1']))
		@secured_attributes(attribute('b', contains=['2']), attribute('c', contains=['3']))
		def handler():
			pass

		assert [r.name for r in get_declared_requirements(handler)] == ['a', 'b', 'c']

	def test_rejects_non_requirement(self):
		with pytest.raises(TypeError):
			secured_attributes({'name': 'roles'})

	def test_undeclared(self):
		def handler():
			pass

		assert get_declared_requirements(handler) == []

	def test_provider_reads_route_endpoint(self):
		@secured_attributes(attribute('roles', contains=['admin']))
		def handler():
			pass

		route = SimpleNamespace(path='/reports', endpoint=handler)
		requirements = EndpointRequirementsProvider().get_requirements(route)
		assert requirements == [AttributeRequirement(name='roles', contains=('admin',))]

	def test_provider_reads_callable(self):
		@secured_attributes(attribute('roles', contains=['admin']))
		def handler():
			pass

		assert len(EndpointRequirementsProvider().get_requirements(handler)) == 1

	def test_provider_without_route(self):
		provider = EndpointRequirementsProvider()
		assert provider.get_requirements(None) == []
		assert provider.get_requirements(object()) == []
