# (c) Copyright Datacraft, 2026
"""Pluggable attribute validators."""
import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from typing import Any

from .models import SecuredAttributesError, SecurityRuleResult

logger = logging.getLogger(__name__)

DEFAULT_VALIDATOR = 'default'


class ValidatorResolutionError(SecuredAttributesError, LookupError):
	"""Validator named on an attribute cannot be resolved."""

	def __init__(self, key: Hashable, reason: str = "not registered"):
		super().__init__(f"Cannot resolve attribute validator {_describe(key)}: {reason}")
		self.key = key


class SecuredAttributeValidator(ABC):
	"""Validates the authentication attributes of a request."""

	@abstractmethod
	def validate(
		self,
		request: Any,
		attributes: Mapping[str, Any],
	) -> SecurityRuleResult:
		"""
		Validate the attributes of the current request.

		Args:
			request: The incoming request
			attributes: All authentication attributes of the request

		Returns:
			SecurityRuleResult for the request
		"""
		pass


class DefaultAttributeValidator(SecuredAttributeValidator):
	"""No-op validator for attributes that declare no strategy."""

	def validate(self, request, attributes) -> SecurityRuleResult:
		return SecurityRuleResult.UNKNOWN


class ValidatorRegistry:
	"""
	Validators addressable by identifier.

	An identifier is usually a string. A validator class can be used as well;
	it resolves to the validator registered under that class or, failing that,
	to the only registered instance of it.
	"""

	def __init__(self, validators: dict[Hashable, SecuredAttributeValidator] | None = None):
		self._validators: dict[Hashable, SecuredAttributeValidator] = {
			DEFAULT_VALIDATOR: DefaultAttributeValidator(),
		}
		for key, validator in (validators or {}).items():
			self.register(key, validator)

	def register(self, key: Hashable, validator: SecuredAttributeValidator | None = None):
		"""
		Register a validator under ``key``.

		Without a validator, returns a class decorator that registers an
		instance of the decorated class:

			@registry.register('tenant')
			class TenantValidator(SecuredAttributeValidator):
				...
		"""
		if validator is None:
			def decorator(cls):
				self.register(key, cls())
				return cls
			return decorator

		if not callable(getattr(validator, 'validate', None)):
			raise TypeError(f"{validator!r} does not implement validate()")

		self._validators[key] = validator
		logger.info(f"Registered attribute validator: {_describe(key)}")
		return validator

	def resolve(self, key: Hashable) -> SecuredAttributeValidator:
		"""Resolve the validator for ``key``."""
		validator = self._validators.get(key)
		if validator is not None:
			return validator

		if isinstance(key, type):
			candidates = [v for v in self._validators.values() if isinstance(v, key)]
			# The same instance may be registered under several keys
			unique = list({id(v): v for v in candidates}.values())
			if len(unique) == 1:
				return unique[0]
			if len(unique) > 1:
				logger.error(f"Multiple validators registered for {_describe(key)}")
				raise ValidatorResolutionError(key, f"{len(unique)} candidates registered")

		logger.error(f"Attribute validator not found: {_describe(key)}")
		raise ValidatorResolutionError(key)

	def __contains__(self, key: object) -> bool:
		return key in self._validators


def _describe(key: Hashable) -> str:
	if isinstance(key, type):
		return f"{key.__module__}.{key.__qualname__}"
	return repr(key)


# Process-wide registry
_registry = ValidatorRegistry()


def get_validator_registry() -> ValidatorRegistry:
	"""Get the shared validator registry."""
	return _registry
