# (c) Copyright Datacraft, 2026
"""Declaration of secured attributes on route handlers."""
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from .models import AttributeRequirement

SECURED_ATTRIBUTES = '__secured_attributes__'


def attribute(
	name: str,
	*,
	contains: Iterable[str] = (),
	matches: str = '',
	validator: Hashable | None = None,
) -> AttributeRequirement:
	"""Build a requirement on the attribute ``name``."""
	if isinstance(contains, str):
		contains = (contains,)
	return AttributeRequirement(
		name=name,
		contains=tuple(contains),
		matches=matches,
		validator=validator,
	)


def secured_attributes(*requirements: AttributeRequirement) -> Callable:
	"""
	Attach attribute requirements to a route handler.

		@router.get('/reports')
		@secured_attributes(
			attribute('roles', contains=['admin', 'auditor']),
			attribute('tenant', matches=r'acme-[a-z]+'),
		)
		async def list_reports():
			...

	Requirements are checked in the order they are declared. The handler
	itself is returned unchanged, so the decorator may sit above or below the
	route decorator.
	"""
	for requirement in requirements:
		if not isinstance(requirement, AttributeRequirement):
			raise TypeError(f"Expected AttributeRequirement, got {requirement!r}")

	def decorator(func: Callable) -> Callable:
		# Outer decorators run last but are declared first
		declared = getattr(func, SECURED_ATTRIBUTES, ())
		setattr(func, SECURED_ATTRIBUTES, tuple(requirements) + tuple(declared))
		return func

	return decorator


def get_declared_requirements(func: Any) -> list[AttributeRequirement]:
	"""Requirements declared on ``func``, empty if there are none."""
	return list(getattr(func, SECURED_ATTRIBUTES, ()))
