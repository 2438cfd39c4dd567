# (c) Copyright Datacraft, 2026
"""Route requirement providers."""
from abc import ABC, abstractmethod
from typing import Any

from .annotations import get_declared_requirements
from .models import AttributeRequirement


class RouteRequirementsProvider(ABC):
	"""Supplies the attribute requirements declared for a matched route."""

	@abstractmethod
	def get_requirements(self, route_match: Any) -> list[AttributeRequirement]:
		"""Ordered requirements of the route, empty if it declares none."""
		pass


class EndpointRequirementsProvider(RouteRequirementsProvider):
	"""
	Reads requirements declared with ``secured_attributes`` on the endpoint.

	Accepts FastAPI/Starlette routes (anything with an ``endpoint``) as well as
	the endpoint callable itself.
	"""

	def get_requirements(self, route_match: Any) -> list[AttributeRequirement]:
		if route_match is None:
			return []

		endpoint = getattr(route_match, 'endpoint', None)
		if endpoint is None and callable(route_match):
			endpoint = route_match
		if endpoint is None:
			return []

		return get_declared_requirements(endpoint)
