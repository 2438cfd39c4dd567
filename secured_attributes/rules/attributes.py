# (c) Copyright Datacraft, 2026
"""Lookup of authentication attribute values."""
import logging
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)


def find(
	attributes: Mapping[str, Any] | None,
	name: str,
	separator: str = '.',
) -> list[str]:
	"""
	Find the values of an attribute as a list of strings.

	The exact key ``name`` is looked up first. If it is absent and the name
	contains ``separator``, the name is treated as a path through nested
	mappings, e.g. ``realm_access.roles`` reads
	``attributes['realm_access']['roles']``.

	Missing attributes resolve to an empty list.
	"""
	if not attributes:
		return []

	if name in attributes:
		value = attributes[name]
	elif separator and separator in name:
		value = _get_nested_value(attributes, name.split(separator))
	else:
		return []

	return _flatten(value)


def _get_nested_value(data: Mapping[str, Any], keys: list[str]) -> Any:
	"""Get nested value following a list of keys."""
	value: Any = data
	for key in keys:
		if isinstance(value, Mapping):
			value = value.get(key)
		else:
			return None
	return value


def _flatten(value: Any) -> list[str]:
	if value is None:
		return []
	if isinstance(value, str):
		return [value]
	if isinstance(value, (bytes, bytearray)):
		return [bytes(value).decode('utf-8', errors='replace')]
	if isinstance(value, bool):
		# Rendered the way they appear in JSON claims
		return ['true' if value else 'false']
	if isinstance(value, Mapping):
		logger.debug(f"Attribute value is a mapping, ignoring keys={list(value)}")
		return []
	if isinstance(value, (set, frozenset)):
		return sorted(item for element in value for item in _flatten(element))
	if isinstance(value, Iterable):
		return [item for element in value for item in _flatten(element)]
	return [str(value)]
