# (c) Copyright Datacraft, 2026
"""FastAPI dependency enforcing the security rule chain."""
import logging

from fastapi import Request, HTTPException, status

from .config import Settings, get_settings
from .rules import SecuredAttributesRule, SecurityRuleChain, SecurityRuleResult
from .utils import get_authentication_attributes

logger = logging.getLogger(__name__)


def default_rule_chain(settings: Settings) -> SecurityRuleChain:
	"""Chain holding the secured attributes rule configured from ``settings``."""
	return SecurityRuleChain([
		SecuredAttributesRule(
			default_validator=settings.default_validator,
			separator=settings.attribute_separator,
		),
	])


class SecuredAttributesGuard:
	"""
	Dependency rejecting requests the security rules do not allow.

		guard = SecuredAttributesGuard()
		app = FastAPI(dependencies=[Depends(guard)])

	Unauthenticated requests are answered with 401, authenticated ones with
	403. Requests every rule abstains on are rejected when
	``reject_unknown`` is set.
	"""

	def __init__(
		self,
		chain: SecurityRuleChain | None = None,
		settings: Settings | None = None,
	):
		self.settings = settings or get_settings()
		self.chain = chain or default_rule_chain(self.settings)

	def __call__(self, request: Request) -> SecurityRuleResult:
		route = request.scope.get("route")
		attributes = get_authentication_attributes(request, self.settings)

		result = self.chain.check(request, route, attributes)
		rejected = result == SecurityRuleResult.REJECTED or (
			result == SecurityRuleResult.UNKNOWN and self.settings.reject_unknown
		)
		if not rejected:
			return result

		logger.debug(
			f"Request {request.method} {request.url.path} rejected, result={result.value}"
		)
		if attributes is None:
			raise HTTPException(
				status_code=status.HTTP_401_UNAUTHORIZED,
				detail="Not authenticated",
				headers={"WWW-Authenticate": "Bearer"},
			)
		raise HTTPException(
			status_code=status.HTTP_403_FORBIDDEN,
			detail="Forbidden",
		)
