# (c) Copyright Datacraft, 2026
from typing import Any

from fastapi import Request, HTTPException, status
from fastapi.security.utils import get_authorization_scheme_param
import jwt

from .config import Settings, get_settings


def from_header(request: Request) -> str | None:
	authorization = request.headers.get("Authorization")
	scheme, token = get_authorization_scheme_param(authorization)

	if not authorization or scheme.lower() != "bearer":
		return None

	return token


def from_cookie(request: Request, settings: Settings) -> str | None:
	return request.cookies.get(settings.cookie_name, None)


def get_token(request: Request, settings: Settings) -> str | None:
	return from_cookie(request, settings) or from_header(request)


def get_authentication_attributes(
	request: Request,
	settings: Settings | None = None,
) -> dict[str, Any] | None:
	"""
	Authentication attributes of the current request.

	Attributes put on ``request.state.attributes`` by an authentication
	middleware take precedence. Otherwise the claims of the bearer token are
	used. Returns None for unauthenticated requests.
	"""
	attributes = getattr(request.state, "attributes", None)
	if attributes is not None:
		return attributes

	settings = settings or get_settings()
	token = get_token(request, settings)
	if not token or not settings.secret_key:
		return None

	try:
		return jwt.decode(
			token,
			settings.secret_key,
			algorithms=[settings.token_algorithm.value],
		)
	except jwt.ExpiredSignatureError:
		raise HTTPException(
			status_code=status.HTTP_401_UNAUTHORIZED,
			detail="Token has expired",
			headers={"WWW-Authenticate": "Bearer"},
		)
	except jwt.InvalidTokenError:
		raise HTTPException(
			status_code=status.HTTP_401_UNAUTHORIZED,
			detail="Invalid token",
			headers={"WWW-Authenticate": "Bearer"},
		)
