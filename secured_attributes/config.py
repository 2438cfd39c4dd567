import logging

from functools import lru_cache
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class Algs(str, Enum):
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    ES256 = "ES256"
    ES384 = "ES384"
    ES512 = "ES512"


class Settings(BaseSettings):
    # Token settings; claims of a verified token become the attribute map.
    # HS* algorithms verify with the shared secret, RS*/ES* expect the
    # issuer's PEM encoded public key here (needs PyJWT[crypto]).
    secret_key: str | None = Field(
        default=None,
        description="HMAC secret, or PEM public key for RS*/ES* algorithms",
    )
    token_algorithm: Algs = Algs.HS256
    cookie_name: str = "access_token"

    # Rule settings
    default_validator: str = Field(
        default="default",
        description="Validator used by requirements that declare no strategy",
    )
    attribute_separator: str = Field(
        default=".",
        description="Separator for nested attribute names, empty to disable",
    )
    reject_unknown: bool = Field(
        default=True,
        description="Reject requests no security rule has an opinion on",
    )

    model_config = SettingsConfigDict(env_prefix='sa_')


@lru_cache()
def get_settings():
    return Settings()
