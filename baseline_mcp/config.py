"""
Configuration for the Baseline MCP server.
Reads the upstream credential and endpoint from the environment (or a .env file)
and resolves the token actually sent to the Baseline API.
"""

import json
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from baseline_mcp.errors import ConfigurationError

# ======================
# Defaults
# ======================

DEFAULT_API_URL = "https://production.baselinesoftware.com/production/api"
DEFAULT_UPDATE_LOAN_METHOD = "PATCH"

API_KEY_ENV = "BASELINE_API_KEY"
API_URL_ENV = "BASELINE_API_URL"
UPDATE_LOAN_METHOD_ENV = "BASELINE_UPDATE_LOAN_METHOD"

# Lookup order for secrets stored as JSON objects (e.g. AWS Secrets Manager)
CREDENTIAL_KEYS = (API_KEY_ENV, "apiKey", "key", "value", "secret")


def resolve_token(raw: str) -> str:
    """Extract the API token from a configured credential.

    A plain string is used as-is. A JSON object is searched for the first
    non-empty value under CREDENTIAL_KEYS, falling back to its first string
    value, and finally to the raw string.

    Args:
        raw: The credential exactly as configured

    Returns:
        The token to send in the Authorization header
    """
    try:
        parsed = json.loads(raw)
    except ValueError:
        return raw

    if not isinstance(parsed, dict):
        return raw

    for key in CREDENTIAL_KEYS:
        if parsed.get(key):
            return str(parsed[key])

    for value in parsed.values():
        if isinstance(value, str):
            return value
    return raw


class BaselineConfig(BaseModel):
    """Upstream connection settings shared by every tool call."""
    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    update_loan_method: str = DEFAULT_UPDATE_LOAN_METHOD

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "BaselineConfig":
        """Build a config from environment variables, loading .env first."""
        load_dotenv(dotenv_path)
        config = cls(
            update_loan_method=os.getenv(UPDATE_LOAN_METHOD_ENV, DEFAULT_UPDATE_LOAN_METHOD).upper(),
        )
        config.set_api_key(os.getenv(API_KEY_ENV))
        config.set_api_url(os.getenv(API_URL_ENV) or DEFAULT_API_URL)
        return config

    def set_api_key(self, key: Optional[str]) -> None:
        """Replace the credential. Empty values leave the current one in place."""
        if key:
            self.api_key = key

    def set_api_url(self, url: str) -> None:
        self.api_url = url.rstrip("/")

    def require_api_key(self) -> None:
        if not self.api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV} is not configured. Please set it via environment "
                "variables or BaselineConfig.set_api_key()."
            )

    @property
    def token(self) -> str:
        self.require_api_key()
        return resolve_token(self.api_key)
