"""
Server configuration sourced from the process environment.

Required Environment Variables:
    GEMINI_API_KEY: API key for the Gemini generative-language API.
    GOOGLE_SHEETS_URL: Apps Script web app URL that stores newsletter signups.

Neither is checked at startup. Each endpoint reports its own missing value
as a server configuration error when it is called.
"""

import os
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
SHEETS_URL_ENV = "GOOGLE_SHEETS_URL"


class ServerConfig(BaseModel):
    """Read-only settings shared by every request in this process."""
    model_config = ConfigDict(frozen=True)

    gemini_api_key: Optional[str] = None
    sheets_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build a config from `environ` (defaults to os.environ). Empty values count as missing."""
        environ = os.environ if environ is None else environ
        return cls(
            gemini_api_key=environ.get(GEMINI_API_KEY_ENV) or None,
            sheets_url=environ.get(SHEETS_URL_ENV) or None,
        )


@lru_cache(maxsize=1)
def get_config() -> ServerConfig:
    """
    Load the server configuration once per process.

    A local `.env` file is read first for development; variables already
    set in the runtime environment take precedence.

    Returns:
        ServerConfig: The cached configuration
    """
    load_dotenv()
    return ServerConfig.from_env()
