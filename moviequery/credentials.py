"""API key lookup for the OMDb service."""
import os
from pathlib import Path
from typing import Callable

from dotenv import load_dotenv

from .errors import MissingCredentialError


API_KEY_ENV = "OMDB_API_KEY"

CredentialProvider = Callable[[], str]


def load_api_key() -> str | None:
    """
    Load the OMDb API key from the environment or a .env file.

    Priority:
    1. OMDB_API_KEY environment variable
    2. .env file in current directory
    3. .env file in user home directory

    Returns:
        API key string or None if not found
    """
    api_key = os.environ.get(API_KEY_ENV)
    if api_key:
        return api_key

    for env_path in (Path.cwd() / ".env", Path.home() / ".env"):
        if env_path.exists():
            load_dotenv(env_path)
            api_key = os.environ.get(API_KEY_ENV)
            if api_key:
                return api_key

    return None


def env_credential_provider() -> str:
    """Credential provider backed by :func:`load_api_key`.

    Raises:
        MissingCredentialError: If no key is configured anywhere
    """
    api_key = load_api_key()
    if not api_key:
        raise MissingCredentialError(
            "OMDb API key not found.\n"
            "Set it using one of these methods:\n"
            f"  1. Environment variable: export {API_KEY_ENV}=your_key\n"
            f"  2. Create a .env file with: {API_KEY_ENV}=your_key\n"
            "Get a free API key at: https://www.omdbapi.com/apikey.aspx"
        )
    return api_key


def static_credential_provider(api_key: str) -> CredentialProvider:
    """Wrap a fixed key as a credential provider."""
    if not api_key:
        raise MissingCredentialError("An empty API key was supplied")

    def provider() -> str:
        return api_key

    return provider
