import os
from typing import TypedDict

__all__ = ("Config", "get_default_config")


class Config(TypedDict, total=False):
    # url template with `{account_id}` and `{path}` placeholders
    # override default value with the environment variable ETAGCACHE_API_URL
    api_url: str
    """
    The template endpoints build resource urls from.
    """

    # override default value with the environment variable ETAGCACHE_ACCOUNT_ID
    account_id: str
    """
    The account the endpoints read from.
    """

    # override default value with the environment variable ETAGCACHE_USER_AGENT
    user_agent: str
    """
    The User-Agent header sent with every request.
    """

    # seconds
    # override default value with the environment variable ETAGCACHE_TIMEOUT
    timeout: float
    """
    The timeout for a single request in seconds.
    """


def get_default_config() -> Config:
    """Get the default configuration for etagcache."""

    API_URL = os.getenv("ETAGCACHE_API_URL", "https://basecamp.com/{account_id}/api/v1/{path}")
    ACCOUNT_ID = os.getenv("ETAGCACHE_ACCOUNT_ID", "1")
    USER_AGENT = os.getenv("ETAGCACHE_USER_AGENT", "etagcache")
    TIMEOUT = float(os.getenv("ETAGCACHE_TIMEOUT", "10"))  # seconds

    return {
        "api_url": API_URL,
        "account_id": ACCOUNT_ID,
        "user_agent": USER_AGENT,
        "timeout": TIMEOUT,
    }
