"""Configuration and client providers for the API routers."""
from functools import lru_cache
from typing import Generator

from .config.api_config import ApiConfig
from .services.contracts_client import ContractsClient


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Upstream configuration, read from the environment once per process."""
    return ApiConfig.from_env()


def get_contracts_client() -> Generator[ContractsClient, None, None]:
    """Yield a contracts client for one request and close it afterwards.

    Tests replace this through app.dependency_overrides.
    """
    client = ContractsClient(get_api_config())
    try:
        yield client
    finally:
        client.close()
