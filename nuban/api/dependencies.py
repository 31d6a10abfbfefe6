"""
Service wiring for the API
"""

from ..banks import BankDirectoryClient
from ..inference import BankInferrer
from ..config import get_config


class NubanService:
    """Bank directory and inference components used by the routers"""

    def __init__(self, directory):
        self.directory = directory
        self.inferrer = BankInferrer(directory)

    @classmethod
    def from_config(cls) -> "NubanService":
        config = get_config()
        directory = BankDirectoryClient(
            source_url=config.bank_directory_url,
            timeout=config.bank_directory_timeout,
            cache_ttl_seconds=config.bank_directory_cache_ttl_seconds
        )
        return cls(directory)


# Global service instance
nuban_service = NubanService.from_config()


# Dependency to get the service
def get_nuban_service() -> NubanService:
    return nuban_service
