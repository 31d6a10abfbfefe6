"""
Bank Directory Module

REST client for the public list of Nigerian banks and their codes.
The directory is plain JSON served over HTTP; each entry carries at least a
name, a short code and a long code.
"""

import httpx
import logging
import time
from dataclasses import dataclass, asdict
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .config import DEFAULT_BANK_DIRECTORY_URL
from .exceptions import BankDirectoryError, BankDirectoryFetchError, BankDirectoryParseError

logger = logging.getLogger("nuban.banks")


@dataclass(frozen=True)
class Bank:
    """A financial institution known to the directory"""
    name: str
    code: str
    longcode: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


class BankPayload(BaseModel):
    """Shape of one entry in the directory JSON"""

    model_config = ConfigDict(extra="ignore")

    name: str
    code: str
    longcode: str = ""

    @field_validator("code", "longcode", mode="before")
    @classmethod
    def _coerce_code(cls, value):
        # Codes occasionally arrive as numbers or null
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_bank(self) -> Bank:
        return Bank(name=self.name, code=self.code.strip(), longcode=self.longcode.strip())


def parse_banks(data) -> List[Bank]:
    """
    Convert decoded directory JSON into Bank records.

    Raises:
        BankDirectoryParseError: If the payload is not a list of bank objects
    """
    if not isinstance(data, list):
        raise BankDirectoryParseError(
            f"Expected a JSON array of banks, got {type(data).__name__}"
        )

    banks = []
    for index, item in enumerate(data):
        try:
            banks.append(BankPayload.model_validate(item).to_bank())
        except ValidationError as e:
            raise BankDirectoryParseError(f"Invalid bank entry at index {index}: {e}") from e
    return banks


class BankDirectoryClient:
    """HTTP client for the bank directory JSON resource"""

    def __init__(
        self,
        source_url: str = DEFAULT_BANK_DIRECTORY_URL,
        timeout: float = 10.0,
        cache_ttl_seconds: int = 3600,
        client: Optional[httpx.Client] = None
    ):
        self.source_url = source_url
        self.timeout = timeout
        self.cache_ttl_seconds = cache_ttl_seconds
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._cached: Optional[List[Bank]] = None
        self._cached_at = 0.0

    def fetch_banks(self) -> List[Bank]:
        """
        Retrieve the bank list, surfacing any failure.

        Returns:
            List of banks in directory order

        Raises:
            BankDirectoryFetchError: On transport errors or non-success status
            BankDirectoryParseError: If the body is not a list of bank objects
        """
        cached = self._get_cached()
        if cached is not None:
            return cached

        start = time.time()
        try:
            response = self._client.get(self.source_url)
        except httpx.HTTPError as e:
            raise BankDirectoryFetchError(f"Bank directory request failed: {e}") from e

        if response.status_code < 200 or response.status_code >= 300:
            raise BankDirectoryFetchError(
                f"Bank directory returned HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise BankDirectoryParseError(f"Bank directory body is not valid JSON: {e}") from e

        banks = parse_banks(data)
        latency_ms = (time.time() - start) * 1000
        logger.info(f"Fetched {len(banks)} banks from {self.source_url} in {latency_ms:.1f}ms")

        self._store(banks)
        return list(banks)

    def list_banks(self) -> List[Bank]:
        """
        Retrieve the bank list, degrading to an empty list on failure.

        Callers that need to tell "no banks" apart from "directory
        unavailable" should use fetch_banks() instead.
        """
        try:
            return self.fetch_banks()
        except BankDirectoryError as e:
            logger.warning(f"Bank directory unavailable: {e}")
            return []

    def clear_cache(self) -> None:
        self._cached = None
        self._cached_at = 0.0

    def _get_cached(self) -> Optional[List[Bank]]:
        if self._cached is None or self.cache_ttl_seconds <= 0:
            return None
        if time.monotonic() - self._cached_at >= self.cache_ttl_seconds:
            return None
        return list(self._cached)

    def _store(self, banks: List[Bank]) -> None:
        if self.cache_ttl_seconds > 0:
            self._cached = list(banks)
            self._cached_at = time.monotonic()

    def close(self):
        """Close the HTTP client"""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class StaticBankDirectory:
    """In-memory directory with the same surface as BankDirectoryClient"""

    def __init__(self, banks: Iterable[Bank] = ()):
        self._banks = list(banks)

    def fetch_banks(self) -> List[Bank]:
        return list(self._banks)

    def list_banks(self) -> List[Bank]:
        return list(self._banks)

    def close(self):
        pass
