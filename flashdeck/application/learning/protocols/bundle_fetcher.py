"""Protocol for downloading an import bundle."""

from typing import Protocol


class BundleFetcherProtocol(Protocol):
    """Fetches and decodes a JSON bundle from a URL."""

    async def fetch(self, url: str) -> object:
        """
        Download the document at ``url`` and decode it as JSON.

        Raises:
            BundleFetchError: On any transport, status or decoding failure
        """
        ...
