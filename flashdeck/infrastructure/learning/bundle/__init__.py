"""Remote bundle download."""

from .http_bundle_fetcher import HttpBundleFetcher

__all__ = ["HttpBundleFetcher"]
