"""HTTP utilities package: pooled clients, URL building, JSON transport."""

from .client import close_all_clients, get_httpx_client
from .url import build_url, join_path, merge_headers

__all__ = ["get_httpx_client", "close_all_clients", "build_url", "join_path", "merge_headers"]
