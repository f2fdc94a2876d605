# ABOUTME: Transport package for talking to the Linked API over HTTP.
# ABOUTME: Exports the HttpClient protocol and its httpx implementation.

from linkedapi.transport.client import HttpClient, LinkedApiHttpClient

__all__ = ["HttpClient", "LinkedApiHttpClient"]
