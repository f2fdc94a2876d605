# ABOUTME: Auth package for Linked API credential management.
# ABOUTME: Provides TokenManager for secure token storage using the OS keyring.

from linkedapi.auth.token_manager import StoredTokens, TokenManager

__all__ = ["StoredTokens", "TokenManager"]
