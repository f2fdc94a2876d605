# ABOUTME: Token manager storing Linked API credentials in the OS keyring.
# ABOUTME: Keeps both tokens per named account and a JSON list of account names.

import json
from pathlib import Path
from typing import Any

import keyring
from pydantic import BaseModel


class StoredTokens(BaseModel):
    """The pair of tokens needed to call the API as one LinkedIn account."""

    linked_api_token: str
    identification_token: str


class TokenManager:
    """Service for managing Linked API token storage using the OS keyring."""

    SERVICE_NAME = "linkedapi"
    DEFAULT_ACCOUNTS_FILE = Path.home() / ".linkedapi" / "accounts.json"
    MIN_TOKEN_LENGTH = 8

    def __init__(self, accounts_file: Path | None = None) -> None:
        """Initialize the token manager.

        Args:
            accounts_file: Path to JSON file storing account names.
                Defaults to ~/.linkedapi/accounts.json
        """
        self.accounts_file = (
            accounts_file if accounts_file is not None else self.DEFAULT_ACCOUNTS_FILE
        )

    def validate_token_format(self, token: str) -> bool:
        """Check that a token is non-blank and plausibly long.

        Args:
            token: The token string to validate.

        Returns:
            True if the token format appears valid, False otherwise.
        """
        if not token or not token.strip():
            return False
        return len(token.strip()) >= self.MIN_TOKEN_LENGTH

    def store_tokens(
        self, linked_api_token: str, identification_token: str, account_name: str = "default"
    ) -> None:
        """Store both tokens for an account in the OS keyring.

        Args:
            linked_api_token: The Linked API customer token.
            identification_token: The LinkedIn account identification token.
            account_name: Name to identify this account. Defaults to "default".
        """
        tokens = StoredTokens(
            linked_api_token=linked_api_token.strip(),
            identification_token=identification_token.strip(),
        )
        keyring.set_password(self.SERVICE_NAME, account_name, tokens.model_dump_json())
        self._add_account_to_list(account_name)

    def get_tokens(self, account_name: str = "default") -> StoredTokens | None:
        """Retrieve the tokens of an account.

        Args:
            account_name: Name of the account to retrieve. Defaults to "default".

        Returns:
            StoredTokens if found and readable, None otherwise.
        """
        stored = keyring.get_password(self.SERVICE_NAME, account_name)
        if stored is None:
            return None
        try:
            return StoredTokens.model_validate_json(stored)
        except ValueError:
            return None

    def delete_tokens(self, account_name: str = "default") -> None:
        """Delete the tokens of an account from the OS keyring.

        Args:
            account_name: Name of the account to delete. Defaults to "default".
        """
        keyring.delete_password(self.SERVICE_NAME, account_name)
        self._remove_account_from_list(account_name)

    def list_accounts(self) -> list[str]:
        """List all stored account names."""
        return self._load_accounts()

    def _load_accounts(self) -> list[str]:
        """Load account names, or an empty list if the file is missing or invalid."""
        if not self.accounts_file.exists():
            return []

        try:
            content = self.accounts_file.read_text().strip()
            if not content:
                return []
            data: dict[str, Any] = json.loads(content)
            accounts = data.get("accounts", [])
            if isinstance(accounts, list):
                return [str(acc) for acc in accounts]
            return []
        except (json.JSONDecodeError, OSError):
            return []

    def _save_accounts(self, accounts: list[str]) -> None:
        self.accounts_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.accounts_file, "w") as f:
            json.dump({"accounts": accounts}, f, indent=2)

    def _add_account_to_list(self, account_name: str) -> None:
        accounts = self._load_accounts()
        if account_name not in accounts:
            accounts.append(account_name)
            self._save_accounts(accounts)

    def _remove_account_from_list(self, account_name: str) -> None:
        accounts = self._load_accounts()
        if account_name in accounts:
            accounts.remove(account_name)
            self._save_accounts(accounts)
