# ABOUTME: Configuration module for client settings and polling options.
# ABOUTME: Uses pydantic-settings for environment variable overrides and provides cached access.

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.linkedapi.io"
DEFAULT_POLL_INTERVAL_SECONDS = 5.0
DEFAULT_WORKFLOW_TIMEOUT_SECONDS = 24 * 60 * 60.0
DEFAULT_MAX_TRANSPORT_ERRORS = 15


class PollOptions(BaseModel):
    """Options for waiting on a workflow result.

    The timeout is a client-side budget measured from the first poll; when it
    runs out the workflow keeps running on the server.
    """

    model_config = {"frozen": True}

    poll_interval: Annotated[
        float, Field(description="Seconds to wait between status checks", ge=0)
    ] = DEFAULT_POLL_INTERVAL_SECONDS

    timeout: Annotated[
        float, Field(description="Seconds to keep polling before giving up", gt=0)
    ] = DEFAULT_WORKFLOW_TIMEOUT_SECONDS

    max_transport_errors: Annotated[
        int,
        Field(description="Consecutive HTTP-level failures tolerated while polling", ge=0),
    ] = DEFAULT_MAX_TRANSPORT_ERRORS


class Settings(BaseSettings):
    """Client settings with environment variable support.

    All settings can be overridden via environment variables with the
    LINKEDAPI_ prefix (e.g., LINKEDAPI_LINKED_API_TOKEN).
    """

    model_config = SettingsConfigDict(
        env_prefix="LINKEDAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    linked_api_token: Annotated[
        str | None, Field(description="Linked API token sent with every request")
    ] = None

    identification_token: Annotated[
        str | None, Field(description="Identification token of the LinkedIn account")
    ] = None

    base_url: Annotated[str, Field(description="Base URL of the Linked API")] = DEFAULT_BASE_URL

    request_timeout: Annotated[
        float, Field(description="HTTP request timeout in seconds", gt=0)
    ] = 30.0

    poll_interval: Annotated[
        float, Field(description="Seconds between workflow status checks", ge=0)
    ] = DEFAULT_POLL_INTERVAL_SECONDS

    workflow_timeout: Annotated[
        float, Field(description="Seconds to wait for a workflow before giving up", gt=0)
    ] = DEFAULT_WORKFLOW_TIMEOUT_SECONDS

    max_transport_errors: Annotated[
        int, Field(description="Consecutive HTTP failures tolerated while polling", ge=0)
    ] = DEFAULT_MAX_TRANSPORT_ERRORS

    db_path: Annotated[Path, Field(description="Path to the workflow tracker database")] = (
        Path.home() / ".linkedapi" / "workflows.db"
    )

    accounts_file: Annotated[Path, Field(description="Path to accounts JSON file")] = (
        Path.home() / ".linkedapi" / "accounts.json"
    )

    def poll_options(self) -> PollOptions:
        """Build the default PollOptions described by these settings.

        Returns:
            PollOptions with the configured interval, timeout and error budget.
        """
        return PollOptions(
            poll_interval=self.poll_interval,
            timeout=self.workflow_timeout,
            max_transport_errors=self.max_transport_errors,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the client settings.

    Returns a cached Settings instance. Use get_settings.cache_clear()
    to clear the cache if needed.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists.

    Creates the directory containing the tracker database if it doesn't exist.

    Returns:
        Path to the data directory.
    """
    settings = get_settings()
    data_dir = settings.db_path.parent
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir
