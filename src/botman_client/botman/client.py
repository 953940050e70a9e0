"""
Bot Manager API client.

Usage:
    from botman_client.botman import BotmanClient, GetBotCategoryExceptionRequest

    with BotmanClient.from_settings(auth=signer) as client:
        exception = client.get_bot_category_exception(
            GetBotCategoryExceptionRequest(
                config_id=43253, version=15, security_policy_id="AAAA_81230"
            )
        )
"""

from typing import Optional

import httpx

from ..config.settings import Settings, get_settings
from ..session import Session
from .akamai_bot_category_action import AkamaiBotCategoryActionOperations
from .analytics_cookie import AnalyticsCookieOperations
from .base import BaseClient
from .bot_category_exception import BotCategoryExceptionOperations


class BotmanClient(
    AnalyticsCookieOperations,
    BotCategoryExceptionOperations,
    AkamaiBotCategoryActionOperations,
    BaseClient,
):
    """
    Client for the Bot Manager endpoints of the Application Security API.

    Operations are independent; a client can be shared between threads
    when its session's httpx client is.
    """

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        auth: Optional[httpx.Auth] = None,
        client: Optional[httpx.Client] = None,
    ) -> "BotmanClient":
        """
        Create a client from settings.

        Args:
            settings: Client settings (uses default if None)
            auth: Request signer
            client: Pre-configured httpx client

        Raises:
            ValueError: If the settings are invalid
        """
        if settings is None:
            settings = get_settings()

        errors = settings.validate()
        if errors:
            raise ValueError(f"Invalid Bot Manager settings: {'; '.join(errors)}")

        return cls(Session.from_settings(settings, client=client, auth=auth))

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self) -> "BotmanClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
