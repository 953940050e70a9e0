"""
Bot Manager API operations.

Each operation validates its request, calls the API through the session
and returns the JSON response as a plain dict.
"""

from .akamai_bot_category_action import (
    GetAkamaiBotCategoryActionListRequest,
    GetAkamaiBotCategoryActionRequest,
    UpdateAkamaiBotCategoryActionRequest,
)
from .analytics_cookie import (
    GetBotAnalyticsCookieRequest,
    UpdateBotAnalyticsCookieRequest,
)
from .base import BaseClient, format_uri
from .bot_category_exception import (
    GetBotCategoryExceptionRequest,
    UpdateBotCategoryExceptionRequest,
)
from .client import BotmanClient
from .exceptions import (
    BotmanError,
    RemoteAPIError,
    TransportError,
    ValidationError,
)

__all__ = [
    # Client
    "BotmanClient",
    "BaseClient",
    "format_uri",
    # Analytics cookie
    "GetBotAnalyticsCookieRequest",
    "UpdateBotAnalyticsCookieRequest",
    # Bot category exception
    "GetBotCategoryExceptionRequest",
    "UpdateBotCategoryExceptionRequest",
    # Akamai bot category actions
    "GetAkamaiBotCategoryActionListRequest",
    "GetAkamaiBotCategoryActionRequest",
    "UpdateAkamaiBotCategoryActionRequest",
    # Exceptions
    "BotmanError",
    "ValidationError",
    "TransportError",
    "RemoteAPIError",
]
