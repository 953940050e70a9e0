"""
Constants for the Bot Manager API client.
"""

# =============================================================================
# Client Defaults
# =============================================================================

CLIENT_VERSION = "0.3.0"
DEFAULT_USER_AGENT = f"botman-client-python/{CLIENT_VERSION}"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_LOG_LEVEL = "WARNING"

# Environment variable prefix for connection settings (AKAMAI_HOST, ...)
ENV_PREFIX = "AKAMAI"
DEFAULT_SECTION = "default"

# Query parameter used to act on behalf of another account
ACCOUNT_SWITCH_KEY_PARAM = "accountSwitchKey"

# =============================================================================
# Bot Manager Endpoints
# =============================================================================

BOT_ANALYTICS_COOKIE_VALUES_PATH = "/appsec/v1/bot-analytics-cookie/values"

BOT_ANALYTICS_COOKIE_PATH = (
    "/appsec/v1/configs/{config_id}/versions/{version}"
    "/advanced-settings/bot-analytics-cookie"
)

BOT_CATEGORY_EXCEPTION_PATH = (
    "/appsec/v1/configs/{config_id}/versions/{version}"
    "/security-policies/{security_policy_id}"
    "/transactional-endpoints/bot-protection-exceptions"
)

AKAMAI_BOT_CATEGORY_ACTIONS_PATH = (
    "/appsec/v1/configs/{config_id}/versions/{version}"
    "/security-policies/{security_policy_id}/akamai-bot-category-actions"
)

AKAMAI_BOT_CATEGORY_ACTION_PATH = AKAMAI_BOT_CATEGORY_ACTIONS_PATH + "/{category_id}"
