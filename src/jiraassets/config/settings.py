from dynaconf import Dynaconf

# Runtime settings. Values come from jiraassets_config.json, a .env file or
# JIRAASSETS_* environment variables, e.g. JIRAASSETS_LOG_LEVEL=DEBUG.
settings = Dynaconf(
    settings_files=["jiraassets_config.json"],
    environments=True,
    env_switcher="JIRAASSETS_ENV",
    envvar_prefix="JIRAASSETS",
    load_dotenv=True,
)

DEFAULT_API_URL = "https://api.atlassian.com"


def get_setting(key: str, default=None):
    """
    Read a runtime setting.

    :param key: Setting name without the JIRAASSETS_ prefix (e.g. "LOG_LEVEL").
    :param default: Value returned when the setting is not defined.
    :return: The configured value or the default.
    """
    return settings.get(key, default)
