"""Package metadata shared by the CLI and the provider."""

PACKAGE_NAME = "jiraassets-provider"
PROVIDER_TYPE_NAME = "jiraassets"
__version__ = "0.1.0"
DOCS_URL = "https://developer.atlassian.com/cloud/assets/rest/"
