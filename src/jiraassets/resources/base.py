"""Base class shared by resources and data sources."""

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from jiraassets.context import ProviderContext
from jiraassets.exceptions import AssetsApiError, ResourceOperationError
from jiraassets.helpers.logger import get_logger
from jiraassets.models.schema import Schema

T = TypeVar("T")


class BaseResource(ABC):
    """
    Common plumbing for everything the provider registers with the host.

    Subclasses declare their type name and schema and perform remote calls
    through _call_remote so that failures are logged and reported uniformly.
    """

    type_name: str = ""

    def __init__(self, context: ProviderContext) -> None:
        """
        Initialize with the configured provider context.

        Args:
            context: Immutable provider state (client, schema cache, status table)
        """
        self.context = context
        self._logger = get_logger(self.__class__.__module__)

    @property
    def client(self):
        return self.context.client

    @classmethod
    @abstractmethod
    def schema(cls) -> Schema:
        """Describe the fields of this resource or data source."""

    def _call_remote(self, summary: str, func: Callable[..., T], *args: Any) -> T:
        """
        Run one API call, converting failures into a user-facing error.

        Args:
            summary: Diagnostic summary used if the call fails
            func: Client method to invoke
            *args: Arguments for the client method

        Returns:
            Whatever the client method returns

        Raises:
            ResourceOperationError: If the API call fails
        """
        try:
            return func(*args)
        except AssetsApiError as e:
            self._logger.error(summary, **e.context())
            raise ResourceOperationError(summary, e.message, cause=e) from e
