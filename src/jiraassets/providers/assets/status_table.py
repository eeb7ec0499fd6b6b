"""Lookup table for status-typed attribute values."""

from collections.abc import Iterable

from jiraassets.exceptions import UnknownStatusError
from jiraassets.models.assets import StatusOption


class StatusTable:
    """Ordered, read-only set of status options shared by all object types."""

    def __init__(self, options: Iterable[StatusOption] = ()) -> None:
        self._options: tuple[StatusOption, ...] = tuple(options)

    def __iter__(self):
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    @property
    def names(self) -> list[str]:
        return [option.name for option in self._options]

    def id_for(self, name: str) -> str:
        """
        Translate a status name to its ID.

        :param name: Human-readable status name, e.g. "Enabled".
        :return: The ID of the first option with that name.
        :raises UnknownStatusError: If no option matches; the message lists all names.
        """
        for option in self._options:
            if option.name == name:
                return option.id
        raise UnknownStatusError(name, self.names)

    def name_for(self, status_id: str) -> str:
        """Translate a status ID to its name, or "" when the ID is unknown."""
        for option in self._options:
            if option.id == status_id:
                return option.name
        return ""
