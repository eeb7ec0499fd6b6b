from enum import Enum, IntEnum


class BaseEnumModel(str, Enum):
    """String-valued enum that serializes and logs as its plain value."""

    def __str__(self) -> str:
        return self.value


class TypeCode(IntEnum):
    """
    Attribute type codes used by the Assets object type attribute API.

    Only DEFAULT, REFERENCE and STATUS values can be round-tripped by the provider.
    """

    DEFAULT = 0
    REFERENCE = 1
    USER = 2
    CONFLUENCE = 3
    GROUP = 4
    VERSION = 5
    PROJECT = 6
    STATUS = 7

    @classmethod
    def from_value(cls, value: int):
        """Return the matching member, or the raw int for codes the API adds later."""
        try:
            return cls(value)
        except ValueError:
            return value
