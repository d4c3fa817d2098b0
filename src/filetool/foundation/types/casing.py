"""Casing policy tag for filename restyling."""


from enum import Enum

from filetool.foundation.errors import ErrorCode, validation_error


class CasingPolicy(Enum):
    """Closed set of filename casing transforms.

    Selected by tag rather than callback so callers cannot inject
    arbitrary transforms.
    """

    NONE = ""
    """Strip whitespace only."""

    LOWER = "lower"
    """Lower-case the whole name."""

    UPPER = "upper"
    """Upper-case the whole name."""

    CAMEL = "camel"
    """camelCase the words of the name."""

    PASCAL = "pascal"
    """PascalCase the words of the stem, lower-case extension."""

    DATE = "date"
    """Lower-case and append the current date to the stem."""

    @classmethod
    def parse(cls, value: "str | CasingPolicy | None") -> "CasingPolicy":
        """Resolve a policy tag case-insensitively.

        ``None``, ``""`` and ``"none"`` all mean :attr:`NONE`.

        Raises:
            FileToolError: INVALID_POLICY for an unrecognized tag
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE

        tag = str(value).strip().lower()
        if tag == "none":
            return cls.NONE
        try:
            return cls(tag)
        except ValueError:
            raise validation_error(
                ErrorCode.INVALID_POLICY, value=value, policy=value,
            ) from None

    @property
    def tag(self) -> str:
        """Name used on the command line and in config files."""
        return self.value or "none"
