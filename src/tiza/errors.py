"""Exception classes for Tiza.

Parsing never raises: malformed markup degrades to best-effort nodes.
These exceptions cover the surfaces around the parser that do validate
their input (configuration and tree deserialization).
"""

from __future__ import annotations


class TizaError(Exception):
    """Base exception for all Tiza errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(TizaError, ValueError):
    """Invalid parse configuration value.

    Raised when a ParseConfig is constructed with an out-of-range field.
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending ParseConfig field
            value: The rejected value
            message: Description of the constraint
        """
        self.field = field
        self.value = value
        super().__init__(f"ParseConfig.{field}={value!r}: {message}")


class SerializationError(TizaError, ValueError):
    """Malformed serialized tree.

    Raised by from_dict/from_json for unknown or missing type
    discriminators and missing fields.
    """

    pass
