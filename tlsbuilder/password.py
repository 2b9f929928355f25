"""
Secret-typed configuration value
"""

# Standard
from typing import Any


class Password:
    """A Password wraps a secret config value so that it is never rendered in
    logs, reprs or exception messages. The raw secret is only available through
    the value property.
    """

    HIDDEN = "[hidden]"

    def __init__(self, value: str):
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Password) and other._value == self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return self.HIDDEN

    __str__ = __repr__
