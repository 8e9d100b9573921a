"""Errors raised by the unit converter."""

from __future__ import annotations


class InvalidValue(TypeError):
    """The text is not a unit value the grammar accepts."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid unit value {value!r}")


class UnsupportedConversion(TypeError):
    """The value parsed, but there is no conversion from its unit to the target."""

    def __init__(self, source: str, target: str | None = None, supported: tuple[str, ...] = ()):
        self.source = source
        self.target = target
        self.supported = tuple(supported)
        if target is None:
            message = f"No conversions from unit '{source}'"
        else:
            message = (
                f"Cannot convert '{source}' to '{target}', only "
                f"[{','.join(self.supported)}] supported for input unit '{source}'"
            )
        super().__init__(message)
