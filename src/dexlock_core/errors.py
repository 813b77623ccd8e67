"""Error kinds raised by the args codec."""
from __future__ import annotations

ERRORS = {
  "E_ARGS": "Invalid lock args",
  "E_HEX_DECODE": "Input is not valid hexadecimal",
  "E_ARGS_LEN": "Decoded length does not match the expected layout",
  "E_MODE_RANGE": "Mode is out of range",
  "E_FINGERPRINT_LEN": "Owner fingerprint must be 32 bytes",
  "E_FIELD_RANGE": "Field value does not fit its encoded width",
}


class ArgsError(ValueError):
    """Base class for every malformed-input condition of the codec."""

    code = "E_ARGS"

    def __init__(self, detail: str):
        super().__init__(f"{ERRORS[self.code]}: {detail}")
        self.detail = detail

    @property
    def message(self) -> str:
        return ERRORS[self.code]

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "detail": self.detail}


class HexDecodeError(ArgsError):
    code = "E_HEX_DECODE"

    def __init__(self, text: str):
        super().__init__(f"{text!r}")
        self.text = text


class LengthError(ArgsError):
    code = "E_ARGS_LEN"

    def __init__(self, expected: int, actual: int):
        super().__init__(f"must be {expected} bytes, but got {actual}")
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update(expected=self.expected, actual=self.actual)
        return d


class ModeOutOfRange(ArgsError):
    code = "E_MODE_RANGE"

    def __init__(self, value: int):
        super().__init__(f"mode {value} is greater than 2")
        self.value = value

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["value"] = self.value
        return d


class FingerprintLengthError(ArgsError):
    code = "E_FINGERPRINT_LEN"

    def __init__(self, actual: int):
        super().__init__(f"got {actual} bytes")
        self.actual = actual

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["actual"] = self.actual
        return d


class FieldRangeError(ArgsError):
    code = "E_FIELD_RANGE"

    def __init__(self, field: str, value: int, bits: int):
        super().__init__(f"{field}={value} is not an unsigned {bits}-bit integer")
        self.field = field
        self.value = value
        self.bits = bits

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update(field=self.field, value=self.value, bits=self.bits)
        return d
