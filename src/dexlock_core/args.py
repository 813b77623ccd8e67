"""Dex lock args codec.

Packs and unpacks the fixed 42-byte args blob of the dex lock script:

    [Mode u16 LE | OwnerFingerprint 32B | PriceBase u32 LE | PricePow u32 LE]

Every function here is pure. Malformed input raises an ``ArgsError``
subclass; nothing is logged or printed.
"""
from __future__ import annotations

import binascii
import struct
from dataclasses import dataclass
from enum import IntEnum

from .errors import (
    FieldRangeError,
    FingerprintLengthError,
    HexDecodeError,
    LengthError,
    ModeOutOfRange,
)
from .protocol import (
    AMOUNT_DATA_LEN,
    ARGS_FMT,
    ARGS_LEN,
    DEX_LOCK_CODE_HASH,
    DEX_LOCK_HASH_TYPE,
    FINGERPRINT_LEN,
    FINGERPRINT_OFFSET,
    HEX_PREFIX,
    MAX_MODE,
    MODE_FMT,
    MODE_LEN,
    MODE_OFFSET,
    PRICE_BASE_OFFSET,
    PRICE_POW_OFFSET,
    U16_MAX,
    U32_LEN,
    U32_MAX,
    U64_MAX,
)


class Mode(IntEnum):
    """Trading restriction applied to the locked asset."""
    UDT = 0
    RESTRICT = 1
    PARTIAL_RESTRICT = 2

    @property
    def description(self) -> str:
        return _MODE_DESCRIPTIONS[self]


_MODE_DESCRIPTIONS = {
    Mode.UDT: "UDT compatible mode",
    Mode.RESTRICT: "Restrict mode, can't modify data or type during trade",
    Mode.PARTIAL_RESTRICT: "Partial restrict mode, can't modify type during trade, but data can",
}


@dataclass(frozen=True)
class LockArgs:
    """Decoded form of the 42-byte args blob."""
    mode: int
    owner_fingerprint: bytes
    price_base: int
    price_pow: int

    @classmethod
    def from_hex(cls, hex_text: str) -> "LockArgs":
        return decode_args(hex_text)

    def to_bytes(self) -> bytes:
        return pack_args(self)

    def to_hex(self) -> str:
        return HEX_PREFIX + pack_args(self).hex()

    @property
    def fingerprint_hex(self) -> str:
        return HEX_PREFIX + self.owner_fingerprint.hex()


def strip_hex_prefix(text: str) -> str:
    """Drop one leading ``0x``/``0X`` if present."""
    if text[:2].lower() == HEX_PREFIX:
        return text[2:]
    return text


def parse_hex(text: str) -> bytes:
    """Strictly hex-decode ``text`` after removing an optional prefix.

    Whitespace, separators, non-ASCII characters and odd digit counts are
    all rejected with ``HexDecodeError``.
    """
    digits = strip_hex_prefix(text)
    try:
        return binascii.unhexlify(digits)
    except (binascii.Error, ValueError):
        raise HexDecodeError(text) from None


_UINT_MAX = {16: U16_MAX, 32: U32_MAX, 64: U64_MAX}


def _check_uint(field: str, value: int, bits: int) -> int:
    if value < 0 or value > _UINT_MAX[bits]:
        raise FieldRangeError(field, value, bits)
    return value


def _check_mode(value: int) -> int:
    _check_uint("mode", value, 16)
    if value > MAX_MODE:
        raise ModeOutOfRange(value)
    return value


def unpack_args(blob: bytes) -> LockArgs:
    """Parse a raw 42-byte args blob."""
    if len(blob) != ARGS_LEN:
        raise LengthError(ARGS_LEN, len(blob))

    # Mode is validated before the remaining fields are touched.
    (mode,) = struct.unpack_from(MODE_FMT, blob, MODE_OFFSET)
    if mode > MAX_MODE:
        raise ModeOutOfRange(mode)

    _, fingerprint, price_base, price_pow = struct.unpack(ARGS_FMT, blob)
    return LockArgs(
        mode=Mode(mode),
        owner_fingerprint=fingerprint,
        price_base=price_base,
        price_pow=price_pow,
    )


def decode_args(hex_text: str) -> LockArgs:
    """Decode hex text (optionally ``0x``-prefixed) into ``LockArgs``."""
    return unpack_args(parse_hex(hex_text))


def pack_args(args: LockArgs) -> bytes:
    if len(args.owner_fingerprint) != FINGERPRINT_LEN:
        raise FingerprintLengthError(len(args.owner_fingerprint))
    return struct.pack(
        ARGS_FMT,
        _check_mode(int(args.mode)),
        bytes(args.owner_fingerprint),
        _check_uint("price_base", args.price_base, 32),
        _check_uint("price_pow", args.price_pow, 32),
    )


def encode_args(owner_fingerprint_hex: str, mode: int, price_base: int, price_pow: int) -> str:
    """Encode user-supplied fields into canonical ``0x``-prefixed args hex.

    The fingerprint is hex-decoded and length-checked before assembly. The
    output is lower-case throughout, whatever the casing of the input.
    """
    fingerprint = parse_hex(owner_fingerprint_hex)
    if len(fingerprint) != FINGERPRINT_LEN:
        raise FingerprintLengthError(len(fingerprint))
    args = LockArgs(mode=mode, owner_fingerprint=fingerprint, price_base=price_base, price_pow=price_pow)
    return args.to_hex()


def encode_amount_data(amount: int) -> str:
    """Cell data for a mode 0 offer: the amount as a 16-byte LE u128."""
    _check_uint("amount", amount, 64)
    return HEX_PREFIX + amount.to_bytes(AMOUNT_DATA_LEN, "little").hex()


def decode_amount_data(hex_text: str) -> int:
    raw = parse_hex(hex_text)
    if len(raw) != AMOUNT_DATA_LEN:
        raise LengthError(AMOUNT_DATA_LEN, len(raw))
    return int.from_bytes(raw, "little")


def field_breakdown(args: LockArgs) -> list[dict]:
    """Describe where each field lands in the encoded blob."""
    blob = pack_args(args)

    def segment(offset: int, length: int) -> str:
        return blob[offset:offset + length].hex()

    return [
        {"field": "mode", "offset": MODE_OFFSET, "length": MODE_LEN,
         "value": int(args.mode), "hex": segment(MODE_OFFSET, MODE_LEN)},
        {"field": "owner_fingerprint", "offset": FINGERPRINT_OFFSET, "length": FINGERPRINT_LEN,
         "value": args.fingerprint_hex, "hex": segment(FINGERPRINT_OFFSET, FINGERPRINT_LEN)},
        {"field": "price_base", "offset": PRICE_BASE_OFFSET, "length": U32_LEN,
         "value": args.price_base, "hex": segment(PRICE_BASE_OFFSET, U32_LEN)},
        {"field": "price_pow", "offset": PRICE_POW_OFFSET, "length": U32_LEN,
         "value": args.price_pow, "hex": segment(PRICE_POW_OFFSET, U32_LEN)},
    ]


def lock_script(args_hex: str) -> dict:
    """Lock script record for a cell guarded by the dex lock."""
    args = decode_args(args_hex)
    return {
        "code_hash": DEX_LOCK_CODE_HASH,
        "hash_type": DEX_LOCK_HASH_TYPE,
        "args": args.to_hex(),
    }
