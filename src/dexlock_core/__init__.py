"""Dex lock core - args codec and price estimate."""
from .args import (
    LockArgs,
    Mode,
    decode_amount_data,
    decode_args,
    encode_amount_data,
    encode_args,
    field_breakdown,
    lock_script,
    pack_args,
    parse_hex,
    strip_hex_prefix,
    unpack_args,
)
from .errors import (
    ERRORS,
    ArgsError,
    FieldRangeError,
    FingerprintLengthError,
    HexDecodeError,
    LengthError,
    ModeOutOfRange,
)
from .price import PriceQuote, capacity_units, compute_total_price, quote_price

__all__ = [
    "LockArgs", "Mode", "decode_args", "encode_args", "pack_args", "unpack_args",
    "parse_hex", "strip_hex_prefix", "encode_amount_data", "decode_amount_data",
    "field_breakdown", "lock_script",
    "ERRORS", "ArgsError", "HexDecodeError", "LengthError", "ModeOutOfRange",
    "FingerprintLengthError", "FieldRangeError",
    "PriceQuote", "compute_total_price", "capacity_units", "quote_price",
]
