"""Dex lock protocol constants.

Single source of truth for the lock args layout and deployment values.
Keep this file stable. Encoder and decoder must remain synchronized.
"""

HEX_PREFIX = "0x"

# Args: [Mode(2) | OwnerFingerprint(32) | PriceBase(4) | PricePow(4)] = 42 bytes
ARGS_FMT = "<H32sII"
ARGS_LEN = 42

MODE_OFFSET = 0
FINGERPRINT_OFFSET = 2
PRICE_BASE_OFFSET = 34
PRICE_POW_OFFSET = 38

MODE_FMT = "<H"
MODE_LEN = 2
FINGERPRINT_LEN = 32
U32_LEN = 4

# Mode 0 cells carry the token amount as a 16-byte little-endian u128
AMOUNT_DATA_LEN = 16

MAX_MODE = 2
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

# Pricing
SHANNONS_PER_UNIT = 10 ** 8  # mode 0 amounts are in 8-decimal smallest units
CAPACITY_DIVISOR = 10_000_000
MIN_TOTAL_PRICE = 1.0

# Deployed dex lock script
DEX_LOCK_CODE_HASH = "0x10d0d91b09a3ff3d6db5c6fc0dad9ba73b9a8d2d33a63b5a8f08224521d6db22"
DEX_LOCK_HASH_TYPE = "type"
DEX_LOCK_TX_HASH = "0x3884356c08232eefd183fb7673937d778054ec2c7508e3f8273b6d1f4a23b12f"
DEX_LOCK_CELL_DEP = {
    "out_point": {"tx_hash": DEX_LOCK_TX_HASH, "index": "0x0"},
    "dep_type": "code",
}
