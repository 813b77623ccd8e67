"""Batch decoding of args blobs into a Parquet table."""
from __future__ import annotations

from pathlib import Path
from warnings import warn

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from dexlock_core.args import decode_args
from dexlock_core.errors import ArgsError

COLUMNS = ["line", "args", "status", "mode", "owner_fingerprint", "price_base", "price_pow"]
INT_COLUMNS = ["mode", "price_base", "price_pow"]

BATCH_SCHEMA = pa.schema(
    [
        ("line", pa.int64()),
        ("args", pa.string()),
        ("status", pa.string()),
        ("mode", pa.int64()),
        ("owner_fingerprint", pa.string()),
        ("price_base", pa.int64()),
        ("price_pow", pa.int64()),
    ]
)


def decode_args_file(path: Path) -> pd.DataFrame:
    """Decode one args blob per line.

    Blank lines and ``#`` comments are skipped. Rejected blobs stay in the
    table with their error code as status and null fields.
    """
    rows: list[dict] = []
    text = Path(path).read_text(encoding="utf-8")

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        try:
            args = decode_args(line)
        except ArgsError as e:
            warn(f"Rejected args at line {lineno}: {e}")
            rows.append({"line": lineno, "args": line, "status": e.code})
            continue

        rows.append(
            {
                "line": lineno,
                "args": args.to_hex(),
                "status": "VERIFIED",
                "mode": int(args.mode),
                "owner_fingerprint": args.fingerprint_hex,
                "price_base": args.price_base,
                "price_pow": args.price_pow,
            }
        )

    df = pd.DataFrame(rows, columns=COLUMNS)
    for col in INT_COLUMNS:
        df[col] = df[col].astype("Int64")
    return df


def write_batch_table(df: pd.DataFrame, out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if df.empty:
        table = BATCH_SCHEMA.empty_table()
    else:
        table = pa.Table.from_pandas(df, schema=BATCH_SCHEMA, preserve_index=False)
    pq.write_table(table, out_path)


def compile_batch(input_path: Path, out_path: Path) -> dict:
    """Decode ``input_path`` and write the result table to ``out_path``."""
    df = decode_args_file(input_path)
    write_batch_table(df, out_path)
    verified = int((df["status"] == "VERIFIED").sum())
    return {
        "records": int(len(df)),
        "verified": verified,
        "rejected": int(len(df)) - verified,
    }
