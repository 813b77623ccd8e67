"""Dex lock args helper - command line front end."""
from __future__ import annotations

import json
import math
from pathlib import Path

import click

from dexlock_core.args import (
    decode_args,
    encode_amount_data,
    encode_args,
    field_breakdown,
    lock_script,
)
from dexlock_core.errors import ArgsError
from dexlock_core.price import quote_price
from dexlock_core.protocol import DEX_LOCK_CELL_DEP, MAX_MODE, U32_MAX, U64_MAX
from dexlock_cli.batch import compile_batch

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False, "allow_nan": False}

AMOUNT = click.IntRange(0, U64_MAX)
U32 = click.IntRange(0, U32_MAX)
MODE = click.IntRange(0, MAX_MODE)


def _emit(obj: dict) -> None:
    click.echo(json.dumps(obj, **CANONICAL_JSON_KW))


def _fail(err: ArgsError) -> None:
    # Fail closed with a single-line report.
    _emit({"status": "FAIL", "error_count": 1, "errors": [err.to_dict()]})
    raise SystemExit(1)


def _price_report(mode: int, amount: int, price_base: int, price_pow: int) -> dict:
    report = quote_price(mode, amount, price_base, price_pow).to_dict()
    # inf and nan are not valid JSON numbers
    for key in ("total", "capacity"):
        if not math.isfinite(report[key]):
            report[key] = str(report[key])
    return report


@click.group()
def main():
    pass


@main.command("encode")
@click.argument("fingerprint")
@click.option("--mode", type=int, default=0, show_default=True, help="0 UDT, 1 restrict, 2 partial restrict")
@click.option("--price-base", type=U32, default=1, show_default=True)
@click.option("--price-pow", type=U32, default=0, show_default=True)
@click.option("--amount", type=AMOUNT, default=1, show_default=True, help="Token amount, mode 0 only")
def encode_cmd(fingerprint: str, mode: int, price_base: int, price_pow: int, amount: int):
    """Encode owner FINGERPRINT and price fields into lock args."""
    try:
        args_hex = encode_args(fingerprint, mode, price_base, price_pow)
        report = {
            "status": "PASS",
            "args": args_hex,
            "lock": lock_script(args_hex),
            "cell_dep": DEX_LOCK_CELL_DEP,
            "price": _price_report(mode, amount, price_base, price_pow),
        }
        if mode == 0:
            report["data"] = encode_amount_data(amount)
    except ArgsError as e:
        _fail(e)
    _emit(report)


@main.command("decode")
@click.argument("args_hex", metavar="ARGS")
@click.option("--amount", type=AMOUNT, default=1, show_default=True, help="Token amount, mode 0 only")
def decode_cmd(args_hex: str, amount: int):
    """Decode lock ARGS hex into its fields."""
    try:
        args = decode_args(args_hex)
        report = {
            "status": "PASS",
            "args": args.to_hex(),
            "mode": int(args.mode),
            "mode_description": args.mode.description,
            "owner_fingerprint": args.fingerprint_hex,
            "price_base": args.price_base,
            "price_pow": args.price_pow,
            "fields": field_breakdown(args),
            "price": _price_report(args.mode, amount, args.price_base, args.price_pow),
        }
    except ArgsError as e:
        _fail(e)
    _emit(report)


@main.command("price")
@click.option("--mode", type=MODE, default=0, show_default=True)
@click.option("--amount", type=AMOUNT, default=1, show_default=True)
@click.option("--price-base", type=U32, default=1, show_default=True)
@click.option("--price-pow", type=U32, default=0, show_default=True)
def price_cmd(mode: int, amount: int, price_base: int, price_pow: int):
    """Estimate the total price of an offer."""
    _emit({"status": "PASS", "price": _price_report(mode, amount, price_base, price_pow)})


@main.command("data")
@click.argument("amount", type=AMOUNT)
def data_cmd(amount: int):
    """Cell data carrying AMOUNT for a mode 0 offer."""
    _emit({"status": "PASS", "amount": amount, "data": encode_amount_data(amount)})


@main.command("batch")
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out_path", metavar="OUTPUT", type=click.Path(path_type=Path))
def batch_cmd(input_path: Path, out_path: Path):
    """Decode every args line of INPUT into an OUTPUT Parquet table."""
    stats = compile_batch(input_path, out_path)
    _emit({"status": "PASS", "output": str(out_path), **stats})


if __name__ == "__main__":
    main()
