import json

import pyarrow as pa
import pyarrow.parquet as pq
import pytest
from click.testing import CliRunner

from dexlock_cli.batch import compile_batch, decode_args_file
from dexlock_cli.cli import main
from dexlock_core import encode_args

OWNER = "331397f34ece2aea6d4b692ab340dcd1a02f6a64ccbee4c3613ada390dc4714f"


def _write_input(path):
    lines = [
        "# offers",
        encode_args(OWNER, 0, 1, 0),
        "",
        encode_args(OWNER, 2, 42, 3)[2:].upper(),
        "0x0300" + "00" * 40,
        "0xdead",
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_decode_args_file(tmp_path):
    src = tmp_path / "args.txt"
    _write_input(src)

    with pytest.warns(UserWarning):
        df = decode_args_file(src)

    assert list(df["line"]) == [2, 4, 5, 6]
    assert list(df["status"]) == ["VERIFIED", "VERIFIED", "E_MODE_RANGE", "E_ARGS_LEN"]
    assert df["args"][1] == encode_args(OWNER, 2, 42, 3)
    assert df["price_base"][1] == 42
    assert df["mode"].isna().tolist() == [False, False, True, True]


def test_compile_batch_writes_parquet(tmp_path):
    src = tmp_path / "args.txt"
    out = tmp_path / "out" / "args.parquet"
    _write_input(src)

    with pytest.warns(UserWarning):
        stats = compile_batch(src, out)

    assert stats == {"records": 4, "verified": 2, "rejected": 2}
    table = pq.read_table(out)
    assert table.num_rows == 4
    assert table.schema.field("price_pow").type == pa.int64()
    assert table.column("owner_fingerprint").to_pylist()[0] == "0x" + OWNER
    assert table.column("mode").to_pylist() == [0, 2, None, None]


def test_batch_command(tmp_path):
    src = tmp_path / "args.txt"
    src.write_text(encode_args(OWNER, 1, 5, 2) + "\n", encoding="utf-8")
    out = tmp_path / "args.parquet"

    result = CliRunner().invoke(main, ["batch", str(src), str(out)])
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["records"] == 1 and report["verified"] == 1
    assert out.exists()


def test_comments_only_input_writes_empty_table(tmp_path):
    src = tmp_path / "args.txt"
    src.write_text("# nothing\n\n", encoding="utf-8")
    out = tmp_path / "empty.parquet"

    result = CliRunner().invoke(main, ["batch", str(src), str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["records"] == 0
    assert out.exists()
    table = pq.read_table(out)
    assert table.num_rows == 0
    assert table.schema.names == ["line", "args", "status", "mode", "owner_fingerprint", "price_base", "price_pow"]
