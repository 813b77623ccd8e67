import json
import os
import subprocess
import sys
from pathlib import Path

from click.testing import CliRunner

from dexlock_cli.cli import main
from dexlock_core.protocol import DEX_LOCK_CODE_HASH

OWNER = "0x331397f34ece2aea6d4b692ab340dcd1a02f6a64ccbee4c3613ada390dc4714f"


def run(args):
    repo = Path(__file__).resolve().parents[1]
    env = dict(os.environ, PYTHONPATH=str(repo / "src"))
    return subprocess.run(
        [sys.executable, "-m", "dexlock_cli.cli", *args],
        cwd=repo, env=env, check=False, capture_output=True, text=True,
    )


def test_encode_then_decode_via_module():
    r = run(["encode", OWNER, "--mode", "1", "--price-base", "5", "--price-pow", "2"])
    assert r.returncode == 0, r.stderr + r.stdout
    out = json.loads(r.stdout)
    assert out["status"] == "PASS"
    assert out["lock"]["code_hash"] == DEX_LOCK_CODE_HASH
    assert out["price"]["total"] == 500.0
    assert "data" not in out

    r = run(["decode", out["args"]])
    assert r.returncode == 0, r.stderr + r.stdout
    dec = json.loads(r.stdout)
    assert dec["mode"] == 1
    assert dec["owner_fingerprint"] == OWNER
    assert (dec["price_base"], dec["price_pow"]) == (5, 2)


def test_decode_failure_exits_nonzero():
    r = run(["decode", "0x" + "00" * 41])
    assert r.returncode == 1
    out = json.loads(r.stdout)
    assert out["status"] == "FAIL"
    assert out["errors"][0]["code"] == "E_ARGS_LEN"
    assert out["errors"][0]["actual"] == 41


def test_encode_mode_zero_includes_data():
    result = CliRunner().invoke(main, ["encode", OWNER, "--amount", "100"])
    assert result.exit_code == 0, result.output
    out = json.loads(result.output)
    assert out["data"] == "0x64" + "00" * 15
    assert out["price"]["below_minimum"] is True
    assert out["cell_dep"]["dep_type"] == "code"


def test_encode_short_fingerprint():
    result = CliRunner().invoke(main, ["encode", "0x" + "ab" * 31])
    assert result.exit_code == 1
    assert json.loads(result.output)["errors"][0]["code"] == "E_FINGERPRINT_LEN"


def test_decode_mode_out_of_range():
    result = CliRunner().invoke(main, ["decode", "0300" + "00" * 40])
    assert result.exit_code == 1
    err = json.loads(result.output)["errors"][0]
    assert err["code"] == "E_MODE_RANGE"
    assert err["value"] == 3


def test_price_and_data_commands():
    result = CliRunner().invoke(main, ["price", "--mode", "2", "--price-base", "5", "--price-pow", "2"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["price"]["total"] == 500.0

    result = CliRunner().invoke(main, ["data", "1"])
    assert json.loads(result.output)["data"] == "0x01" + "00" * 15


def test_price_rejects_out_of_range_options():
    runner = CliRunner()
    for opts in (["--amount", "1" + "0" * 400], ["--amount", "-5"], ["--price-base", "-3"],
                 ["--price-pow", str(1 << 32)], ["--mode", "3"]):
        result = runner.invoke(main, ["price", *opts])
        assert result.exit_code == 2, (opts, result.output)
        assert "Invalid value" in result.output

    result = runner.invoke(main, ["encode", OWNER, "--amount", str(1 << 64)])
    assert result.exit_code == 2


def test_infinite_total_is_valid_json():
    result = CliRunner().invoke(main, ["price", "--mode", "1", "--price-pow", "400"])
    assert result.exit_code == 0, result.output
    assert "Infinity" not in result.output
    price = json.loads(result.output)["price"]
    assert price["total"] == "inf"
    assert price["capacity"] == "inf"
