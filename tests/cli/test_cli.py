"""Tests for the uxid command line."""

import json

import pytest
from typer.testing import CliRunner

import uxid
from uxid.cli import app

runner = CliRunner()


class TestGenerateCommand:
    """Tests for `uxid generate`."""

    def test_default(self):
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0
        value = result.stdout.strip()
        assert uxid.decode(value).prefix is None
        assert len(value) == 26

    def test_options(self):
        result = runner.invoke(app, ["generate", "--prefix", "usr", "--size", "xs", "--time", "0"])
        assert result.exit_code == 0
        value = result.stdout.strip()
        assert value.startswith("usr_0000000000")
        assert len(value) == len("usr_") + 10 + 4

    def test_count(self):
        result = runner.invoke(app, ["generate", "-n", "5", "--rand-size", "8"])
        assert result.exit_code == 0
        values = result.stdout.split()
        assert len(values) == 5
        assert len(set(values)) == 5

    def test_invalid_options(self):
        result = runner.invoke(app, ["generate", "--size", "xs", "--rand-size", "9"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_count(self):
        result = runner.invoke(app, ["generate", "--count", "0"])
        assert result.exit_code != 0

    @pytest.mark.parametrize("prefix", ["a[b]c", "x[/red]", "[bold]"])
    def test_bracketed_prefix_is_printed_verbatim(self, prefix):
        result = runner.invoke(app, ["generate", "--prefix", prefix, "--time", "0"])
        assert result.exit_code == 0
        value = result.stdout.strip()
        assert value.startswith(f"{prefix}_0000000000")
        assert uxid.decode(value).prefix == prefix


class TestDecodeCommand:
    """Tests for `uxid decode`."""

    def test_json(self):
        value = uxid.generate(prefix="multi_word_prefix", time=3_000_000_000_000)
        result = runner.invoke(app, ["decode", value, "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["prefix"] == "multi_word_prefix"
        assert data["time"] == 3_000_000_000_000
        assert data["datetime"] == "2065-01-24T05:20:00+00:00"
        assert data["string"] == value
        assert data["rand"] == "decode_not_supported"
        assert data["rand_size"] == "decode_not_supported"
        assert data["size"] == "decode_not_supported"

    def test_out_of_range_datetime(self):
        result = runner.invoke(app, ["decode", "7ZZZZZZZZZ", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["time"] == 2**48 - 1
        assert data["datetime"] is None

    def test_table(self):
        result = runner.invoke(app, ["decode", "usr_0000000000ZZZG"])
        assert result.exit_code == 0
        assert "usr" in result.stdout
        assert "decode_not_supported" in result.stdout

    @pytest.mark.parametrize("prefix", ["a[b]c", "x[/red]"])
    def test_table_with_bracketed_prefix(self, prefix):
        value = f"{prefix}_0000000000ZZ"
        result = runner.invoke(app, ["decode", value])
        assert result.exit_code == 0
        assert value in result.stdout

    def test_invalid(self):
        result = runner.invoke(app, ["decode", "pre_0123"])
        assert result.exit_code == 1
        assert "too short" in result.output
