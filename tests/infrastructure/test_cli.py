"""End-to-end tests for the ``catalog product`` commands."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli
from catalog.infrastructure.cli.product_commands import STORE_FAULT_EXIT_CODE


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(
            cli,
            ["--data-dir", str(tmp_path), "product", *args],
            env={"CATALOG_SEED_ON_INIT": "true", "CATALOG_LOG_LEVEL": "WARNING"},
        )

    return _run


class TestReadCommands:

    def test_list_shows_seed_catalog(self, run):
        result = run("list")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line.split()[1] for line in lines[2:]] == ["Keyboard", "Laptop", "Mouse"]

    def test_list_json(self, run):
        result = run("list", "--json")
        payload = json.loads(result.output)
        assert [p["id"] for p in payload] == [3, 1, 2]
        assert payload[1]["price"] == "25000.00"

    def test_show(self, run):
        result = run("show", "--id", "2")
        assert result.exit_code == 0
        assert "Name:        Mouse" in result.output

    def test_show_unknown_id(self, run):
        result = run("show", "--id", "9")
        assert result.exit_code == 1
        assert "Product #9 not found" in result.output

    def test_search(self, run):
        result = run("search", "top", "--json")
        assert [p["name"] for p in json.loads(result.output)] == ["Laptop"]

    def test_search_blank_term(self, run):
        result = run("search", "  ")
        assert result.exit_code == 1
        assert "Search term cannot be empty" in result.output


class TestWriteCommands:

    def test_add_then_duplicate(self, run):
        first = run("add", "--name", "Monitor", "--price", "3000", "--stock", "5", "--json")
        assert first.exit_code == 0
        created = json.loads(first.output)
        assert created["id"] == 4
        assert created["is_active"] is True
        assert created["created_date"]

        second = run("add", "--name", "Monitor", "--price", "3000", "--stock", "5")
        assert second.exit_code == 1
        assert "already exists" in second.output

    def test_add_rejects_negative_price(self, run):
        result = run("add", "--name", "Monitor", "--price", "-1", "--stock", "5")
        assert result.exit_code == 2

    def test_update_partial(self, run):
        result = run("update", "--id", "1", "--stock", "5", "--description", "", "--json")
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["stock"] == 5
        assert payload["description"] == ""
        assert payload["name"] == "Laptop"

    def test_update_blank_name_ignored(self, run):
        payload = json.loads(run("update", "--id", "1", "--name", "", "--json").output)
        assert payload["name"] == "Laptop"

    def test_clear_description(self, run):
        payload = json.loads(run("update", "--id", "2", "--clear-description", "--json").output)
        assert payload["description"] is None

    def test_delete_is_idempotent_and_hides_product(self, run):
        assert run("delete", "--id", "3").exit_code == 0
        assert run("delete", "--id", "3").exit_code == 0
        assert run("show", "--id", "3").exit_code == 1
        assert run("update", "--id", "3", "--stock", "1").exit_code == 1

    def test_delete_unknown_id(self, run):
        result = run("delete", "--id", "12")
        assert result.exit_code == 1
        assert "Product #12 not found" in result.output


class TestStoreFaults:

    def test_corrupt_store_exits_with_fault_code(self, tmp_path, run):
        (tmp_path / "products.json").write_text("garbage", encoding="utf-8")
        result = run("list")
        assert result.exit_code == STORE_FAULT_EXIT_CODE
        assert "record store unavailable" in result.output

    def test_wrong_file_shape_exits_with_fault_code(self, tmp_path, run):
        (tmp_path / "products.json").write_text("{}", encoding="utf-8")
        result = run("add", "--name", "Monitor", "--price", "3000", "--stock", "5")
        assert result.exit_code == STORE_FAULT_EXIT_CODE
        assert "record store unavailable" in result.output
