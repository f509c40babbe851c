"""Unit tests for registry file and migration script parsers."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from microsponsors_deployments.exceptions import (
    MigrationParseError,
    RegistryFileNotFoundError,
    RegistryFormatError,
)
from microsponsors_deployments.parsers import (
    parse_migration_script,
    parse_registry_entry,
    parse_registry_file,
    registry_document,
    write_registry_file,
)
from microsponsors_deployments.types import DeploymentRecord


class TestParseRegistryFile:
    """Test parsing of JSON registry files."""

    def test_parses_records_in_file_order(self, temp_registry_file: Path):
        """Test that entries are returned in authoring order."""
        records = parse_registry_file(temp_registry_file)

        assert [r.environment for r in records] == ["kovan-v2", "test", "latest"]

    def test_maps_entry_fields(self, temp_registry_file: Path):
        """Test that entry keys map onto record fields unmodified."""
        record = parse_registry_file(temp_registry_file)[0]

        assert record.token_name == "Microsponsors Time Slots"
        assert record.token_symbol == "MSPT"
        assert record.registry_address == "0xcac14f367a032c14563a5ade63e33f00fe0f4c89"
        assert record.network == "kovan"
        assert record.notes == "Kovan: Microsponsors Registry v0.2"
        assert record.contract == "Microsponsors"

    def test_optional_fields_default_to_none(self, temp_registry_file: Path):
        """Test that entries without network or notes leave them unset."""
        record = parse_registry_file(temp_registry_file)[1]

        assert record.network is None
        assert record.notes is None

    def test_accepts_string_path(self, temp_registry_file: Path):
        """Test that the file path can be given as a string."""
        assert len(parse_registry_file(str(temp_registry_file))) == 3

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing file raises RegistryFileNotFoundError."""
        with pytest.raises(RegistryFileNotFoundError):
            parse_registry_file(tmp_path / "does_not_exist.json")

    def test_invalid_json(self, tmp_path: Path):
        """Test that unparsable JSON raises RegistryFormatError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(RegistryFormatError):
            parse_registry_file(path)

    @pytest.mark.parametrize(
        "document",
        [[], {"deployments": {}}, {"contract": "Microsponsors"}],
    )
    def test_wrong_shape(self, tmp_path: Path, document: Any):
        """Test that documents without a deployments list are rejected."""
        path = tmp_path / "wrong.json"
        path.write_text(json.dumps(document))

        with pytest.raises(RegistryFormatError):
            parse_registry_file(path)

    def test_file_level_contract_applies_to_entries(self, tmp_path: Path):
        """Test that the top-level contract name is the default for entries."""
        path = tmp_path / "other.json"
        path.write_text(
            json.dumps(
                {
                    "contract": "MicrosponsorsV2",
                    "deployments": [
                        {
                            "environment": "x",
                            "name": "n",
                            "symbol": "s",
                            "registry_address": "0xcac14f367a032c14563a5ade63e33f00fe0f4c89",
                        }
                    ],
                }
            )
        )

        assert parse_registry_file(path)[0].contract == "MicrosponsorsV2"


class TestParseRegistryEntry:
    """Test parsing of single registry entries."""

    def test_missing_keys_are_listed(self):
        """Test that every missing required key is named."""
        with pytest.raises(RegistryFormatError) as exc_info:
            parse_registry_entry({"environment": "latest", "name": "Microsponsors Time Slots"})

        message = str(exc_info.value)
        assert "'latest'" in message
        assert "symbol" in message
        assert "registry_address" in message

    @pytest.mark.parametrize("environment", [["a"], {"a": 1}, None, 5, "", "   "])
    def test_environment_must_be_non_empty_string(self, environment: Any):
        """Test that non-string or blank environment labels are rejected."""
        entry = {
            "environment": environment,
            "name": "Microsponsors Time Slots",
            "symbol": "MSPT",
            "registry_address": "0xcac14f367a032c14563a5ade63e33f00fe0f4c89",
        }

        with pytest.raises(RegistryFormatError, match="environment"):
            parse_registry_entry(entry)

    def test_non_mapping_entry(self):
        """Test that a non-object entry is rejected."""
        with pytest.raises(RegistryFormatError):
            parse_registry_entry(["latest", "Microsponsors Time Slots"])

    def test_values_are_not_validated_here(self):
        """Test that malformed values are passed through for validation to report."""
        record = parse_registry_entry(
            {"environment": "bad", "name": "", "symbol": "", "registry_address": "0x12"}
        )

        assert record.token_name == ""
        assert record.registry_address == "0x12"


class TestWriteRegistryFile:
    """Test writing registry files."""

    def test_written_file_parses_back(self, tmp_path: Path, sample_registry_json: Dict[str, Any]):
        """Test that a written file reads back to the same records."""
        records = [parse_registry_entry(entry) for entry in sample_registry_json["deployments"]]
        path = write_registry_file(records, tmp_path / "nested" / "out.json")

        assert path.exists()
        assert parse_registry_file(path) == records

    def test_document_layout(self):
        """Test that the document carries the contract and ordered entries."""
        record = DeploymentRecord(
            environment="latest",
            token_name="Microsponsors Time Slots",
            token_symbol="MSPT",
            registry_address="0xb6A30fdc3e3f11b20af1670550083AA06eb0479A",
        )

        assert registry_document([record]) == {
            "contract": "Microsponsors",
            "deployments": [
                {
                    "environment": "latest",
                    "name": "Microsponsors Time Slots",
                    "symbol": "MSPT",
                    "registry_address": "0xb6A30fdc3e3f11b20af1670550083AA06eb0479A",
                }
            ],
        }


class TestParseMigrationScript:
    """Test extraction of constructor arguments from Truffle migrations."""

    def test_parses_multiline_deploy_call(self, migrations_dir: Path):
        """Test the commented, multi-line deploy call."""
        parsed = parse_migration_script(migrations_dir / "2_deploy_contracts.js")

        assert parsed["contract"] == "Microsponsors"
        assert parsed["name"] == "Microsponsors Time Slots"
        assert parsed["symbol"] == "MSPT"
        assert parsed["registry_address"] == "0xcac14f367a032c14563a5ade63e33f00fe0f4c89"

    def test_comment_before_address_becomes_notes(self, migrations_dir: Path):
        """Test that the own-line comment above the address is kept as notes."""
        parsed = parse_migration_script(migrations_dir / "2_deploy_contracts.js")

        assert parsed["notes"] == "Kovan: Microsponsors Registry v0.2"

    def test_single_quotes_and_block_comments(self, migrations_dir: Path):
        """Test that single-quoted literals parse and commented-out calls are ignored."""
        parsed = parse_migration_script(migrations_dir / "3_deploy_test_token.js")

        assert parsed["name"] == "Microsponsors Test Token"
        assert parsed["symbol"] == "MSTEST"
        assert parsed["registry_address"] == "0xb6A30fdc3e3f11b20af1670550083AA06eb0479A"
        assert "notes" not in parsed

    def test_other_contract_is_reported(self, migrations_dir: Path):
        """Test that the deployed contract name is returned as written."""
        parsed = parse_migration_script(migrations_dir / "4_deploy_other.js")

        assert parsed["contract"] == "Registry"

    def test_deploy_without_arguments(self, migrations_dir: Path):
        """Test that a deploy call without three string arguments is rejected."""
        with pytest.raises(MigrationParseError):
            parse_migration_script(migrations_dir / "1_initial_migration.js")

    def test_non_utf8_script(self, tmp_path: Path):
        """Test that an undecodable script raises MigrationParseError."""
        script = tmp_path / "5_deploy.js"
        script.write_bytes(b"deployer.deploy(Microsponsors, \"\xff\xfe\", \"MSPT\", \"0x\");\n")

        with pytest.raises(MigrationParseError, match="UTF-8"):
            parse_migration_script(script)

    def test_slashes_inside_strings_are_not_comments(self, tmp_path: Path):
        """Test that // inside a string literal is kept."""
        script = tmp_path / "5_deploy.js"
        script.write_text(
            'deployer.deploy(Microsponsors, "Slots // Kovan", "MSPT", '
            '"0xcac14f367a032c14563a5ade63e33f00fe0f4c89");\n'
        )

        assert parse_migration_script(script)["name"] == "Slots // Kovan"
