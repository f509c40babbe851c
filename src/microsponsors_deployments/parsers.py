"""Registry file and migration script parsers for microsponsors-deployments library."""

import json
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .constants import CONTRACT_NAME
from .exceptions import MigrationParseError, RegistryFileNotFoundError, RegistryFormatError
from .types import DeploymentRecord

_REQUIRED_ENTRY_KEYS = ("environment", "name", "symbol", "registry_address")

_STRING = r"\"(?:\\.|[^\"\\\n])*\"|'(?:\\.|[^'\\\n])*'"

# Strings are matched first so that "//" inside a literal is not a comment
_STRING_OR_COMMENT = re.compile(rf"({_STRING})|(//[^\n]*|/\*.*?\*/)", re.DOTALL)

_DEPLOY_CALL = re.compile(
    r"deployer\s*\.\s*deploy\s*\(\s*(?P<contract>[A-Za-z_$][\w$]*)\s*"
    rf"(?P<args>(?:,\s*(?:{_STRING})\s*){{3}}),?\s*\)"
)

_LITERAL = re.compile(_STRING)


def parse_registry_entry(entry: Any, default_contract: str = CONTRACT_NAME) -> DeploymentRecord:
    """
    Build a record from one registry file entry.

    Field values are taken as-is; format checks belong to validation.

    Args:
        entry: Mapping with environment, name, symbol, registry_address
        default_contract: Contract name used when the entry has none

    Returns:
        DeploymentRecord

    Raises:
        RegistryFormatError: If the entry is not a mapping, lacks a required key,
            or its environment label is not a non-empty string
    """
    if not isinstance(entry, dict):
        raise RegistryFormatError(f"Deployment entry must be an object, got {entry!r}")

    missing = [key for key in _REQUIRED_ENTRY_KEYS if key not in entry]
    if missing:
        label = entry.get("environment", "<unnamed>")
        raise RegistryFormatError(
            f"Deployment entry '{label}' is missing required keys: {', '.join(missing)}"
        )

    environment = entry["environment"]
    if not isinstance(environment, str) or not environment.strip():
        raise RegistryFormatError(
            f"Deployment entry environment must be a non-empty string, got {environment!r}"
        )

    return DeploymentRecord(
        environment=environment,
        token_name=entry["name"],
        token_symbol=entry["symbol"],
        registry_address=entry["registry_address"],
        network=entry.get("network"),
        contract=entry.get("contract", default_contract),
        notes=entry.get("notes"),
    )


def parse_registry_file(file_path: Union[Path, str]) -> List[DeploymentRecord]:
    """
    Parse a JSON registry file.

    Args:
        file_path: Path to registry file

    Returns:
        Records in file order

    Raises:
        RegistryFileNotFoundError: If the file does not exist
        RegistryFormatError: If the file is not valid JSON or has the wrong shape
    """
    file_path = Path(file_path)
    try:
        with open(file_path) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise RegistryFileNotFoundError(f"Registry file not found at {file_path}") from e
    except json.JSONDecodeError as e:
        raise RegistryFormatError(f"Registry file {file_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("deployments"), list):
        raise RegistryFormatError(
            f"Registry file {file_path} must be an object with a 'deployments' list"
        )

    default_contract = data.get("contract", CONTRACT_NAME)
    return [parse_registry_entry(entry, default_contract) for entry in data["deployments"]]


def registry_document(records: Iterable[DeploymentRecord]) -> Dict[str, Any]:
    """
    Build the registry file document for a set of records.

    Args:
        records: Records in authoring order

    Returns:
        JSON-serializable registry document
    """
    return {
        "contract": CONTRACT_NAME,
        "deployments": [record.to_dict() for record in records],
    }


def write_registry_file(records: Iterable[DeploymentRecord], file_path: Union[Path, str]) -> Path:
    """
    Write records as a JSON registry file.

    Creates parent directories if they don't exist.

    Args:
        records: Records in authoring order
        file_path: Destination path

    Returns:
        Path written
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w") as f:
        json.dump(registry_document(records), f, indent=2)
        f.write("\n")
    return file_path


def _blank_comments(source: str) -> str:
    """Replace comments with spaces, keeping offsets and newlines intact."""

    def replace(match: re.Match) -> str:
        if match.group(1) is not None:
            return match.group(0)
        return re.sub(r"[^\n]", " ", match.group(0))

    return _STRING_OR_COMMENT.sub(replace, source)


def _unquote(literal: str) -> str:
    return re.sub(r"\\(.)", r"\1", literal[1:-1])


def _address_note(comment_text: str) -> str:
    lines = [line.strip().strip("/*").strip() for line in comment_text.splitlines()]
    note = " ".join(line for line in lines if line)
    return re.sub(r"\s*address:?$", "", note, flags=re.IGNORECASE)


def parse_migration_script(file_path: Union[Path, str]) -> Dict[str, Any]:
    """
    Extract constructor arguments from a Truffle migration script.

    Looks for a call of the form
    ``deployer.deploy(Contract, "name", "symbol", "0x...")``.
    Comments are ignored, except that a line comment placed just before the
    address literal is kept as the record's notes.

    Args:
        file_path: Path to migration .js file

    Returns:
        Dictionary with contract, name, symbol, registry_address and,
        when present, notes

    Raises:
        MigrationParseError: If the script is not UTF-8 or has no matching deploy call
    """
    file_path = Path(file_path)
    try:
        source = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MigrationParseError(f"Migration script {file_path} is not valid UTF-8: {e}") from e
    blanked = _blank_comments(source)

    match = _DEPLOY_CALL.search(blanked)
    if match is None:
        raise MigrationParseError(f"No deployer.deploy(...) call found in {file_path}")

    args_start = match.start("args")
    literals = list(_LITERAL.finditer(blanked, args_start, match.end("args")))
    name, symbol, address = (_unquote(m.group(0)) for m in literals)

    result: Dict[str, Any] = {
        "contract": match.group("contract"),
        "name": name,
        "symbol": symbol,
        "registry_address": address,
    }

    # Own-line comments between the symbol and the address literals
    between = source[literals[1].end():literals[2].start()]
    between = between.split("\n", 1)[1] if "\n" in between else ""
    comments = "\n".join(m.group(2) for m in _STRING_OR_COMMENT.finditer(between) if m.group(2))
    if comments:
        note = _address_note(comments)
        if note:
            result["notes"] = note

    return result
