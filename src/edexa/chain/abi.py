"""
ABI Loader - Contract interfaces shipped with the package, plus bytecode
from compiled artifacts for deployments.

Interfaces live in ``edexa/abi/*.json`` (plain ABI arrays).  Bytecode is not
shipped; it is read from an artifacts directory holding either flat
``<Name>.json`` files or the Foundry ``<Name>.sol/<Name>.json`` layout.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

_ABI_DIR = Path(__file__).resolve().parent.parent / "abi"


@lru_cache(maxsize=16)
def load_abi(contract_name: str) -> list[dict[str, Any]]:
    """
    Load the packaged ABI for a contract.

    Args:
        contract_name: Contract name (e.g., "ERC20", "EdexaResolver")

    Returns:
        ABI as a list of dicts

    Raises:
        FileNotFoundError: If no ABI ships under that name
    """
    abi_path = _ABI_DIR / f"{contract_name}.json"
    if not abi_path.exists():
        raise FileNotFoundError(f"ABI not found: {abi_path}")

    with abi_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    # Accept both bare ABI arrays and {"abi": [...]} artifacts
    if isinstance(data, dict):
        return data["abi"]
    return data


def _artifact_path(artifacts_dir: Path, artifact_name: str) -> Path:
    for candidate in (
        artifacts_dir / f"{artifact_name}.json",
        artifacts_dir / f"{artifact_name}.sol" / f"{artifact_name}.json",
    ):
        if candidate.exists():
            return candidate
    raise FileNotFoundError(
        f"Artifact not found for {artifact_name} in {artifacts_dir}. "
        f"Set EDEXA_ARTIFACTS_DIR to the directory holding compiled contracts."
    )


def load_bytecode(artifact_name: str, artifacts_dir: Optional[Path]) -> str:
    """
    Load deployment bytecode for a contract artifact.

    Args:
        artifact_name: Artifact name (e.g., "ERC20Mintable")
        artifacts_dir: Directory holding compiled artifacts

    Returns:
        Hex-encoded bytecode string (0x-prefixed)
    """
    if artifacts_dir is None:
        raise FileNotFoundError(
            f"No artifacts directory configured; cannot load bytecode for {artifact_name}."
        )

    path = _artifact_path(Path(artifacts_dir), artifact_name)
    with path.open("r", encoding="utf-8") as f:
        artifact = json.load(f)

    bytecode = artifact.get("bytecode", "")
    # Foundry nests the hex under bytecode.object
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object", "")
    if not bytecode:
        raise ValueError(f"No bytecode in artifact for {artifact_name}")

    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode
    return bytecode


def find_function(abi: list[dict[str, Any]], function_name: str) -> Optional[dict[str, Any]]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    return None


def find_constructor(abi: list[dict[str, Any]]) -> Optional[dict[str, Any]]:
    for entry in abi:
        if entry.get("type") == "constructor":
            return entry
    return None


def abi_type(param: dict[str, Any]) -> str:
    """Canonical ABI type string for a parameter, expanding tuples."""
    typ = param["type"]
    if typ.startswith("tuple"):
        inner = ",".join(abi_type(c) for c in param.get("components", []))
        return f"({inner}){typ[len('tuple'):]}"
    return typ


def function_signature(entry: dict[str, Any]) -> str:
    types = ",".join(abi_type(p) for p in entry.get("inputs", []))
    return f"{entry['name']}({types})"
