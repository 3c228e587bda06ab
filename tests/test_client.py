"""Tests for EdexaClient: signers, deployments and configuration."""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from eth_abi import decode

from edexa.chain.tx import contract_address_for
from edexa.client import EdexaClient
from edexa.config import DEFAULT_RESOLVER_ADDRESS, DEFAULT_RPC_URL, DEFAULT_TLD, EdexaConfig, load_config
from edexa.errors import InvalidKeyError, MissingValueError
from edexa.tokens import ERC20, ERC721, ERC1155, StableCoin

if TYPE_CHECKING:
    from conftest import FakeNode

BYTECODE = "0x6080604052"


@pytest.fixture()
def artifacts(tmp_path: Path) -> Path:
    for name in ("ERC20Mintable", "ERC20FixedSupply", "ERC721Token", "ERC1155Token", "StableCoin"):
        (tmp_path / f"{name}.json").write_text(json.dumps({"abi": [], "bytecode": BYTECODE}))
    return tmp_path


@pytest.fixture()
def client(node: FakeNode, config: EdexaConfig, artifacts: Path) -> EdexaClient:
    return EdexaClient(config.replace(artifacts_dir=artifacts), node.rpc())


class TestInstances:
    def test_facade_types(self, client: EdexaClient) -> None:
        address = "0x884aed749F7e58eDcA48F1953BFe23C8dbAC4e15"
        assert isinstance(client.get_erc20_instance(address), ERC20)
        assert isinstance(client.get_erc721_instance(address), ERC721)
        assert isinstance(client.get_erc1155_instance(address), ERC1155)
        assert isinstance(client.get_stable_coin_instance(address), StableCoin)

    def test_instances_share_resolver(self, client: EdexaClient) -> None:
        erc20 = client.get_erc20_instance("0x884aed749F7e58eDcA48F1953BFe23C8dbAC4e15")
        assert erc20.resolver is client.resolver
        assert erc20.rpc is client.rpc

    def test_rpc_override(self, client: EdexaClient) -> None:
        erc20 = client.get_erc20_instance(
            "0x884aed749F7e58eDcA48F1953BFe23C8dbAC4e15", "http://other-node.test"
        )
        assert erc20.rpc.rpc_url == "http://other-node.test"

    def test_signer_errors(self, client: EdexaClient) -> None:
        with pytest.raises(InvalidKeyError, match="invalid hexlify value"):
            client.create_wallet_signer("")
        with pytest.raises(MissingValueError, match="Cannot read properties of undefined"):
            client.create_wallet_signer(None)


class TestDeployments:
    def _constructor_args(self, node: FakeNode, types: list[str]) -> tuple:
        data = node.decode_sent()["data"]
        assert data.startswith(BYTECODE)
        return decode(types, bytes.fromhex(data[len(BYTECODE):]))

    def test_erc20_without_supply(
        self, client: EdexaClient, node: FakeNode, wallet: tuple[str, str]
    ) -> None:
        signer = client.create_wallet_signer(wallet[0])
        deployment = asyncio.run(client.create_contract_erc20("gautam", "gau", signer))

        assert deployment.contract_address == contract_address_for(wallet[1], node.nonce)
        assert node.decode_sent()["to"] is None
        assert self._constructor_args(node, ["string", "string", "uint256"]) == ("gautam", "gau", 0)

    def test_erc20_with_supply(
        self, client: EdexaClient, node: FakeNode, wallet: tuple[str, str], artifacts: Path
    ) -> None:
        (artifacts / "ERC20FixedSupply.json").write_text(json.dumps({"bytecode": BYTECODE}))
        signer = client.create_wallet_signer(wallet[0])
        asyncio.run(client.create_contract_erc20("gautam", "gau", signer, supply=1000))
        assert self._constructor_args(node, ["string", "string", "uint256"]) == ("gautam", "gau", 1000)

    def test_erc1155(self, client: EdexaClient, node: FakeNode, wallet: tuple[str, str]) -> None:
        signer = client.create_wallet_signer(wallet[0])
        deployment = asyncio.run(client.create_contract_erc1155("ipfs://{id}", signer))
        assert deployment.tx_hash.startswith("0x")
        assert node.decode_sent()["gas"] == client.config.deploy_gas_limit
        assert self._constructor_args(node, ["string"]) == ("ipfs://{id}",)

    def test_missing_artifacts_dir(self, node: FakeNode, config: EdexaConfig, wallet: tuple[str, str]) -> None:
        client = EdexaClient(config, node.rpc())
        signer = client.create_wallet_signer(wallet[0])
        with pytest.raises(FileNotFoundError):
            asyncio.run(client.create_contract_erc721("gautam", "gau", signer))
        assert node.sent == []


class TestConfig:
    def test_defaults(self) -> None:
        config = EdexaConfig()
        assert config.rpc_url == DEFAULT_RPC_URL
        assert config.resolver_address == DEFAULT_RESOLVER_ADDRESS
        assert config.tld == DEFAULT_TLD
        assert config.min_label_length == 4
        assert config.reverse_suffix == "addr.reverse"

    def test_replace_returns_copy(self) -> None:
        config = EdexaConfig()
        other = config.replace(tld=".dex")
        assert other.tld == ".dex"
        assert config.tld == DEFAULT_TLD

    def test_load_from_environment(self, tmp_path: Path) -> None:
        env = {
            "EDEXA_RPC_URL": "http://localhost:8545",
            "EDEXA_CHAIN_ID": "0x7cb",
            "EDEXA_TLD": ".test",
            "EDEXA_ARTIFACTS_DIR": str(tmp_path),
        }
        with patch.dict(os.environ, env):
            config = load_config(tmp_path / "missing.env")
        assert config.rpc_url == "http://localhost:8545"
        assert config.chain_id == 1995
        assert config.tld == ".test"
        assert config.artifacts_dir == tmp_path

    def test_load_from_env_file(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text("EDEXA_RESOLVER_ADDRESS=0x0000000000000000000000000000000000000001\n")
        env = {k: v for k, v in os.environ.items() if not k.startswith("EDEXA_")}
        with patch.dict(os.environ, env, clear=True):
            config = load_config(env_path)
        assert config.resolver_address == "0x0000000000000000000000000000000000000001"

    def test_bad_chain_id(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"EDEXA_CHAIN_ID": "edexa"}):
            with pytest.raises(ValueError, match="EDEXA_CHAIN_ID"):
                load_config(tmp_path / "missing.env")
