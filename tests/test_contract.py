"""Tests for contract handles, ABI helpers and transaction building."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from eth_abi import decode
from eth_account import Account

from edexa.chain.abi import abi_type, function_signature, load_abi, load_bytecode
from edexa.chain.contract import ContractHandle, decode_result
from edexa.chain.rpc import keccak256
from edexa.chain.tx import contract_address_for, encode_call, to_checksum_address
from edexa.errors import ContractError, RpcError
from edexa.wallet import create_wallet_signer

if TYPE_CHECKING:
    from conftest import FakeNode

TOKEN = "0x884aed749F7e58eDcA48F1953BFe23C8dbAC4e15"
HOLDER = "0xf6e234c71f1bb45aba51c977137ef090b2df2fe5"


class TestAbiHelpers:
    def test_tuple_type_expansion(self) -> None:
        entry = load_abi("DomainRegistry")[0]
        assert abi_type(entry["outputs"][0]) == "(address,address,uint256)"

    def test_function_signature(self) -> None:
        entry = [e for e in load_abi("ERC1155") if e.get("name") == "mintBatch"][0]
        assert function_signature(entry) == "mintBatch(address,uint256[],uint256[],bytes)"

    def test_transfer_selector(self) -> None:
        calldata = encode_call(load_abi("ERC20"), "transfer", [HOLDER, 1])
        assert calldata.startswith("0xa9059cbb")

    def test_unknown_function(self) -> None:
        with pytest.raises(ContractError, match="not found"):
            encode_call(load_abi("ERC20"), "frobnicate", [])

    def test_missing_abi(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_abi("NoSuchContract")


class TestChecksum:
    def test_known_vector(self) -> None:
        # EIP-55 reference vector
        assert to_checksum_address("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed") == (
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
        )

    def test_create_address_vector(self) -> None:
        sender = "0x6ac7ea33f8831ea9dcc53393aaa88b25a785dbf0"
        assert contract_address_for(sender, 0).lower() == "0xcd234a471b72ba2f1ccf0a70fcaba648a5eecd8d"
        assert contract_address_for(sender, 1).lower() == "0x343c43a37d37dff08ae8c4a11544c718abb4fcf8"


class TestBytecode:
    def test_flat_artifact(self, tmp_path: Path) -> None:
        (tmp_path / "Token.json").write_text(json.dumps({"abi": [], "bytecode": "6080"}))
        assert load_bytecode("Token", tmp_path) == "0x6080"

    def test_foundry_artifact(self, tmp_path: Path) -> None:
        out = tmp_path / "Token.sol"
        out.mkdir()
        (out / "Token.json").write_text(json.dumps({"abi": [], "bytecode": {"object": "0x6080"}}))
        assert load_bytecode("Token", tmp_path) == "0x6080"

    def test_missing_artifact(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="EDEXA_ARTIFACTS_DIR"):
            load_bytecode("Token", tmp_path)

    def test_no_artifacts_dir(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_bytecode("Token", None)


class TestContractHandle:
    def test_view_call(self, node: FakeNode) -> None:
        node.register(TOKEN, "ERC20", "balanceOf", lambda account: 1234)
        handle = ContractHandle(TOKEN, load_abi("ERC20"), node.rpc())
        assert asyncio.run(handle.balanceOf(HOLDER)) == 1234
        assert node.calls("eth_sendRawTransaction") == []

    def test_decimal_string_arguments(self, node: FakeNode) -> None:
        seen = []
        node.register(TOKEN, "ERC1155", "balanceOf", lambda account, token_id: seen.append(token_id) or 5)
        handle = ContractHandle(TOKEN, load_abi("ERC1155"), node.rpc())
        assert asyncio.run(handle.balanceOf(HOLDER, "42")) == 5
        assert seen == [42]

    def test_struct_output_is_dict(self, node: FakeNode) -> None:
        node.register(TOKEN, "DomainRegistry", "getDomainInfo", lambda name: (HOLDER, HOLDER, 9))
        handle = ContractHandle(TOKEN, load_abi("DomainRegistry"), node.rpc())
        info = asyncio.run(handle.getDomainInfo("x.edx"))
        assert info["resolver"].lower() == HOLDER
        assert info["expiry"] == 9

    def test_empty_result_decodes_to_none(self) -> None:
        entry = load_abi("EdexaResolver")[0]
        assert decode_result(entry, "0x") is None

    def test_unknown_attribute(self, node: FakeNode) -> None:
        handle = ContractHandle(TOKEN, load_abi("ERC20"), node.rpc())
        with pytest.raises(AttributeError):
            handle.frobnicate

    def test_wrong_argument_count(self, node: FakeNode) -> None:
        handle = ContractHandle(TOKEN, load_abi("ERC20"), node.rpc())
        with pytest.raises(ContractError, match="expects 1 argument"):
            asyncio.run(handle.balanceOf())

    def test_write_without_signer(self, node: FakeNode) -> None:
        handle = ContractHandle(TOKEN, load_abi("ERC20"), node.rpc())
        with pytest.raises(ContractError, match="needs a signer"):
            asyncio.run(handle.transfer(HOLDER, 1))
        assert node.requests == []

    def test_rpc_error_passes_through(self, node: FakeNode) -> None:
        node.error = {"code": 3, "message": "execution reverted: Ownable: caller is not the owner"}
        handle = ContractHandle(TOKEN, load_abi("ERC20"), node.rpc())
        with pytest.raises(RpcError, match="Ownable: caller is not the owner") as excinfo:
            asyncio.run(handle.owner())
        assert excinfo.value.code == 3

    def test_signed_write(self, node: FakeNode, wallet: tuple[str, str]) -> None:
        private_key, address = wallet
        signer = create_wallet_signer(private_key, node.rpc(), chain_id=1995)
        handle = ContractHandle(TOKEN, load_abi("ERC20"), node.rpc(), signer=signer, gas_limit=90_000)

        tx_hash = asyncio.run(handle.transfer(HOLDER, 250))

        raw = node.sent[0]
        assert tx_hash == "0x" + keccak256(bytes.fromhex(raw[2:])).hex()
        assert Account.recover_transaction(raw) == address

        tx = node.decode_sent()
        assert tx["to"] == TOKEN.lower()
        assert tx["nonce"] == node.nonce
        assert tx["gas"] == 90_000
        assert tx["gasPrice"] == node.gas_price
        assert tx["data"].startswith("0xa9059cbb")
        to, amount = decode(["address", "uint256"], bytes.fromhex(tx["data"][10:]))
        assert to.lower() == HOLDER
        assert amount == 250
