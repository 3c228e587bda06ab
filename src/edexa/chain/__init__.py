"""
Chain - On-chain interaction layer for the eDexa SDK.

Provides the JSON-RPC client, packaged ABIs, contract handles and
transaction utilities.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
