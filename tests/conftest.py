"""
Shared fixtures
"""

import json

import pytest
from loguru import logger

# Hardhat / Anvil default account #0
HARDHAT_PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'
HARDHAT_ADDRESS = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'

# First contract deployed by HARDHAT_ADDRESS
DEPLOYED_ADDRESS = '0x5FbDB2315678afecb367f032d93F642f64180aa3'

VOTING_SYSTEM_ABI = [
    {
        "inputs": [{"internalType": "string[]", "name": "candidateNames", "type": "string[]"}],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "candidateIndex", "type": "uint256"}],
        "name": "vote",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]


@pytest.fixture
def log_messages():
    """Capture loguru output"""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)


def write_artifact(artifacts_dir, source_name, contract_name, bytecode="0x6080604052", abi=None):
    """Write a Hardhat-style artifact and its debug file"""
    directory = artifacts_dir / source_name
    directory.mkdir(parents=True, exist_ok=True)

    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": VOTING_SYSTEM_ABI if abi is None else abi,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
        "linkReferences": {},
        "deployedLinkReferences": {}
    }

    path = directory / f"{contract_name}.json"
    path.write_text(json.dumps(artifact))
    (directory / f"{contract_name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/abc.json"})
    )
    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory containing a compiled VotingSystem"""
    root = tmp_path / "artifacts"
    write_artifact(root, "contracts/VotingSystem.sol", "VotingSystem")

    build_info = root / "build-info"
    build_info.mkdir()
    (build_info / "abc.json").write_text(json.dumps({"id": "abc", "input": {}, "output": {}}))

    return root
