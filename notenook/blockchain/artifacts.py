"""
Contract Artifacts
Loads, compiles and writes Hardhat-layout contract artifacts
"""

import os
import json
from typing import Dict
import solcx
from loguru import logger

from .errors import ArtifactError, ArtifactNotFoundError

ARTIFACT_FORMAT = "hh-sol-artifact-1"


def source_name(contract_name: str, contracts_dir: str = "contracts") -> str:
    """Source name recorded in artifacts, e.g. contracts/NoteNook.sol"""
    folder = os.path.basename(os.path.normpath(contracts_dir))
    return f"{folder}/{contract_name}.sol"


def artifact_path(contract_name: str, artifacts_dir: str = "artifacts") -> str:
    """
    Path of a compiled artifact

    Mirrors Hardhat: artifacts/contracts/<Name>.sol/<Name>.json
    """
    return os.path.join(
        artifacts_dir,
        "contracts",
        f"{contract_name}.sol",
        f"{contract_name}.json"
    )


def _validate(artifact: Dict, path: str) -> Dict:
    if not isinstance(artifact.get('abi'), list):
        raise ArtifactError(f"Artifact {path} has no ABI")

    bytecode = artifact.get('bytecode')
    if not isinstance(bytecode, str):
        raise ArtifactError(f"Artifact {path} has no bytecode")

    if bytecode and not bytecode.startswith('0x'):
        artifact['bytecode'] = '0x' + bytecode

    return artifact


def load_artifact(contract_name: str, artifacts_dir: str = "artifacts") -> Dict:
    """
    Load a compiled contract artifact

    Args:
        contract_name: Contract name (e.g. NoteNook)
        artifacts_dir: Artifacts root directory

    Returns:
        Artifact dict with at least 'abi' and 'bytecode'
    """
    path = artifact_path(contract_name, artifacts_dir)

    if not os.path.exists(path):
        raise ArtifactNotFoundError(f"Contract artifact not found: {path}")

    try:
        with open(path, 'r') as f:
            artifact = json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Artifact {path} is not valid JSON: {e}") from e

    if not isinstance(artifact, dict):
        raise ArtifactError(f"Artifact {path} is not a JSON object")

    logger.debug(f"Loaded artifact {path}")
    return _validate(artifact, path)


def write_artifact(artifact: Dict, artifacts_dir: str = "artifacts") -> str:
    """Write an artifact to its Hardhat location and return the path"""
    path = artifact_path(artifact['contractName'], artifacts_dir)
    os.makedirs(os.path.dirname(path), exist_ok=True)

    with open(path, 'w') as f:
        json.dump(artifact, f, indent=2)

    return path


def _ensure_solc(version: str):
    installed = {str(v) for v in solcx.get_installed_solc_versions()}

    if version not in installed:
        logger.info(f"Installing solc {version}...")
        solcx.install_solc(version)


def compile_contract(
    contract_name: str,
    contracts_dir: str = "contracts",
    artifacts_dir: str = "artifacts",
    solc_version: str = "0.8.24",
    evm_version: str = "paris"
) -> Dict:
    """
    Compile a Solidity contract with py-solc-x and write its artifact

    Args:
        contract_name: Contract name, also the source file stem
        contracts_dir: Directory holding <Name>.sol
        artifacts_dir: Artifacts root directory
        solc_version: Compiler version to use (installed when missing)
        evm_version: Target EVM version

    Returns:
        The written artifact dict
    """
    source_file = os.path.join(contracts_dir, f"{contract_name}.sol")

    if not os.path.exists(source_file):
        raise ArtifactNotFoundError(f"Contract source not found: {source_file}")

    with open(source_file, 'r') as f:
        source = f.read()

    name = source_name(contract_name, contracts_dir)
    standard_input = {
        "language": "Solidity",
        "sources": {name: {"content": source}},
        "settings": {
            "evmVersion": evm_version,
            "optimizer": {"enabled": True, "runs": 200},
            "outputSelection": {
                "*": {"*": ["abi", "evm.bytecode.object", "evm.deployedBytecode.object"]}
            }
        }
    }

    logger.info(f"Compiling {source_file} with solc {solc_version} ({evm_version})...")

    try:
        _ensure_solc(solc_version)
        output = solcx.compile_standard(standard_input, solc_version=solc_version)
    except Exception as e:
        # SolcError, or a failed compiler download
        logger.error(f"Compilation failed: {e}")
        raise ArtifactError(f"Compilation of {source_file} failed") from e

    try:
        compiled = output['contracts'][name][contract_name]
    except KeyError as e:
        raise ArtifactError(f"{source_file} does not define contract {contract_name}") from e

    artifact = {
        "_format": ARTIFACT_FORMAT,
        "contractName": contract_name,
        "sourceName": name,
        "abi": compiled['abi'],
        "bytecode": '0x' + compiled['evm']['bytecode']['object'],
        "deployedBytecode": '0x' + compiled['evm']['deployedBytecode']['object'],
        "linkReferences": {},
        "deployedLinkReferences": {}
    }

    path = write_artifact(artifact, artifacts_dir)
    logger.success(f"Artifact written: {path}")

    return artifact


def get_artifact(
    contract_name: str,
    artifacts_dir: str = "artifacts",
    contracts_dir: str = "contracts",
    auto_compile: bool = True,
    solc_version: str = "0.8.24",
    evm_version: str = "paris"
) -> Dict:
    """Load an artifact, compiling the contract first if it is missing"""
    try:
        return load_artifact(contract_name, artifacts_dir)
    except ArtifactNotFoundError:
        if not auto_compile:
            logger.error("Contract artifact not found and AUTO_COMPILE is off")
            logger.info("Run 'python scripts/compile_contract.py' first")
            raise

    return compile_contract(
        contract_name,
        contracts_dir=contracts_dir,
        artifacts_dir=artifacts_dir,
        solc_version=solc_version,
        evm_version=evm_version
    )
