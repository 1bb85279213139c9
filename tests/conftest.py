"""
Shared fixtures

Integration tests run on a fresh in-process eth-tester chain per test.
The NoteNook artifact comes from the committed copy under
tests/fixtures/artifacts, then from a local artifacts/ build, and only then
from a py-solc-x compile.
"""

import os
import sys
import pytest
from web3 import Web3, EthereumTesterProvider
from loguru import logger

from notenook.blockchain import (
    ArtifactNotFoundError,
    ContractDeployer,
    NoteNookContract,
    Signer,
    compile_contract,
    load_artifact,
)

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(TESTS_DIR)
CONTRACTS_DIR = os.path.join(PROJECT_ROOT, "contracts")
ARTIFACTS_DIR = os.path.join(PROJECT_ROOT, "artifacts")
FIXTURE_ARTIFACTS_DIR = os.path.join(TESTS_DIR, "fixtures", "artifacts")


@pytest.fixture(autouse=True)
def reset_logger():
    """Scripts replace loguru sinks; put the default back after each test"""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture(scope="session")
def notenook_artifact(tmp_path_factory):
    """Compiled NoteNook artifact"""
    for artifacts_dir in (FIXTURE_ARTIFACTS_DIR, ARTIFACTS_DIR):
        try:
            return load_artifact("NoteNook", artifacts_dir)
        except ArtifactNotFoundError:
            continue

    try:
        return compile_contract(
            "NoteNook",
            contracts_dir=CONTRACTS_DIR,
            artifacts_dir=str(tmp_path_factory.mktemp("artifacts"))
        )
    except Exception as e:
        pytest.skip(f"NoteNook artifact unavailable: {e}")


@pytest.fixture
def w3():
    """Fresh in-process chain"""
    return Web3(EthereumTesterProvider())


@pytest.fixture
def signers(w3):
    """Node-managed test accounts"""
    return [Signer(w3, address) for address in w3.eth.accounts]


@pytest.fixture
def owner(signers):
    return signers[0]


@pytest.fixture
def addr1(signers):
    return signers[1]


@pytest.fixture
def addr2(signers):
    return signers[2]


@pytest.fixture
def deploy_notenook(w3, notenook_artifact):
    """Deploy a new NoteNook instance from the given signer"""
    deployer = ContractDeployer(w3, confirmation_timeout=30)

    def _deploy(signer):
        return deployer.deploy(notenook_artifact, signer, handle_class=NoteNookContract)

    return _deploy


@pytest.fixture
def contract(deploy_notenook, owner):
    """NoteNook deployed by the owner account"""
    return deploy_notenook(owner)
