"""
Contract Artifacts
Loads compiled contract artifacts (ABI + bytecode) from a Truffle build directory
"""

import json
import logging
import os
from typing import Dict, List

logger = logging.getLogger(__name__)

DATA_CONTRACT = "FlightSuretyData"
APP_CONTRACT = "FlightSuretyApp"


class ArtifactError(Exception):
    """Raised when a compiled artifact is missing or unusable"""


class ContractArtifact:
    def __init__(self, name: str, abi: List[Dict], bytecode: str):
        self.name = name
        self.abi = abi
        self.bytecode = bytecode

    def __str__(self):
        return self.name

    @classmethod
    def from_dict(cls, data: Dict, name: str = None) -> "ContractArtifact":
        """Build an artifact from parsed build JSON"""
        contract_name = data.get("contractName") or name
        if not contract_name:
            raise ArtifactError("Artifact has no contract name")

        abi = data.get("abi")
        if not isinstance(abi, list):
            raise ArtifactError(f"Artifact {contract_name} has no ABI")

        bytecode = data.get("bytecode") or ""
        if not isinstance(bytecode, str):
            raise ArtifactError(f"Artifact {contract_name} bytecode must be a hex string")
        if bytecode.startswith("0x"):
            bytecode = bytecode[2:]
        if not bytecode:
            raise ArtifactError(
                f"Artifact {contract_name} has no bytecode (abstract contract or interface?)"
            )

        return cls(contract_name, abi, "0x" + bytecode)


def load_artifact(build_dir: str, name: str) -> ContractArtifact:
    """Load <build_dir>/<name>.json"""
    path = os.path.join(build_dir, f"{name}.json")
    if not os.path.exists(path):
        raise ArtifactError(f"Artifact not found: {path} (compile the contracts first)")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ArtifactError(f"Artifact {path} is not valid JSON: {e}") from e

    artifact = ContractArtifact.from_dict(data, name=name)
    logger.info(f"Loaded artifact {artifact.name} from {path}")
    return artifact
