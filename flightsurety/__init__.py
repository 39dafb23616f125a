"""
FlightSurety Deployment
Publishes the FlightSurety data and app contracts and writes the
address configuration used by the dapp and the oracle server
"""

from flightsurety.artifacts import ArtifactError, ContractArtifact, load_artifact
from flightsurety.contract_integration import (
    ContractIntegration,
    DeployedContract,
    DeploymentError,
    TransactionFailedError,
)
from flightsurety.deployer import DeploymentService, deploy_contracts
from flightsurety.deployment_config import (
    ConfigurationRecord,
    default_output_paths,
    write_config_files,
)

__all__ = [
    "ArtifactError",
    "ConfigurationRecord",
    "ContractArtifact",
    "ContractIntegration",
    "DeployedContract",
    "DeploymentError",
    "DeploymentService",
    "TransactionFailedError",
    "default_output_paths",
    "deploy_contracts",
    "load_artifact",
    "write_config_files",
]
