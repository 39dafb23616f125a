"""
Deployment Orchestrator
Deploys the data contract, the app contract and authorizes the app as a data caller
"""

import logging
from typing import List, Protocol

from flightsurety.artifacts import ContractArtifact
from flightsurety.contract_integration import DeployedContract
from flightsurety.deployment_config import (
    DEFAULT_NETWORK,
    ConfigurationRecord,
    write_config_files,
)

logger = logging.getLogger(__name__)

AUTHORIZE_METHOD = "authorizeCaller"


class DeploymentService(Protocol):
    async def deploy(self, artifact: ContractArtifact, *constructor_args) -> DeployedContract:
        ...

    async def transact(self, contract: DeployedContract, method: str, *args) -> str:
        ...


async def deploy_contracts(service: DeploymentService,
                           data_artifact: ContractArtifact,
                           app_artifact: ContractArtifact,
                           url: str,
                           output_paths: List[str],
                           network: str = DEFAULT_NETWORK) -> ConfigurationRecord:
    """Run the four deployment steps in order; any failure aborts the rest"""
    try:
        data_contract = await service.deploy(data_artifact)
        app_contract = await service.deploy(app_artifact, data_contract.address)

        # Receipt is checked by the service, so a reverted authorization stops here
        await service.transact(data_contract, AUTHORIZE_METHOD, app_contract.address, True)
        logger.info(f"{app_contract.label} authorized as caller of {data_contract.label}")

        record = ConfigurationRecord(network, url, data_contract.address, app_contract.address)
        write_config_files(record, output_paths)

    except Exception as e:
        logger.error(f"Deployment aborted: {e}")
        raise

    logger.info(f"Deployment to {network} complete")
    return record
