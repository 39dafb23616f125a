#!/usr/bin/env python3
"""
FlightSurety Contract Deployment Script
Deploys FlightSuretyData and FlightSuretyApp and writes src/dapp/config.json and src/server/config.json
"""

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

# Allow running as `python scripts/deploy_contracts.py` from a checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flightsurety.artifacts import APP_CONTRACT, DATA_CONTRACT, load_artifact
from flightsurety.contract_integration import ContractIntegration
from flightsurety.deployer import deploy_contracts
from flightsurety.deployment_config import default_output_paths
from flightsurety.notifications import send_deployment_notification
from flightsurety.settings import DeploymentSettings

logger = logging.getLogger("deploy_contracts")


async def main(argv=None) -> int:
    """Main function"""
    import argparse
    parser = argparse.ArgumentParser(description='Deploy the FlightSurety contracts')
    parser.add_argument('--network', help='Network to deploy to (default: localhost)')
    parser.add_argument('--build-dir', help='Directory holding the compiled contract artifacts')

    args = parser.parse_args(argv)

    try:
        settings = DeploymentSettings.from_env()
        if args.network:
            settings.network = args.network
        if args.build_dir:
            settings.build_dir = args.build_dir

        data_artifact = load_artifact(settings.build_dir, DATA_CONTRACT)
        app_artifact = load_artifact(settings.build_dir, APP_CONTRACT)

        service = ContractIntegration(settings.network, settings.gas, settings.gas_price_gwei)
        await service.initialize(settings.private_key)

        record = await deploy_contracts(
            service,
            data_artifact,
            app_artifact,
            service.url,
            default_output_paths(settings.project_root),
            network=settings.network,
        )
    except Exception as e:
        logger.error(f"Deployment failed: {e}")
        return 1

    logger.info(f"Data contract: {record.data_address}")
    logger.info(f"App contract: {record.app_address}")
    await send_deployment_notification(settings.slack_webhook, record)
    return 0


if __name__ == "__main__":
    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler('deployment.log'),
            logging.StreamHandler()
        ]
    )

    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Deployment interrupted by user")
        sys.exit(1)
