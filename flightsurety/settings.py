"""
Deployment settings read from the environment (.env is loaded by the entry script)
"""

import os
from typing import Optional

from flightsurety.contract_integration import DEFAULT_GAS, DEFAULT_GAS_PRICE_GWEI
from flightsurety.deployment_config import DEFAULT_NETWORK

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")
    if parsed < 0:
        raise ValueError(f"{name} must not be negative, got {parsed}")
    return parsed


class DeploymentSettings:
    def __init__(self, network: str = DEFAULT_NETWORK,
                 project_root: str = PROJECT_ROOT,
                 build_dir: Optional[str] = None,
                 private_key: Optional[str] = None,
                 gas: int = DEFAULT_GAS,
                 gas_price_gwei: float = DEFAULT_GAS_PRICE_GWEI,
                 slack_webhook: Optional[str] = None):
        self.network = network
        self.project_root = project_root
        self.build_dir = build_dir or os.path.join(project_root, "build", "contracts")
        self.private_key = private_key
        self.gas = gas
        self.gas_price_gwei = gas_price_gwei
        self.slack_webhook = slack_webhook

    @classmethod
    def from_env(cls) -> "DeploymentSettings":
        return cls(
            network=os.getenv("FLIGHTSURETY_NETWORK") or DEFAULT_NETWORK,
            project_root=os.getenv("FLIGHTSURETY_PROJECT_ROOT") or PROJECT_ROOT,
            build_dir=os.getenv("FLIGHTSURETY_BUILD_DIR") or None,
            private_key=os.getenv("DEPLOYER_PRIVATE_KEY") or None,
            gas=_int_env("DEPLOY_GAS", DEFAULT_GAS),
            gas_price_gwei=_float_env("DEPLOY_GAS_PRICE_GWEI", DEFAULT_GAS_PRICE_GWEI),
            slack_webhook=os.getenv("SLACK_WEBHOOK_URL") or None,
        )
