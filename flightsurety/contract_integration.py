"""
Contract Integration Module
Deploys compiled contracts and sends contract transactions over JSON-RPC
"""

import logging
import os
from typing import Any, Dict, List, Optional

from eth_account import Account
from eth_utils import to_checksum_address
from web3 import Web3

from flightsurety.artifacts import ContractArtifact

logger = logging.getLogger(__name__)

DEFAULT_GAS = 6000000
DEFAULT_GAS_PRICE_GWEI = 20
RECEIPT_TIMEOUT = 120


class DeploymentError(Exception):
    """Raised when a contract cannot be deployed"""


class TransactionFailedError(DeploymentError):
    """Raised when a mined transaction reports a failed status"""

    def __init__(self, tx_hash: str, description: str):
        super().__init__(f"{description} failed: {tx_hash}")
        self.tx_hash = tx_hash


class DeployedContract:
    def __init__(self, label: str, address: str, abi: List[Dict]):
        self.label = label
        self.address = address
        self.abi = abi

    def __str__(self):
        return f"{self.label}@{self.address}"


class ContractIntegration:
    def __init__(self, network: str = "localhost", gas: int = DEFAULT_GAS,
                 gas_price_gwei: float = DEFAULT_GAS_PRICE_GWEI):
        self.network = network
        self.gas = gas
        self.gas_price_gwei = gas_price_gwei
        self.web3 = None
        self.account = None
        self.sender = None

        # Network configurations
        self.network_configs = {
            "localhost": {
                "rpc": os.getenv("LOCALHOST_RPC", "http://localhost:9545"),
            },
            "development": {
                "rpc": os.getenv("DEVELOPMENT_RPC", "http://127.0.0.1:8545"),
            },
        }

    @property
    def url(self) -> str:
        if self.network not in self.network_configs:
            raise ValueError(f"Unsupported network: {self.network}")
        return self.network_configs[self.network]["rpc"]

    async def initialize(self, private_key: Optional[str] = None):
        """Connect to the node and pick the sending account"""
        try:
            url = self.url

            if self.web3 is None:
                self.web3 = Web3(Web3.HTTPProvider(url))
            if not self.web3.is_connected():
                raise ConnectionError(f"Failed to connect to {self.network} at {url}")

            if private_key:
                # Sign locally
                self.account = Account.from_key(private_key)
                self.sender = self.account.address
            else:
                # Fall back to the node's unlocked accounts (truffle develop, ganache)
                accounts = self.web3.eth.accounts
                if not accounts:
                    raise DeploymentError(
                        f"No private key given and {self.network} exposes no unlocked accounts"
                    )
                self.sender = to_checksum_address(accounts[0])
            self.web3.eth.default_account = self.sender

            logger.info(f"Deployment service initialized for {self.network} ({url})")
            logger.info(f"Account: {self.sender}")

        except Exception as e:
            logger.error(f"Failed to initialize deployment service: {e}")
            raise

    async def deploy(self, artifact: ContractArtifact, *constructor_args) -> DeployedContract:
        """Deploy a contract and wait until it is mined"""
        try:
            factory = self.web3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            tx = factory.constructor(*constructor_args).build_transaction(self._tx_params())
            receipt = self._send(tx, f"Deployment of {artifact.name}")

            address = receipt["contractAddress"]
            if not address:
                raise DeploymentError(f"No contract address in receipt for {artifact.name}")

            contract = DeployedContract(artifact.name, to_checksum_address(address), artifact.abi)
            logger.info(f"{artifact.name} deployed at {contract.address}")
            return contract

        except Exception as e:
            logger.error(f"Failed to deploy {artifact.name}: {e}")
            raise

    async def transact(self, contract: DeployedContract, method: str, *args) -> str:
        """Send a state-changing call and wait for a successful receipt"""
        try:
            instance = self.web3.eth.contract(address=contract.address, abi=contract.abi)
            function = getattr(instance.functions, method)
            tx = function(*args).build_transaction(self._tx_params())
            receipt = self._send(tx, f"{contract.label}.{method}")

            tx_hash = Web3.to_hex(receipt["transactionHash"])
            logger.info(f"{contract.label}.{method} executed: {tx_hash}")
            return tx_hash

        except Exception as e:
            logger.error(f"Failed to call {contract.label}.{method}: {e}")
            raise

    def _tx_params(self) -> Dict[str, Any]:
        params = {
            "from": self.sender,
            "nonce": self.web3.eth.get_transaction_count(self.sender),
            "gas": self.gas,
            "gasPrice": Web3.to_wei(self.gas_price_gwei, "gwei"),
        }
        if self.account is not None:
            params["chainId"] = self.web3.eth.chain_id
        return params

    def _send(self, tx: Dict[str, Any], description: str):
        if self.account is not None:
            signed_tx = self.web3.eth.account.sign_transaction(tx, private_key=self.account.key)
            tx_hash = self.web3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = self.web3.eth.send_transaction(tx)

        receipt = self.web3.eth.wait_for_transaction_receipt(tx_hash, timeout=RECEIPT_TIMEOUT)
        if receipt["status"] != 1:
            raise TransactionFailedError(Web3.to_hex(tx_hash), description)
        return receipt
