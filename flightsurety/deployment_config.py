"""
Deployment Configuration
Builds the address configuration shared by the dapp and the server and writes it to disk
"""

import json
import logging
import os
from typing import Dict, List

logger = logging.getLogger(__name__)

DEFAULT_NETWORK = "localhost"

# Consumers read these paths relative to the project root
DAPP_CONFIG_PATH = os.path.join("src", "dapp", "config.json")
SERVER_CONFIG_PATH = os.path.join("src", "server", "config.json")


class ConfigurationRecord:
    def __init__(self, network: str, url: str, data_address: str, app_address: str):
        self.network = network
        self.url = url
        self.data_address = data_address
        self.app_address = app_address

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            self.network: {
                "url": self.url,
                "dataAddress": self.data_address,
                "appAddress": self.app_address,
            }
        }

    def to_json(self) -> str:
        """Tab-indented JSON, no trailing newline"""
        return json.dumps(self.to_dict(), indent="\t", ensure_ascii=False)


def default_output_paths(project_root: str) -> List[str]:
    """Config locations for the dapp and the server under project_root"""
    return [
        os.path.join(project_root, DAPP_CONFIG_PATH),
        os.path.join(project_root, SERVER_CONFIG_PATH),
    ]


def write_config_files(record: ConfigurationRecord, paths: List[str]) -> None:
    """Overwrite every path with the same serialized record"""
    content = record.to_json()
    for path in paths:
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write configuration to {path}: {e}")
            raise
        logger.info(f"Configuration written to {path}")

