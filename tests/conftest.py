import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.fakes import APP_ABI, DATA_ABI, make_artifacts


@pytest.fixture
def artifacts():
    return make_artifacts()


@pytest.fixture
def build_dir(tmp_path):
    directory = tmp_path / "build" / "contracts"
    directory.mkdir(parents=True)
    for name, abi, bytecode in (
        ("FlightSuretyData", DATA_ABI, "0x6080"),
        ("FlightSuretyApp", APP_ABI, "6081"),
    ):
        (directory / f"{name}.json").write_text(
            json.dumps({"contractName": name, "abi": abi, "bytecode": bytecode}),
            encoding="utf-8",
        )
    return directory


@pytest.fixture
def project_root(tmp_path):
    for consumer in ("dapp", "server"):
        (tmp_path / "src" / consumer).mkdir(parents=True)
    return tmp_path


@pytest.fixture
def output_paths(project_root):
    return [
        str(project_root / "src" / "dapp" / "config.json"),
        str(project_root / "src" / "server" / "config.json"),
    ]
