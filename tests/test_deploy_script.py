"""End-to-end run of scripts/deploy_contracts.py with a fake deployment service."""

import asyncio
import importlib.util
from pathlib import Path

import pytest
from aiohttp import test_utils, web

from flightsurety import notifications
from tests.fakes import APP_ADDRESS, DATA_ADDRESS, RecordingService, read_config_file

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "deploy_contracts.py"


def load_script():
    spec = importlib.util.spec_from_file_location("deploy_contracts", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class FakeIntegration(RecordingService):
    instances = []
    failures = {}
    connected = True

    def __init__(self, network, gas, gas_price_gwei):
        super().__init__(**FakeIntegration.failures)
        self.network = network
        self.url = "http://localhost:9545"
        self.private_key = None
        FakeIntegration.instances.append(self)

    async def initialize(self, private_key=None):
        if not FakeIntegration.connected:
            raise ConnectionError(f"Failed to connect to {self.network}")
        self.private_key = private_key


@pytest.fixture
def script(monkeypatch, project_root, build_dir):
    for name in ("FLIGHTSURETY_NETWORK", "FLIGHTSURETY_BUILD_DIR", "SLACK_WEBHOOK_URL", "DEPLOY_GAS",
                 "DEPLOY_GAS_PRICE_GWEI"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FLIGHTSURETY_PROJECT_ROOT", str(project_root))
    monkeypatch.setenv("DEPLOYER_PRIVATE_KEY", "0x" + "4c" * 32)
    FakeIntegration.instances = []
    FakeIntegration.failures = {}
    FakeIntegration.connected = True
    module = load_script()
    monkeypatch.setattr(module, "ContractIntegration", FakeIntegration)
    return module


def test_successful_run_writes_both_configs(script, project_root, build_dir):
    exit_code = asyncio.run(script.main(["--build-dir", str(build_dir)]))

    assert exit_code == 0
    (service,) = FakeIntegration.instances
    assert service.private_key == "0x" + "4c" * 32
    for consumer in ("dapp", "server"):
        record = read_config_file(str(project_root / "src" / consumer / "config.json"))
        assert record.data_address == DATA_ADDRESS
        assert record.app_address == APP_ADDRESS
        assert record.url == "http://localhost:9545"


def test_network_flag_selects_network(script, project_root, build_dir):
    exit_code = asyncio.run(script.main(["--network", "development", "--build-dir", str(build_dir)]))

    assert exit_code == 0
    assert FakeIntegration.instances[0].network == "development"
    assert read_config_file(str(project_root / "src" / "dapp" / "config.json")).network == "development"


def test_missing_artifacts_exit_with_failure(script, project_root, tmp_path):
    exit_code = asyncio.run(script.main(["--build-dir", str(tmp_path / "empty")]))

    assert exit_code == 1
    assert FakeIntegration.instances == []
    assert not (project_root / "src" / "dapp" / "config.json").exists()


def config_paths(project_root):
    return [project_root / "src" / consumer / "config.json" for consumer in ("dapp", "server")]


def test_unreachable_node_exits_with_failure(script, project_root, build_dir):
    FakeIntegration.connected = False

    exit_code = asyncio.run(script.main(["--build-dir", str(build_dir)]))

    assert exit_code == 1
    assert FakeIntegration.instances[0].calls == []
    assert not any(path.exists() for path in config_paths(project_root))


@pytest.mark.parametrize(
    "failure, expected_calls",
    [
        ({"fail_deploy": "FlightSuretyData"}, ["deploy"]),
        ({"fail_deploy": "FlightSuretyApp"}, ["deploy", "deploy"]),
        ({"fail_transact": True}, ["deploy", "deploy", "transact"]),
    ],
)
def test_deployment_failure_exits_with_failure(script, project_root, build_dir, failure, expected_calls):
    FakeIntegration.failures = failure

    exit_code = asyncio.run(script.main(["--build-dir", str(build_dir)]))

    assert exit_code == 1
    assert [call[0] for call in FakeIntegration.instances[0].calls] == expected_calls
    assert not any(path.exists() for path in config_paths(project_root))


def test_unreachable_webhook_still_exits_cleanly(script, monkeypatch, project_root, build_dir):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "http://127.0.0.1:1/hook")

    exit_code = asyncio.run(script.main(["--build-dir", str(build_dir)]))

    assert exit_code == 0
    assert all(path.exists() for path in config_paths(project_root))


def test_slow_webhook_still_exits_cleanly(script, monkeypatch, project_root, build_dir):
    monkeypatch.setattr(notifications, "NOTIFY_TIMEOUT", 0.3)

    async def handler(request):
        await asyncio.sleep(2)
        return web.Response(text="ok")

    async def run():
        app = web.Application()
        app.router.add_post("/hook", handler)
        async with test_utils.TestServer(app) as server:
            monkeypatch.setenv("SLACK_WEBHOOK_URL", str(server.make_url("/hook")))
            return await script.main(["--build-dir", str(build_dir)])

    assert asyncio.run(run()) == 0
    assert read_config_file(str(config_paths(project_root)[1])).app_address == APP_ADDRESS
