"""Shared pytest fixtures for hedeploy tests."""

from pathlib import Path

import pytest

from hedeploy.utils.constants import SUCCESS_STATUS
from hedeploy.utils.custom_types import Receipt
from hedeploy.utils.logger import logger


class FakeNetwork:
    """Stands in for HederaNetwork, recording every submission in order."""

    def __init__(
        self,
        name="testnet",
        operator_id="0.0.2",
        create_status=SUCCESS_STATUS,
        failing_functions=(),
    ):
        self.name = name
        self.operator_id = operator_id
        self.create_status = create_status
        self.failing_functions = set(failing_functions)
        self.submissions = []
        self.closed = False
        self._next_num = 1000

    def _next_id(self):
        self._next_num += 1
        return f"0.0.{self._next_num}"

    def create_contract(self, bytecode, memo, gas, params=None):
        self.submissions.append(("create_contract", bytecode, memo, gas, params))
        if self.create_status != SUCCESS_STATUS:
            return Receipt(status=self.create_status)
        return Receipt(status=SUCCESS_STATUS, entity_id=self._next_id())

    def execute_contract(self, contract_id, function, params, gas):
        self.submissions.append(("execute_contract", contract_id, function, params, gas))
        if function in self.failing_functions:
            return Receipt(status="CONTRACT_REVERT_EXECUTED")
        return Receipt(status=SUCCESS_STATUS)

    def create_account(self, initial_balance_hbar):
        self.submissions.append(("create_account", initial_balance_hbar))
        return Receipt(status=SUCCESS_STATUS, entity_id=self._next_id())

    def create_token(self, name, symbol, decimals, initial_supply):
        self.submissions.append(("create_token", name, symbol, decimals, initial_supply))
        return Receipt(status=SUCCESS_STATUS, entity_id=self._next_id())

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def run_log(tmp_path: Path, monkeypatch) -> Path:
    """Keep the run log of every test inside its own temporary directory."""
    log_path = tmp_path / "digest" / "logs.txt"
    monkeypatch.setattr(logger, "log_file", str(log_path))
    return log_path


@pytest.fixture
def fake_network_class():
    return FakeNetwork


@pytest.fixture
def fake_network() -> FakeNetwork:
    return FakeNetwork()


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """A HelloWorld resource directory laid out the way solcjs and the manifests expect."""
    directory = tmp_path / "hello_world"
    (directory / "artifacts").mkdir(parents=True)
    (directory / "HelloWorld_sol_HelloWorld.bin").write_text("608060405234801561001057600080fd5b50\n")
    (directory / "HelloWorld.ver").write_text("0.8.17+commit.8df45f5f\n")
    (directory / "HelloWorld.sol").write_text("contract HelloWorld { string greeting; }")
    (directory / "Greeter.sol").write_text("contract Greeter {}")
    (directory / "artifacts" / "HelloWorld_meta.json").write_text(
        '{"compiler":{"version":"0.8.17+commit.8df45f5f"},"language":"Solidity"}'
    )
    return directory
