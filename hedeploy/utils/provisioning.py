from .constants import (
    INITIAL_ACCOUNT_BALANCE_HBAR,
    TOKEN_DECIMALS,
    TOKEN_INITIAL_SUPPLY,
    TOKEN_NAME,
    TOKEN_SYMBOL,
)
from .custom_exceptions import NetworkError
from .custom_types import Receipt
from .deployment_log import DeploymentLog
from .logger import logger

ACCOUNT_LABEL = "account"
TOKEN_LABEL = "token"


def _record(network, deployment_log: DeploymentLog, receipt: Receipt, label: str) -> str:
    if not receipt.succeeded or receipt.entity_id is None:
        raise NetworkError(f"{label} creation failed with status {receipt.status}")

    deployment_log.record(network.name, receipt.entity_id, label)
    logger.okay(f"Created {label}", f"{receipt.entity_id} ({network.name})")
    return receipt.entity_id


def create_account(
    network,
    deployment_log: DeploymentLog,
    initial_balance_hbar: int = INITIAL_ACCOUNT_BALANCE_HBAR,
) -> str:
    logger.info(f"Creating account with {initial_balance_hbar} hbar ...")
    receipt = network.create_account(initial_balance_hbar)
    return _record(network, deployment_log, receipt, ACCOUNT_LABEL)


def create_token(network, deployment_log: DeploymentLog) -> str:
    logger.info(f"Creating fungible token {TOKEN_SYMBOL} ...")
    receipt = network.create_token(
        TOKEN_NAME, TOKEN_SYMBOL, TOKEN_DECIMALS, TOKEN_INITIAL_SUPPLY
    )
    return _record(network, deployment_log, receipt, TOKEN_LABEL)
