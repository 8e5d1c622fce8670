import os

from dotenv import dotenv_values

from .common import mask_text
from .constants import (
    DEFAULT_ENV_PATH,
    HEDERA_NETWORK_KEY,
    OPERATOR_ACCOUNT_ID_KEY,
    OPERATOR_KEY_KEY,
)
from .custom_exceptions import ConfigError
from .custom_types import Credentials
from .logger import logger


def _require(values: dict, key: str, env_path: str) -> str:
    value = values.get(key)
    if not value:
        logger.error("Env key not found", f"{key} ({env_path})")
        raise ConfigError(f"{key} is not set in {env_path}")
    return value.strip()


def load_credentials(env_path: str = DEFAULT_ENV_PATH) -> Credentials:
    """
    Read the operator identity and target network from a dotfile.

    Raises:
        ConfigError: If the file does not exist or a required key is missing
    """
    if not os.path.isfile(env_path):
        logger.error("Env file not found", env_path)
        raise ConfigError(f"env file {env_path} not found")

    values = dotenv_values(env_path)

    operator_id = _require(values, OPERATOR_ACCOUNT_ID_KEY, env_path)
    operator_key = _require(values, OPERATOR_KEY_KEY, env_path)
    network = _require(values, HEDERA_NETWORK_KEY, env_path)

    logger.okay(OPERATOR_ACCOUNT_ID_KEY, operator_id)
    logger.okay(OPERATOR_KEY_KEY, mask_text(operator_key))
    logger.okay(HEDERA_NETWORK_KEY, network)

    return Credentials(operator_id=operator_id, operator_key=operator_key, network=network)
