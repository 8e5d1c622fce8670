import json
import os

import requests
import yaml

from .custom_exceptions import VerificationError
from .custom_types import Manifest
from .logger import logger


def load_config(path: str) -> Manifest:
    """
    Load a deployment manifest from a JSON or YAML file.

    The extension decides the parser and is matched case-insensitively.

    Raises:
        ValueError: If the extension is unsupported, the YAML document is empty
            or an address parameter was coerced to an integer by YAML
    """
    extension = os.path.splitext(path)[1].lower()

    with open(path, mode="r") as config_file:
        if extension == ".json":
            config = json.load(config_file)
        elif extension in (".yaml", ".yml"):
            config = yaml.safe_load(config_file)
            if config is None:
                raise ValueError(
                    f"Config {path} is empty or contains only comments"
                )
        else:
            raise ValueError(f"Unsupported config file extension: {extension}")

    if isinstance(config, dict):
        _check_address_params(config.get("constructor_params"), "constructor_params")
        for index, execution in enumerate(config.get("executions") or []):
            if isinstance(execution, dict):
                _check_address_params(
                    execution.get("params"), f"executions[{index}].params"
                )

    return config


def _check_address_params(params, where: str) -> None:
    # YAML reads an unquoted 0x... literal as an int
    for index, param in enumerate(params or []):
        if not isinstance(param, dict):
            continue
        if param.get("type") == "address" and isinstance(param.get("value"), int):
            raise ValueError(
                f"{where}[{index}]: address {param['value']} was parsed as integer, "
                "quote it in the config"
            )


def _handle_request_errors(error_class):
    """Decorator to convert transport-level HTTP errors to custom exceptions.

    HTTP error statuses are returned to the caller untouched.
    """

    def decorator(func):
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except requests.exceptions.ConnectionError as conn_err:
                raise error_class(f"Connection error occurred: {conn_err}")
            except requests.exceptions.Timeout as timeout_err:
                raise error_class(f"Timeout error occurred: {timeout_err}")
            except requests.exceptions.RequestException as req_err:
                raise error_class(f"Request exception occurred: {req_err}")

        return wrapper

    return decorator


@_handle_request_errors(VerificationError)
def post_json(url: str, body: str, timeout: int) -> requests.Response:
    logger.log(f"Post: {url}")
    return requests.post(
        url,
        data=body.encode("utf-8"),
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )


def mask_text(text, mask_start=3, mask_end=3):
    text_length = len(text)
    mask = "*" * (text_length - mask_start - mask_end)
    return text[:mask_start] + mask + text[text_length - mask_end :]
