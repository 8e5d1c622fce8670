import json

from .common import post_json
from .constants import (
    CHAIN_IDS,
    DEFAULT_CHAIN_ID,
    METADATA_FILE_NAME,
    SOLC_JSON_INPUT_FILE_NAME,
    SOURCIFY_SERVER_URL,
    SOURCIFY_V2_SERVER_URL,
    VERIFY_REQUEST_TIMEOUT_SEC,
)
from .custom_types import VerificationResult
from .entity_id import entity_id_to_solidity_address
from .logger import logger
from .resources import ContractResources


def find_chain_id(network: str) -> int:
    """mainnet -> 295, testnet -> 296, anything else (previewnet included) -> 297."""
    return CHAIN_IDS.get(network, DEFAULT_CHAIN_ID)


def _to_json(document: dict) -> str:
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)


def build_v1_request(
    contract_id: str,
    network_name: str,
    base_name: str,
    contract_name: str,
    import_names: list[str],
    resources: ContractResources,
) -> dict:
    """
    Request body for the legacy Sourcify `/verify` endpoint.

    https://docs.sourcify.dev/docs/api/server/verify/
    """
    files = {
        METADATA_FILE_NAME: resources.metadata(contract_name),
        # the primary source is keyed by its bare base name
        base_name: resources.source(base_name),
    }
    for import_name in import_names:
        files[f"{import_name}.sol"] = resources.source(import_name)

    return {
        "address": entity_id_to_solidity_address(contract_id),
        "chain": str(find_chain_id(network_name)),
        "files": files,
    }


def build_solc_input(
    base_name: str, import_names: list[str], resources: ContractResources
) -> dict:
    """
    Minimal solc standard JSON input holding only the sources.

    https://docs.soliditylang.org/en/latest/using-the-compiler.html#input-description
    """
    sources = {f"{base_name}.sol": {"content": resources.source(base_name)}}
    for import_name in import_names:
        sources[f"{import_name}.sol"] = {"content": resources.source(import_name)}

    return {"language": "Solidity", "sources": sources}


def build_v2_request(
    contract_id: str,
    network_name: str,
    base_name: str,
    contract_name: str,
    compiler_version: str,
    import_names: list[str],
    resources: ContractResources,
) -> dict:
    """
    Request body for the Sourcify `/verify/solc-json` endpoint.

    https://sourcify.dev/server/api-docs/#/Stateless%20Verification/post_verify_solc_json
    """
    solc_input = build_solc_input(base_name, import_names, resources)
    logger.info(f"solcInput={_to_json(solc_input)}")

    return {
        "address": entity_id_to_solidity_address(contract_id),
        "chain": str(find_chain_id(network_name)),
        "files": {SOLC_JSON_INPUT_FILE_NAME: _to_json(solc_input)},
        "compilerVersion": compiler_version,
        "contractName": contract_name,
    }


def submit(url: str, request: dict) -> VerificationResult:
    request_body = _to_json(request)
    logger.info(f"requestBody={request_body}")

    response = post_json(url, request_body, VERIFY_REQUEST_TIMEOUT_SEC)
    result = VerificationResult(status_code=response.status_code, body=response.text)

    logger.info(f"status={result.status_code}")
    if result.accepted:
        logger.okay(f"content={result.body}")
    else:
        logger.error(f"error={result.body}")
    return result


def verify_v1(
    contract_id: str,
    network_name: str,
    base_name: str,
    contract_name: str,
    import_names: list[str],
    resources: ContractResources,
) -> VerificationResult:
    request = build_v1_request(
        contract_id, network_name, base_name, contract_name, import_names, resources
    )
    return submit(f"{SOURCIFY_SERVER_URL}/verify", request)


def verify_v2(
    contract_id: str,
    network_name: str,
    base_name: str,
    contract_name: str,
    compiler_version: str,
    import_names: list[str],
    resources: ContractResources,
) -> VerificationResult:
    request = build_v2_request(
        contract_id,
        network_name,
        base_name,
        contract_name,
        compiler_version,
        import_names,
        resources,
    )
    return submit(f"{SOURCIFY_V2_SERVER_URL}/verify/solc-json", request)
