import yaml

from .common import load_config
from .constants import SUCCESS_STATUS
from .custom_exceptions import ConfigError
from .custom_types import Manifest, VerificationResult, VerifySpec
from .deployer import deploy_contract
from .deployment_log import DeploymentLog
from .logger import logger
from .manifest import (
    build_descriptor,
    get_resource_dir,
    get_verify_spec,
    validate_manifest,
)
from .provisioning import ACCOUNT_LABEL, TOKEN_LABEL, create_account, create_token
from .resources import ContractResources
from .sourcify import verify_v1, verify_v2

# only used to check placeholders before anything is created
PRECHECK_ENTITY_ID = "0.0.0"


def run_verification(
    verify: VerifySpec,
    contract_id: str,
    network_name: str,
    manifest: Manifest,
    resources: ContractResources,
) -> VerificationResult:
    base_name = manifest["base_name"]
    contract_name = manifest["contract_name"]
    import_names = verify.get("imports") or []

    logger.info(f"Verifying {contract_id} with protocol {verify['protocol']} ...")

    if verify["protocol"] == "v1":
        return verify_v1(
            contract_id, network_name, base_name, contract_name, import_names, resources
        )

    compiler_version = verify.get("compiler_version") or resources.compiler_version(
        base_name
    )
    return verify_v2(
        contract_id,
        network_name,
        base_name,
        contract_name,
        compiler_version,
        import_names,
        resources,
    )


def _precheck(network, manifest: Manifest, resources: ContractResources) -> None:
    provision = manifest.get("provision") or {}
    context = {"operator": network.operator_id}
    for label in (TOKEN_LABEL, ACCOUNT_LABEL):
        if provision.get(label):
            context[label] = PRECHECK_ENTITY_ID
    build_descriptor(manifest, context)

    resources.bytecode(manifest["base_name"], manifest["contract_name"])
    resources.compiler_version(manifest["base_name"])


def process_manifest(
    path: str,
    network,
    network_name: str,
    deployment_log: DeploymentLog,
    skip_deploy: bool = False,
    skip_verify: bool = False,
    rows: list | None = None,
) -> list[list]:
    """
    Provision, deploy and verify the contract described by one manifest.

    A summary row of [label, network, id, status] is appended to `rows` (a new list
    when omitted) as each entity is created, and the list is returned.
    """
    logger.divider()
    logger.info(f"Loading manifest {path}...")
    try:
        manifest = load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as load_err:
        raise ConfigError(f"can't load manifest {path}: {load_err}")
    validate_manifest(manifest, path)

    resources = ContractResources(get_resource_dir(path, manifest))
    logger.okay("Contract", f"{manifest['base_name']} : {manifest['contract_name']}")
    logger.okay("Resources", resources.resource_dir)

    if rows is None:
        rows = []
    deployed_contract_id = None

    if not skip_deploy:
        _precheck(network, manifest, resources)

        provision = manifest.get("provision") or {}
        context = {"operator": network.operator_id}
        if provision.get(TOKEN_LABEL):
            context[TOKEN_LABEL] = create_token(network, deployment_log)
            rows.append([TOKEN_LABEL, network.name, context[TOKEN_LABEL], SUCCESS_STATUS])
        if provision.get(ACCOUNT_LABEL):
            context[ACCOUNT_LABEL] = create_account(network, deployment_log)
            rows.append(
                [ACCOUNT_LABEL, network.name, context[ACCOUNT_LABEL], SUCCESS_STATUS]
            )

        descriptor = build_descriptor(manifest, context)
        result = deploy_contract(network, descriptor, resources, deployment_log)
        rows.append(
            [result.label, network.name, result.contract_id or "-", result.receipt.status]
        )
        deployed_contract_id = result.contract_id

    verify = get_verify_spec(manifest)
    if verify is not None and not skip_verify:
        contract_id = verify.get("contract_id") or deployed_contract_id
        if contract_id is None:
            logger.warn(f"No contract id to verify for {manifest['base_name']}, skipping")
        else:
            run_verification(verify, contract_id, network_name, manifest, resources)

    return rows
