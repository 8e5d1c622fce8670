from .constants import (
    CONTRACT_CREATE_GAS,
    CONTRACT_EXECUTE_GAS,
    NETWORK_ERROR_STATUS,
)
from .custom_exceptions import NetworkError
from .custom_types import ContractDescriptor, DeploymentResult, FunctionCall, Receipt
from .deployment_log import DeploymentLog
from .helpers import label_for_source
from .logger import logger
from .resources import ContractResources


def _submit_or_report(submission, *args, **kwargs) -> Receipt:
    try:
        return submission(*args, **kwargs)
    except NetworkError as network_err:
        logger.error(network_err.message)
        return Receipt(status=NETWORK_ERROR_STATUS)


def execute_calls(network, contract_id: str, calls: list[FunctionCall]) -> list[Receipt]:
    """
    Submit post-deploy calls one by one. A failed call doesn't stop the ones after it
    and nothing already executed is rolled back.
    """
    receipts = []
    for index, call in enumerate(calls):
        logger.info(f"Calling {call.function} ({index + 1} / {len(calls)})", contract_id)
        receipt = _submit_or_report(
            network.execute_contract,
            contract_id,
            call.function,
            call.params,
            CONTRACT_EXECUTE_GAS,
        )
        if receipt.succeeded:
            logger.okay(f"{call.function} executed", receipt.status)
        else:
            logger.error(f"{call.function} failed with status", receipt.status)
        receipts.append(receipt)
    return receipts


def deploy_contract(
    network,
    descriptor: ContractDescriptor,
    resources: ContractResources,
    deployment_log: DeploymentLog,
) -> DeploymentResult:
    """
    Create the contract, run its post-deploy calls and record it in the deployment log.

    Missing artifacts raise ResourceError before anything is submitted.
    Remote failures are reported through the returned statuses.
    """
    base_name = descriptor.base_name
    label = label_for_source(base_name)

    bytecode = resources.bytecode(base_name, descriptor.contract_name)
    compiler_version = resources.compiler_version(base_name)

    memo = f"{label} + solcjs {compiler_version}"
    logger.info(f"Deploying {label} to {network.name}", memo)

    receipt = _submit_or_report(
        network.create_contract,
        bytecode,
        memo,
        CONTRACT_CREATE_GAS,
        descriptor.constructor_params,
    )
    result = DeploymentResult(label=label, receipt=receipt)

    if result.contract_id is not None:
        result.executions = execute_calls(
            network, result.contract_id, descriptor.executions
        )
        deployment_log.record(network.name, result.contract_id, label)
    elif descriptor.executions:
        logger.warn(
            f"No contract id, skipping {len(descriptor.executions)} post-deploy call(s)"
        )

    if receipt.succeeded:
        logger.okay(
            f"{label} deployed successfully to contract {result.contract_id} ({network.name})"
        )
    else:
        logger.error(f"{label} deployment failed with status {receipt.status}")

    return result
