from typing import Any

from hedera import (
    AccountCreateTransaction,
    AccountId,
    Client,
    ContractExecuteTransaction,
    ContractFunctionParameters,
    ContractId,
    Hbar,
    PrivateKey,
    TokenCreateTransaction,
    TokenSupplyType,
    TokenType,
)
from jnius import JavaException, autoclass

from .constants import DEFAULT_TIMEOUT_MULTIPLIER
from .custom_exceptions import ConfigError, NetworkError
from .custom_types import Credentials, Receipt
from .logger import logger
from .params import to_sdk_arguments

ContractCreateFlow = autoclass("com.hedera.hashgraph.sdk.ContractCreateFlow")
BigInteger = autoclass("java.math.BigInteger")


def build_function_parameters(params: list[tuple[str, Any]]):
    function_parameters = ContractFunctionParameters()
    for adder, value, is_big_integer in to_sdk_arguments(params):
        try:
            if is_big_integer:
                value = BigInteger(value)
            getattr(function_parameters, adder)(value)
        except JavaException as java_exc:
            raise ConfigError(f"{adder}({value!r}) rejected by the SDK: {java_exc}")
    return function_parameters


class HederaNetwork:
    """SDK client bound to the operator, returning plain Receipts for each submission."""

    def __init__(self, client, credentials: Credentials):
        self.client = client
        self.name = credentials.network
        self.operator_id = credentials.operator_id
        self.operator_key = PrivateKey.fromString(credentials.operator_key)

    @classmethod
    def connect(
        cls,
        credentials: Credentials,
        timeout_multiplier: int = DEFAULT_TIMEOUT_MULTIPLIER,
    ) -> "HederaNetwork":
        try:
            client = Client.forName(credentials.network)
            client.setOperator(
                AccountId.fromString(credentials.operator_id),
                PrivateKey.fromString(credentials.operator_key),
            )
        except JavaException as java_exc:
            raise ConfigError(
                f"can't create client for network {credentials.network}: {java_exc}"
            )

        client.setRequestTimeout(
            client.getRequestTimeout().multipliedBy(timeout_multiplier)
        )
        client.setMaxAttempts(client.getMaxAttempts() * timeout_multiplier)

        logger.okay("Hedera client created", credentials.network)
        return cls(client, credentials)

    def close(self) -> None:
        try:
            self.client.close()
        except JavaException as java_exc:
            logger.warn("Failed to close Hedera client", java_exc)

    def _submit(self, transaction, entity_attr: str | None = None) -> Receipt:
        try:
            response = transaction.execute(self.client)
            # report non-SUCCESS statuses instead of raising on them
            receipt = response.setValidateStatus(False).getReceipt(self.client)
        except JavaException as java_exc:
            raise NetworkError(str(java_exc))

        entity = getattr(receipt, entity_attr) if entity_attr else None
        return Receipt(
            status=receipt.status.toString(),
            entity_id=entity.toString() if entity is not None else None,
        )

    def create_contract(
        self,
        bytecode: str,
        memo: str,
        gas: int,
        params: list[tuple[str, Any]] | None = None,
    ) -> Receipt:
        flow = ContractCreateFlow().setBytecode(bytecode).setContractMemo(memo).setGas(gas)
        if params is not None:
            flow.setConstructorParameters(build_function_parameters(params))
        return self._submit(flow, "contractId")

    def execute_contract(
        self,
        contract_id: str,
        function: str,
        params: list[tuple[str, Any]],
        gas: int,
    ) -> Receipt:
        transaction = (
            ContractExecuteTransaction()
            .setContractId(ContractId.fromString(contract_id))
            .setGas(gas)
            .setFunction(function, build_function_parameters(params))
        )
        return self._submit(transaction)

    def create_account(self, initial_balance_hbar: int) -> Receipt:
        new_key = PrivateKey.generateED25519()
        transaction = (
            AccountCreateTransaction()
            .setKey(new_key.getPublicKey())
            .setInitialBalance(Hbar(initial_balance_hbar))
        )
        return self._submit(transaction, "accountId")

    def create_token(
        self, name: str, symbol: str, decimals: int, initial_supply: int
    ) -> Receipt:
        operator_public_key = self.operator_key.getPublicKey()
        transaction = (
            TokenCreateTransaction()
            .setTokenName(name)
            .setTokenSymbol(symbol)
            .setDecimals(decimals)
            .setInitialSupply(initial_supply)
            .setTreasuryAccountId(AccountId.fromString(self.operator_id))
            .setTokenType(TokenType.FUNGIBLE_COMMON)
            .setSupplyType(TokenSupplyType.INFINITE)
            .setAdminKey(operator_public_key)
            .setSupplyKey(operator_public_key)
        )
        return self._submit(transaction, "tokenId")
