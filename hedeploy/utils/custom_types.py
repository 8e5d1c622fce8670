from dataclasses import dataclass, field
from typing import Any, TypedDict, NotRequired

from .constants import SUCCESS_STATUS


class ParamSpec(TypedDict):
    type: str
    value: Any


class ExecutionSpec(TypedDict):
    function: str
    params: NotRequired[list[ParamSpec]]


class ProvisionSpec(TypedDict):
    token: NotRequired[bool]
    account: NotRequired[bool]


class VerifySpec(TypedDict):
    protocol: str
    contract_id: NotRequired[str]
    imports: NotRequired[list[str]]
    compiler_version: NotRequired[str]


class Manifest(TypedDict):
    base_name: str
    contract_name: str
    resources: NotRequired[str]
    constructor_params: NotRequired[list[ParamSpec] | None]
    executions: NotRequired[list[ExecutionSpec]]
    provision: NotRequired[ProvisionSpec]
    verify: NotRequired[VerifySpec]


@dataclass(frozen=True)
class Credentials:
    operator_id: str
    operator_key: str
    network: str


@dataclass(frozen=True)
class Receipt:
    status: str
    entity_id: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCESS_STATUS


@dataclass(frozen=True)
class FunctionCall:
    function: str
    params: list[tuple[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ContractDescriptor:
    base_name: str
    contract_name: str
    constructor_params: list[tuple[str, Any]] | None = None
    executions: list[FunctionCall] = field(default_factory=list)


@dataclass
class DeploymentResult:
    label: str
    receipt: Receipt
    executions: list[Receipt] = field(default_factory=list)

    @property
    def contract_id(self) -> str | None:
        return self.receipt.entity_id


@dataclass(frozen=True)
class DeploymentLogEntry:
    timestamp: str
    network: str
    entity_id: str
    label: str


@dataclass(frozen=True)
class VerificationResult:
    status_code: int
    body: str

    @property
    def accepted(self) -> bool:
        return self.status_code <= 299
