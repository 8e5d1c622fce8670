import re
from typing import Any

from .custom_exceptions import ConfigError
from .custom_types import ExecutionSpec, FunctionCall, ParamSpec
from .entity_id import ENTITY_ID_PATTERN, entity_id_to_solidity_address

SUPPORTED_INT_BITS = {32, 64, 256}
PLACEHOLDER_PREFIX = "$"
HEX_ADDRESS_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")

# ContractFunctionParameters method per parameter type
SDK_ADDERS = {
    "string": "addString",
    "address": "addAddress",
    "bool": "addBool",
    "int32": "addInt32",
    "uint32": "addUint32",
    "int64": "addInt64",
    "uint64": "addUint64",
    "int256": "addInt256",
    "uint256": "addUint256",
}
BIG_INTEGER_TYPES = ("int256", "uint256")
# the SDK takes Java int/long for these and encodes their bits as unsigned
JAVA_SIGNED_UINT_BITS = {"uint32": 32, "uint64": 64}


def _parse_int_type(param_type: str) -> tuple[int, bool] | None:
    """
    Returns (bits, is_signed) for 'int64', 'uint256', ... or None for non-int types.
    """
    match = re.match(r"^(u?int)(\d+)$", param_type)
    if not match:
        return None
    bits = int(match.group(2))
    if bits not in SUPPORTED_INT_BITS:
        raise ConfigError(f"unsupported integer width '{param_type}'")
    return bits, not match.group(1).startswith("u")


def _resolve_address(value: str, context: dict[str, str]) -> str:
    if value.startswith(PLACEHOLDER_PREFIX):
        name = value[len(PLACEHOLDER_PREFIX) :]
        if name not in context:
            raise ConfigError(
                f'placeholder "{value}" has no value, known: {sorted(context)}'
            )
        return entity_id_to_solidity_address(context[name])
    if ENTITY_ID_PATTERN.match(value):
        return entity_id_to_solidity_address(value)
    if not HEX_ADDRESS_PATTERN.match(value):
        raise ConfigError(
            f'address "{value}" is neither 40 hex chars, an entity id nor a placeholder'
        )
    return value


def resolve_param(spec: ParamSpec, context: dict[str, str]) -> tuple[str, Any]:
    if not isinstance(spec, dict) or "type" not in spec or "value" not in spec:
        raise ConfigError(f"parameter {spec} needs both 'type' and 'value'")

    param_type = spec["type"]
    value = spec["value"]

    if param_type == "string":
        if not isinstance(value, str):
            raise ConfigError(f"string parameter expects text, got {value!r}")
        return param_type, value

    if param_type == "address":
        if not isinstance(value, str):
            raise ConfigError(f"address parameter expects text, got {value!r}")
        return param_type, _resolve_address(value, context)

    if param_type == "bool":
        if not isinstance(value, bool):
            raise ConfigError(f"bool parameter expects true/false, got {value!r}")
        return param_type, value

    int_type = _parse_int_type(param_type)
    if int_type is None:
        raise ConfigError(f"unsupported parameter type '{param_type}'")

    bits, is_signed = int_type
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{param_type} parameter expects an integer, got {value!r}")
    if not is_signed and value < 0:
        raise ConfigError(f"{param_type} parameter can't be negative, got {value}")
    low = -(1 << (bits - 1)) if is_signed else 0
    high = (1 << (bits - 1)) - 1 if is_signed else (1 << bits) - 1
    if not low <= value <= high:
        raise ConfigError(f"{value} is out of range for {param_type}")
    return param_type, value


def resolve_params(
    specs: list[ParamSpec] | None, context: dict[str, str]
) -> list[tuple[str, Any]] | None:
    """None means "no constructor parameters", an empty list means "empty parameters"."""
    if specs is None:
        return None
    return [resolve_param(spec, context) for spec in specs]


def to_sdk_arguments(params: list[tuple[str, Any]]) -> list[tuple[str, Any, bool]]:
    """
    Turn resolved parameters into (adder, value, is_big_integer) triples.

    256-bit values become decimal strings for java.math.BigInteger, and the upper
    half of uint32/uint64 is wrapped to the negative Java value with the same bits.
    """
    arguments = []
    for param_type, value in params:
        if param_type not in SDK_ADDERS:
            raise ConfigError(f"unsupported parameter type '{param_type}'")
        if param_type in BIG_INTEGER_TYPES:
            arguments.append((SDK_ADDERS[param_type], str(value), True))
            continue
        bits = JAVA_SIGNED_UINT_BITS.get(param_type)
        if bits is not None and value >= 1 << (bits - 1):
            value -= 1 << bits
        arguments.append((SDK_ADDERS[param_type], value, False))
    return arguments


def resolve_executions(
    specs: list[ExecutionSpec] | None, context: dict[str, str]
) -> list[FunctionCall]:
    calls = []
    for spec in specs or []:
        if not isinstance(spec, dict) or not spec.get("function"):
            raise ConfigError(f"execution {spec} has no 'function'")
        calls.append(
            FunctionCall(
                function=spec["function"],
                params=resolve_params(spec.get("params") or [], context),
            )
        )
    return calls
