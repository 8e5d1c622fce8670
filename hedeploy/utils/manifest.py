import os

from .custom_exceptions import ConfigError
from .custom_types import ContractDescriptor, Manifest, VerifySpec
from .params import resolve_executions, resolve_params

REQUIRED_KEYS = ("base_name", "contract_name")
VERIFY_PROTOCOLS = ("v1", "v2")


def validate_manifest(manifest: Manifest, path: str) -> None:
    if not isinstance(manifest, dict):
        raise ConfigError(f"manifest {path} must be a mapping")

    for key in REQUIRED_KEYS:
        if not manifest.get(key):
            raise ConfigError(f'manifest {path} is missing "{key}"')

    resources = manifest.get("resources", "")
    if not isinstance(resources, str):
        raise ConfigError(f'manifest {path}: "resources" must be a directory name')

    for key, expected in (("provision", dict), ("constructor_params", list), ("executions", list)):
        if manifest.get(key) is not None and not isinstance(manifest[key], expected):
            raise ConfigError(f'manifest {path}: "{key}" must be a {expected.__name__}')

    verify = manifest.get("verify")
    if verify is not None and not isinstance(verify, dict):
        raise ConfigError(f'manifest {path}: "verify" must be a mapping')
    if verify is not None and verify.get("protocol") not in VERIFY_PROTOCOLS:
        raise ConfigError(
            f"manifest {path}: verify.protocol must be one of {VERIFY_PROTOCOLS}"
        )


def get_resource_dir(path: str, manifest: Manifest) -> str:
    """Resources are looked up relative to the manifest file."""
    manifest_dir = os.path.dirname(os.path.abspath(path))
    return os.path.join(manifest_dir, manifest.get("resources", ""))


def build_descriptor(manifest: Manifest, context: dict[str, str]) -> ContractDescriptor:
    return ContractDescriptor(
        base_name=manifest["base_name"],
        contract_name=manifest["contract_name"],
        constructor_params=resolve_params(manifest.get("constructor_params"), context),
        executions=resolve_executions(manifest.get("executions"), context),
    )


def get_verify_spec(manifest: Manifest) -> VerifySpec | None:
    return manifest.get("verify")
