import os

from .constants import ARTIFACTS_DIR
from .custom_exceptions import ResourceError


class ContractResources:
    """Compiled artifacts and sources of one demo, looked up by name convention."""

    def __init__(self, resource_dir: str):
        self.resource_dir = resource_dir

    def read(self, name: str) -> str:
        path = os.path.join(self.resource_dir, name)
        if not os.path.isfile(path):
            raise ResourceError(name, self.resource_dir)
        with open(path, mode="r", encoding="utf-8") as resource_file:
            return resource_file.read()

    def bytecode(self, base_name: str, contract_name: str) -> str:
        # solcjs names its output <file>_sol_<contract>.bin
        return self.read(f"{base_name}_sol_{contract_name}.bin").strip()

    def compiler_version(self, base_name: str) -> str:
        return self.read(f"{base_name}.ver").strip()

    def metadata(self, contract_name: str) -> str:
        return self.read(f"{ARTIFACTS_DIR}/{contract_name}_meta.json")

    def source(self, name: str) -> str:
        return self.read(f"{name}.sol")
