from datetime import datetime, timezone

from .constants import DEFAULT_DEPLOYMENTS_LOG_PATH
from .custom_types import DeploymentLogEntry
from .helpers import create_dirs


def format_entry(entry: DeploymentLogEntry) -> str:
    return f"{entry.timestamp} {entry.network} {entry.entity_id} {entry.label}"


class DeploymentLog:
    """Append-only record of everything created on a network, one line per entity."""

    def __init__(self, path: str = DEFAULT_DEPLOYMENTS_LOG_PATH):
        self.path = path

    def append(self, entry: DeploymentLogEntry) -> None:
        create_dirs(self.path)
        with open(self.path, mode="a", encoding="utf-8") as log_file:
            log_file.write(format_entry(entry) + "\n")

    def record(self, network: str, entity_id: str, label: str) -> DeploymentLogEntry:
        entry = DeploymentLogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            network=network,
            entity_id=entity_id,
            label=label,
        )
        self.append(entry)
        return entry
