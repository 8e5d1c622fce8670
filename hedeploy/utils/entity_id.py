import re

from .custom_exceptions import ConfigError

ENTITY_ID_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


def parse_entity_id(entity_id: str) -> tuple[int, int, int]:
    """
    Split a Hedera entity id such as "0.0.1043" into (shard, realm, num).

    Raises:
        ConfigError: If the id is not in shard.realm.num form
    """
    match = ENTITY_ID_PATTERN.match(entity_id.strip())
    if not match:
        raise ConfigError(f'"{entity_id}" is not a shard.realm.num entity id')
    shard, realm, num = (int(part) for part in match.groups())
    return shard, realm, num


def entity_id_to_solidity_address(entity_id: str) -> str:
    """
    Long-zero EVM address of an entity: 4 bytes of shard, 8 of realm, 8 of num.

    Returned without the 0x prefix, e.g. "0.0.1043" ->
    "0000000000000000000000000000000000000413".
    """
    shard, realm, num = parse_entity_id(entity_id)
    return f"{shard:08x}{realm:016x}{num:016x}"
