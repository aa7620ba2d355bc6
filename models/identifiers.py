"""Random installation identifiers.

These values only need to look like the ones the editor writes itself. They
come from the non-cryptographic ``random`` module and carry no security
guarantee; uniqueness across runs is best effort.
"""

import random
from dataclasses import dataclass

HEX_DIGITS = "0123456789abcdef"


def generate_machine_id() -> str:
    """Generate a 64-character lowercase hex machine id."""
    return "".join(random.choice(HEX_DIGITS) for _ in range(64))


def generate_uuid() -> str:
    """Generate a version-4 shaped UUID string (lowercase)."""
    chars = []
    for c in "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx":
        if c == "x":
            chars.append(random.choice(HEX_DIGITS))
        elif c == "y":
            # variant nibble: 10xx
            chars.append(HEX_DIGITS[random.randrange(16) & 0x3 | 0x8])
        else:
            chars.append(c)
    return "".join(chars)


def generate_sqm_id() -> str:
    """Generate a UUID wrapped in braces, e.g. "{...}"."""
    return "{" + generate_uuid() + "}"


@dataclass
class IdentifierSet:
    machine_id: str  # 64 hex chars, telemetry.machineId
    sqm_id: str  # "{uuid}", telemetry.sqmId
    dev_device_id: str  # uuid, telemetry.devDeviceId
    machine_guid: str  # uuid, contents of the machineid file

    @classmethod
    def generate(cls) -> "IdentifierSet":
        """Create a fresh, independently generated set."""
        return cls(
            machine_id=generate_machine_id(),
            sqm_id=generate_sqm_id(),
            dev_device_id=generate_uuid(),
            machine_guid=generate_uuid(),
        )

    def storage_entries(self) -> dict:
        """Telemetry keys as stored in storage.json."""
        return {
            "telemetry.machineId": self.machine_id,
            "telemetry.sqmId": self.sqm_id,
            "telemetry.devDeviceId": self.dev_device_id,
        }

    def to_dict(self) -> dict:
        return {
            "machine_id": self.machine_id,
            "sqm_id": self.sqm_id,
            "dev_device_id": self.dev_device_id,
            "machine_guid": self.machine_guid,
        }
