from dataclasses import dataclass
from pathlib import Path


@dataclass
class PathStatus:
    name: str  # logical name, e.g. "storage_json"
    path: Path
    exists: bool

    def to_dict(self) -> dict:
        return {"name": self.name, "path": str(self.path), "exists": self.exists}
