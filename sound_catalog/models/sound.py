from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Sound:
    """One catalog entry, derived from an audio file and its sidecar description."""
    id: int
    name: str
    description: str
    tags: Tuple[str, ...] = ()
    audio: str = ""
    cover: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "audio": self.audio,
            "cover": self.cover,
        }
