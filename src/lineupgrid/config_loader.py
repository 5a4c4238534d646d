"""Persist and load CLI arrangement profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ArrangeProfile:
    formation: Optional[str] = None
    layout: str = "fixed"
    mirror: bool = False

    @classmethod
    def load(cls, path: Path) -> "ArrangeProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            formation=data.get("formation"),
            layout=data.get("layout", "fixed"),
            mirror=bool(data.get("mirror", False)),
        )

    def save(self, path: Path) -> None:
        payload = {
            "formation": self.formation,
            "layout": self.layout,
            "mirror": self.mirror,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
