from __future__ import annotations

import json
from dataclasses import dataclass

from .population import Coloring


@dataclass
class Solution:
    coloring: Coloring
    score: int

    def to_dict(self) -> dict:
        return {"Coloring": list(self.coloring), "Score": self.score}

    @classmethod
    def from_dict(cls, data: dict) -> Solution:
        return cls(coloring=Coloring(int(c) for c in data["Coloring"]), score=int(data["Score"]))

    def save(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f)

    @classmethod
    def load(cls, path: str) -> Solution:
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
