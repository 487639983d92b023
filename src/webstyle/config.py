from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WebStyleConfig:
    separator: str = " "  # joins tokens in compiled output
    strict: bool = False  # treat sheet warnings as failures
    log_level: str = "WARNING"

    def join(self, tokens: list[str]) -> str:
        return self.separator.join(tokens)
