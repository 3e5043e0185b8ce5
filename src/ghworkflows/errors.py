# errors.py
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ConfigurationError(Exception):
    """
    Raised when a workflow cannot be rendered with the requested settings,
    e.g. a consistency check was asked for but the workflow has no source file.

    Nothing is rendered or written when this is raised.
    """
    kind: str
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)
