# actions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .arguments import args_of


@dataclass(frozen=True)
class Action:
    """
    A reusable GitHub action referenced by `uses:`.

    Subclasses declare typed inputs and map them to the action's input names
    in `to_yaml_arguments`. `_custom_inputs` passes inputs the wrapper does not
    know about yet; `_custom_version` overrides the pinned version.
    """
    owner: str = ""
    name: str = ""
    version: str = ""
    _custom_inputs: Tuple[Tuple[str, str], ...] = field(default=(), kw_only=True)
    _custom_version: Optional[str] = field(default=None, kw_only=True)

    @property
    def action_string(self) -> str:
        return f"{self.owner}/{self.name}@{self._custom_version or self.version}"

    def inputs(self) -> List[Tuple[str, Optional[Any]]]:
        return []

    def to_yaml_arguments(self) -> Dict[str, Any]:
        return args_of(self.inputs(), self._custom_inputs)


@dataclass(frozen=True)
class Checkout(Action):
    """actions/checkout: check out the repository under $GITHUB_WORKSPACE."""
    owner: str = "actions"
    name: str = "checkout"
    version: str = "v3"

    repository: Optional[str] = field(default=None, kw_only=True)
    ref: Optional[str] = field(default=None, kw_only=True)
    token: Optional[str] = field(default=None, kw_only=True)
    path: Optional[str] = field(default=None, kw_only=True)
    clean: Optional[bool] = field(default=None, kw_only=True)
    fetch_depth: Optional[int] = field(default=None, kw_only=True)
    lfs: Optional[bool] = field(default=None, kw_only=True)
    submodules: Optional[str] = field(default=None, kw_only=True)

    def inputs(self) -> List[Tuple[str, Optional[Any]]]:
        return [
            ("repository", self.repository),
            ("ref", self.ref),
            ("token", self.token),
            ("path", self.path),
            ("clean", _flag(self.clean)),
            ("fetch-depth", None if self.fetch_depth is None else str(self.fetch_depth)),
            ("lfs", _flag(self.lfs)),
            ("submodules", self.submodules),
        ]


@dataclass(frozen=True)
class CustomAction(Action):
    """Any action, with inputs given as a plain mapping."""
    custom_inputs: Dict[str, str] = field(default_factory=dict, kw_only=True)

    def inputs(self) -> List[Tuple[str, Optional[Any]]]:
        return list(self.custom_inputs.items())


def _flag(value: Optional[bool]) -> Optional[str]:
    # action inputs are strings on the wire
    if value is None:
        return None
    return "true" if value else "false"
