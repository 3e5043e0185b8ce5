# emitter.py
# Ordered document -> YAML text.
from __future__ import annotations

import re
from typing import Any, Dict

import yaml

_STR_TAG = "tag:yaml.org,2002:str"
_MAP_TAG = "tag:yaml.org,2002:map"
_BOOL_TAG = "tag:yaml.org,2002:bool"


class WorkflowDumper(yaml.SafeDumper):
    """
    SafeDumper tuned for GitHub workflow files:
      - mapping keys are emitted plain (`on:`, `runs-on:`)
      - string values are single-quoted, multi-line strings use literal blocks
      - only true/false are booleans, so `on` stays a plain key
      - no anchors/aliases
    """

    def ignore_aliases(self, data: Any) -> bool:
        return True


WorkflowDumper.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeDumper.yaml_implicit_resolvers.items()
}
WorkflowDumper.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _represent_str(dumper: WorkflowDumper, data: str) -> yaml.ScalarNode:
    style = "|" if "\n" in data else "'"
    return dumper.represent_scalar(_STR_TAG, data, style=style)


def _represent_dict(dumper: WorkflowDumper, data: Dict[str, Any]) -> yaml.MappingNode:
    pairs = []
    node = yaml.MappingNode(_MAP_TAG, pairs, flow_style=None)
    for key, value in data.items():
        pairs.append((yaml.ScalarNode(_STR_TAG, str(key)), dumper.represent_data(value)))
    return node


WorkflowDumper.add_representer(str, _represent_str)
WorkflowDumper.add_representer(dict, _represent_dict)


def dump(document: Dict[str, Any]) -> str:
    """Serialize an ordered document; same input gives byte-identical output."""
    return yaml.dump(
        document,
        Dumper=WorkflowDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    )
