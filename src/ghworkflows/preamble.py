# preamble.py
# The comment block at the top of every generated YAML file.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PreambleMode(Enum):
    REPLACE = "replace"              # custom text only
    CUSTOM_BEFORE = "before"         # custom text, then the generated text
    CUSTOM_AFTER = "after"           # generated text, then custom text
    GENERATED = "generated"          # generated text only


@dataclass(frozen=True)
class Preamble:
    content: str = ""
    mode: PreambleMode = PreambleMode.GENERATED

    @classmethod
    def just(cls, content: str) -> Preamble:
        return cls(content, PreambleMode.REPLACE)

    @classmethod
    def before(cls, content: str) -> Preamble:
        return cls(content, PreambleMode.CUSTOM_BEFORE)

    @classmethod
    def after(cls, content: str) -> Preamble:
        return cls(content, PreambleMode.CUSTOM_AFTER)


def commentify(text: str) -> str:
    """
    Turn free text into a YAML comment block followed by a blank line.
    Empty text gives an empty string.
    """
    if not text:
        return ""
    return "\n".join(f"# {line}".rstrip() for line in text.split("\n")) + "\n\n"


def provenance(source_path: Optional[str]) -> str:
    if source_path is not None:
        return (
            f"This file was generated using Python DSL ({source_path}).\n"
            "If you want to modify the workflow, please change the Python file and regenerate this YAML file.\n"
            "Generated with ghworkflows"
        )
    return (
        "This file was generated using a Python DSL.\n"
        "If you want to modify the workflow, please change the Python source and regenerate this YAML file.\n"
        "Generated with ghworkflows"
    )


def compose_preamble(preamble: Optional[Preamble], source_path: Optional[str]) -> str:
    generated = commentify(provenance(source_path))
    if preamble is None or preamble.mode is PreambleMode.GENERATED:
        return generated

    custom = commentify(preamble.content)
    if preamble.mode is PreambleMode.REPLACE:
        return custom
    if preamble.mode is PreambleMode.CUSTOM_BEFORE:
        return custom + generated
    return generated + custom
