"""Tool definitions and the tool-choice selector for chat requests."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class ToolChoice(str, Enum):
    """How the model may use the supplied tools.

    Serialized in lowercase (``"none"``, ``"auto"``, ``"required"``) as
    OpenAI-compatible endpoints expect.
    """

    NONE = "none"
    AUTO = "auto"
    REQUIRED = "required"


@dataclass(frozen=True)
class ToolDefinition:
    """A function tool the model may call.

    Attributes:
        name: Function name.
        description: Natural-language description shown to the model.
        parameters: JSON Schema for the function arguments.
    """

    name: str
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})

    def to_openai_dict(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


__all__ = ["ToolChoice", "ToolDefinition"]
