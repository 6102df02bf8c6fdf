"""
Tool call emitted by a model.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ToolCall:
    """A function invocation requested by the model.

    Attributes:
        call_id: Provider call identifier, echoed back with tool results.
        fn_name: Function name.
        fn_arguments: Parsed JSON arguments (empty when unparsable).
    """

    call_id: str
    fn_name: str
    fn_arguments: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"call_id": self.call_id, "fn_name": self.fn_name, "fn_arguments": self.fn_arguments}


__all__ = ["ToolCall"]
