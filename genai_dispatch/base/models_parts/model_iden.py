"""
Resolved model identity attached to every response.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..adapter_kind import AdapterKind

NAMESPACE_SEPARATOR = "::"


@dataclass(frozen=True)
class ModelIden:
    """Pair of the resolved adapter kind and the caller-supplied model identifier.

    Attributes:
        adapter_kind: Adapter that handles the model.
        model_name: The identifier exactly as passed by the caller, including
            any ``"<kind>::"`` namespace.
    """

    adapter_kind: AdapterKind
    model_name: str

    @property
    def wire_name(self) -> str:
        """Model name sent to the provider (namespace prefix removed)."""
        namespace, sep, rest = self.model_name.partition(NAMESPACE_SEPARATOR)
        if sep and AdapterKind.from_name(namespace) is not None:
            return rest
        return self.model_name

    def to_dict(self) -> Dict[str, Any]:
        return {"adapter_kind": self.adapter_kind.value, "model_name": self.model_name}

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.adapter_kind.value}/{self.model_name}"


__all__ = ["ModelIden", "NAMESPACE_SEPARATOR"]
