"""Position: a named placement of one model in the scene tree."""

from __future__ import annotations
from typing import List, Optional
from dataclasses import dataclass, field

from .model import Model


@dataclass
class Position:
    """
    A node of the scene tree.
    
    Attributes:
        model: The model placed at this position
        name: Identifier
        nested_positions: Ordered child positions
    """
    model: Model
    name: str = ""
    nested_positions: List['Position'] = field(default_factory=list)
    
    @classmethod
    def build_from_model_name(cls, model: Model, name: Optional[str] = None) -> 'Position':
        """Create a position with no children; the name defaults to the model's."""
        return cls(model=model, name=model.name if name is None else name)
    
    def add_nested_position(self, *positions: 'Position') -> None:
        """Append child positions (used while building a new tree)."""
        self.nested_positions.extend(positions)
    
    def iter_preorder(self):
        """Yield this position and all nested positions, pre-order."""
        yield self
        for p in self.nested_positions:
            yield from p.iter_preorder()
