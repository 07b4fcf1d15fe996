"""Model: a vertex list plus its own tree of nested models."""

from __future__ import annotations
from typing import Any, Tuple
from dataclasses import dataclass, field, replace
import numpy as np

from .vertex import Vertex
from .matrix import identity_matrix


@dataclass(frozen=True)
class Model:
    """
    A group of geometry.
    
    Attributes:
        vertex_list: Ordered vertices; primitives reference them by index
        primitive_list: Primitives (opaque here)
        color_list: Colors (opaque here)
        matrix: Local transform, applied by an earlier stage and carried through
        nested_models: Ordered child models
        name: Identifier
        visible: Whether the model is rendered
    """
    vertex_list: Tuple[Vertex, ...] = ()
    primitive_list: Tuple[Any, ...] = ()
    color_list: Tuple[Any, ...] = ()
    matrix: np.ndarray = field(default_factory=identity_matrix, compare=False)
    nested_models: Tuple['Model', ...] = ()
    name: str = ""
    visible: bool = True
    
    def __post_init__(self):
        """Store every list as a tuple so models can be shared safely."""
        object.__setattr__(self, "vertex_list", tuple(self.vertex_list))
        object.__setattr__(self, "primitive_list", tuple(self.primitive_list))
        object.__setattr__(self, "color_list", tuple(self.color_list))
        object.__setattr__(self, "nested_models", tuple(self.nested_models))
    
    def with_geometry(self, vertex_list, nested_models=None) -> 'Model':
        """
        Copy this model with a new vertex list (and optionally new nested models).
        
        Every other attribute, including the local matrix object, is shared
        with this model.
        """
        if nested_models is None:
            nested_models = self.nested_models
        return replace(self, vertex_list=vertex_list, nested_models=nested_models)
    
    def iter_preorder(self):
        """Yield this model and all nested models, pre-order."""
        yield self
        for m in self.nested_models:
            yield from m.iter_preorder()
