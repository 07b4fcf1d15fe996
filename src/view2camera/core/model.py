"""
Model transform from view coordinates to normalized camera coordinates.

A model's nested models are transformed regardless of their own visible
flag; only the position traversal looks at visibility.
"""

from __future__ import annotations
from typing import Optional

from ..scene.model import Model
from ..scene.matrix import Matrix
from ..utils.logger import PipelineLogger, get_logger
from .config import TransformConfig
from .vertex import view2camera_vertices

LOG_PREFIX = "3. Camera    "


def view2camera_model(
    model: Model,
    normalize_matrix: Matrix,
    config: Optional[TransformConfig] = None
) -> Model:
    """
    Transform the vertices of one model, not its nested models.
    
    Args:
        model: Model with vertices in view coordinates
        normalize_matrix: The camera's normalization matrix
        config: Transform options
    
    Returns:
        New model with normalized camera coordinates; every other attribute,
        including nested_models, is shared with ``model``
    """
    config = config or TransformConfig()
    new_vertex_list = view2camera_vertices(
        model.vertex_list, normalize_matrix, vectorized=config.vectorized
    )
    return model.with_geometry(new_vertex_list)


def view2camera_nested_model(
    model: Model,
    normalize_matrix: Matrix,
    logger: Optional[PipelineLogger] = None,
    config: Optional[TransformConfig] = None
) -> Model:
    """
    Recursively transform a model and its tree of nested models.
    
    Pre-order, depth-first: the model's own vertices are transformed (and
    logged) before its nested models are visited.
    
    Args:
        model: Root of the model tree
        normalize_matrix: The camera's normalization matrix
        logger: Diagnostic sink (no-op unless debugging)
        config: Transform options
    
    Returns:
        New model tree with the same shape and attributes
    """
    config = config or TransformConfig()
    logger = get_logger(logger, config.debug or None)
    
    logger.message(f"==== 3. View-to-Camera transformation of: {model.name} ====")
    
    mod2 = view2camera_model(model, normalize_matrix, config)
    
    logger.vertex_list(LOG_PREFIX, mod2)
    logger.color_list(LOG_PREFIX, mod2)
    logger.primitive_list(LOG_PREFIX, mod2)
    
    new_nested_models = [
        view2camera_nested_model(m, normalize_matrix, logger, config)
        for m in model.nested_models
    ]
    
    logger.message(f"==== 3. End Model: {mod2.name} ====")
    
    return mod2.with_geometry(mod2.vertex_list, new_nested_models)
