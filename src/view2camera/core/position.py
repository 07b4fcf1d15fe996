"""Position (scene tree) transform from view to normalized camera coordinates."""

from __future__ import annotations
from typing import Optional

from ..scene.position import Position
from ..camera.camera import Camera
from ..utils.logger import PipelineLogger, get_logger
from .config import TransformConfig
from .model import view2camera_nested_model


def view2camera_position(
    position: Position,
    camera: Camera,
    logger: Optional[PipelineLogger] = None,
    config: Optional[TransformConfig] = None
) -> Position:
    """
    Recursively transform a tree of positions.
    
    Pre-order, depth-first traversal of the positions rooted at ``position``.
    A position whose model is hidden keeps that model untransformed, but its
    nested positions are still visited and transformed.
    
    Args:
        position: Root of the position tree, in view coordinates
        camera: Camera with the view volume data
        logger: Diagnostic sink (no-op unless debugging)
        config: Transform options
    
    Returns:
        New position tree with the same shape and names
    """
    config = config or TransformConfig()
    logger = get_logger(logger, config.debug or None)
    
    logger.message(f"==== 3. Render Position: {position.name}")
    
    pos2 = Position.build_from_model_name(position.model, position.name)
    if position.model.visible:
        pos2.model = view2camera_nested_model(
            position.model, camera.normalize_matrix, logger, config
        )
    else:
        logger.message(f"====== 3. Hidden model: {position.model.name} ======")
    
    for p in position.nested_positions:
        pos2.add_nested_position(view2camera_position(p, camera, logger, config))
    
    logger.message(f"==== 3. End position: {position.name} ====")
    
    return pos2
