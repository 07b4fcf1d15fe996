"""Transform configuration."""

from __future__ import annotations
from typing import Any, Dict, Union
from dataclasses import dataclass, fields
from pathlib import Path
from omegaconf import DictConfig, OmegaConf

from ..camera.config import to_dict_config


@dataclass
class TransformConfig:
    """Configuration for the view-to-camera stage."""
    
    # Print stage diagnostics even when V2C_DEBUG is unset
    debug: bool = False
    # Transform each vertex list with one numpy product
    vectorized: bool = True


def load_transform_config(
    cfg: Union[str, Path, Dict[str, Any], DictConfig, None] = None
) -> TransformConfig:
    """
    Build a TransformConfig from a dict, DictConfig or YAML path.
    
    A top-level 'transform' section is used if present; otherwise the
    TransformConfig keys are picked from the top level and anything else
    (e.g. a 'camera' section) is ignored.
    
    Raises:
        omegaconf.errors.ValidationError: If a value has the wrong type
    """
    schema = OmegaConf.structured(TransformConfig)
    if cfg is None:
        return OmegaConf.to_object(schema)
    
    loaded = to_dict_config(cfg)
    if "transform" in loaded:
        section = loaded.transform
    else:
        names = [f.name for f in fields(TransformConfig) if f.name in loaded]
        section = OmegaConf.masked_copy(loaded, names)
    
    return OmegaConf.to_object(OmegaConf.merge(schema, section))
