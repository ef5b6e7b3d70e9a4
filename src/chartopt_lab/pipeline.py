"""Resolve an option file into a fully merged option tree."""

import os
import json
import logging
import traceback
from typing import Any, Dict, Optional

import yaml

from .config import Config
from .components import register_builtin_components
from .core.dependency import dependency_order
from .core.registry import COMPONENT_REGISTRY, ClassRegistry
from .model.global_model import GlobalModel
from .model.theme import load_theme


logger = logging.getLogger(__name__)


def load_option(option_path: str) -> Dict[str, Any]:
    """Load a raw option tree from a YAML or JSON file."""
    if not os.path.isfile(option_path):
        raise FileNotFoundError(f"Option file not found: {option_path}")
    with open(option_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Option file must hold a mapping: {option_path}")
    return data


def save_json(filepath: str, data: Dict[str, Any], indent: int = 2) -> None:
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def run_pipeline(
    config: Config,
    option: Optional[Dict[str, Any]] = None,
    registry: Optional[ClassRegistry] = None,
) -> GlobalModel:
    """Build every component of an option tree and save the resolved result.

    Args:
        config: Run configuration.
        option: Raw option tree. Loaded from ``config.input.option_path`` when None.
        registry: Registry to build with. The built-in kinds are registered
            into it first when it is empty.

    Returns:
        The built document model.
    """
    registry = registry or COMPONENT_REGISTRY
    if not registry.get_all_main_types():
        register_builtin_components(registry)

    if option is None:
        if not config.input.option_path:
            raise ValueError("No option given and config.input.option_path is not set")
        option = load_option(config.input.option_path)

    theme = load_theme(config.theme.path)
    logger.info("Using theme '%s'", theme.name)

    main_types = [key for key in option if registry.has_class(key)]
    logger.info("Build order: %s", ", ".join(dependency_order(main_types, registry)))

    try:
        model = GlobalModel(option, theme=theme, registry=registry)
    except Exception:
        logger.error("Build failed:\n%s", traceback.format_exc())
        raise

    for error in model.errors:
        logger.warning("Component skipped: %s", error)

    save_json(config.output_path, model.get_option(), indent=config.output.indent)
    logger.info("Saved resolved option to %s", config.output_path)
    return model
