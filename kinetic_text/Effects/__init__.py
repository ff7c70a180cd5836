"""
Text effects module with auto-discovery.

This module automatically discovers and loads all effect classes
from the category subdirectories, making them available through a
central registry.
"""

import importlib
from pathlib import Path
from typing import Any

from loguru import logger

from .base_effect import (
    BaseEffect,
    EFFECTS_REGISTRY,
    KineticTextError,
    SegmentFrame,
    UnknownEffectError,
    compose_segments,
    get_effect_class,
    list_available_effects,
    register_effect,
)


# Export the main components
__all__ = [
    'BaseEffect',
    'EFFECTS_REGISTRY',
    'KineticTextError',
    'SegmentFrame',
    'UnknownEffectError',
    'compose_segments',
    'create_effect',
    'get_effect_class',
    'list_available_effects',
    'load_all_effects',
    'register_effect',
]

EFFECT_CATEGORIES = ['reveal', 'ambient', 'reactive']


def load_all_effects():
    """
    Automatically discover and load all effect modules from subdirectories.

    Every Python module found under the category directories is imported,
    which registers its effects through the @register_effect decorator.
    """
    package_dir = Path(__file__).parent
    loaded_count = 0

    for category in EFFECT_CATEGORIES:
        category_path = package_dir / category
        if not category_path.exists():
            logger.debug(f"Category directory '{category}' does not exist, skipping...")
            continue

        for file_path in sorted(category_path.glob('*.py')):
            if file_path.name.startswith('_'):
                continue  # Skip private modules

            full_module_name = f"{__package__}.{category}.{file_path.stem}"
            try:
                logger.debug(f"Loading effect module: {full_module_name}")
                importlib.import_module(full_module_name)
                loaded_count += 1
            except Exception as e:
                logger.error(f"Failed to load effect module '{full_module_name}': {e}")

    logger.info(f"Loaded {loaded_count} effect modules, {len(EFFECTS_REGISTRY)} effects registered")
    return loaded_count


def create_effect(name: str, text: Any = "", parent_widget: Any = None, **options) -> BaseEffect:
    """
    Instantiate a registered effect.

    Raises:
        UnknownEffectError: If ``name`` is not registered.
    """
    effect_class = get_effect_class(name)
    if effect_class is None:
        raise UnknownEffectError(
            f"Unknown effect '{name}'. Available: {', '.join(list_available_effects())}"
        )
    return effect_class(parent_widget, text, **options)


# Auto-load all effects when this module is imported
try:
    load_all_effects()
except Exception as e:
    logger.error(f"Failed to auto-load effects: {e}")
