"""Transform plugin system.

Each transform maps points relative to a center of transformation and
describes itself for the transformation log. Dilation is the only
registered transform; reflections or rotations plug in the same way.
"""

from .base_transform import BaseTransform
from .dilation_transform import DilationTransform

# Registry of available transforms
AVAILABLE_TRANSFORMS = {
    'dilation': DilationTransform,
}


def get_transform(transform_type: str, **params) -> BaseTransform:
    """Get transform instance by type.

    Args:
        transform_type: Transform type identifier
        **params: Constructor parameters for the transform

    Returns:
        Transform instance or None if not found
    """
    transform_class = AVAILABLE_TRANSFORMS.get(transform_type)
    if transform_class:
        return transform_class(**params)
    return None


def get_available_transforms():
    """Get list of available transform types.

    Returns:
        List of (name, display_name) tuples
    """
    transforms = []
    for name, cls in AVAILABLE_TRANSFORMS.items():
        instance = cls()
        transforms.append((name, instance.get_display_name()))
    return transforms


__all__ = [
    'BaseTransform',
    'DilationTransform',
    'AVAILABLE_TRANSFORMS',
    'get_transform',
    'get_available_transforms',
]
