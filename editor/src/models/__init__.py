"""
Dilation Sandbox - Data Models

This module contains the data model classes for the sandbox state.
This is the MODEL in MVC architecture.

Public API: Point, Shape, TransformationLog and the Session that ties them
together.
"""

from .point import Point
from .shape import Shape, ShapeState, ClickAction
from .transform_log import LogEntry, LogKind, TransformationLog
from .session import Session

__all__ = [
    'Point',
    'Shape',
    'ShapeState',
    'ClickAction',
    'LogEntry',
    'LogKind',
    'TransformationLog',
    'Session',
]
