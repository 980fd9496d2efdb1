"""Transformation log: append-only record of what the user did.

Entries are structured (kind + parameters) and only turned into text when
displayed, so the numeric parameters stay available for replay.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from constants import EMPTY_TEXT, HISTORY_PREFIX
from models.point import Point, format_number


class LogKind(str, Enum):
    ADD_POINT = 'add_point'
    CLOSE_SHAPE = 'close_shape'
    DILATE = 'dilate'
    UNDO = 'undo'
    SET_CENTER = 'set_center'
    RESET_CENTER = 'reset_center'
    SAVE_SHAPE = 'save_shape'
    LOAD_SHAPE = 'load_shape'


@dataclass(frozen=True)
class LogEntry:
    kind: LogKind
    params: Dict[str, Any] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Constructors

    @classmethod
    def added_point(cls, point: Point) -> 'LogEntry':
        return cls(LogKind.ADD_POINT, {'point': point})

    @classmethod
    def closed_shape(cls, point: Point) -> 'LogEntry':
        return cls(LogKind.CLOSE_SHAPE, {'point': point})

    @classmethod
    def dilated(cls, x_scale: float, y_scale: float, x_text: str = '', y_text: str = '') -> 'LogEntry':
        """Dilation entry; the raw input text is kept for display."""
        return cls(LogKind.DILATE, {
            'x_scale': x_scale,
            'y_scale': y_scale,
            'x_text': x_text,
            'y_text': y_text,
        })

    @classmethod
    def undo(cls) -> 'LogEntry':
        return cls(LogKind.UNDO)

    @classmethod
    def set_center(cls, point: Point) -> 'LogEntry':
        return cls(LogKind.SET_CENTER, {'point': point})

    @classmethod
    def reset_center(cls, point: Point) -> 'LogEntry':
        return cls(LogKind.RESET_CENTER, {'point': point})

    @classmethod
    def saved_shape(cls) -> 'LogEntry':
        return cls(LogKind.SAVE_SHAPE)

    @classmethod
    def loaded_shape(cls) -> 'LogEntry':
        return cls(LogKind.LOAD_SHAPE)

    # ------------------------------------------------------------------
    # Rendering

    def render(self) -> str:
        kind = self.kind
        p = self.params
        if kind is LogKind.ADD_POINT:
            return f"Added point {p['point']}"
        if kind is LogKind.CLOSE_SHAPE:
            return f"Closed shape at Point A {p['point']}"
        if kind is LogKind.DILATE:
            x_label = p.get('x_text') or format_number(p['x_scale'])
            y_label = p.get('y_text') or format_number(p['y_scale'])
            return f"Dilated by x-scale {x_label}, y-scale {y_label}"
        if kind is LogKind.UNDO:
            return "Undo"
        if kind is LogKind.SET_CENTER:
            return f"Set center to {p['point']}"
        if kind is LogKind.RESET_CENTER:
            return f"Reset center to {p['point']}"
        if kind is LogKind.SAVE_SHAPE:
            return "Saved shape"
        if kind is LogKind.LOAD_SHAPE:
            return "Loaded shape"
        raise ValueError(f"Unknown log entry kind: {kind}")

    def __str__(self):
        return self.render()


class TransformationLog:
    """Ordered, append-only list of LogEntry with a visibility flag.

    Undo never removes entries; it appends an "Undo" entry instead. The log
    is only emptied by an explicit full clear.
    """

    def __init__(self, visible: bool = False):
        self._entries: List[LogEntry] = []
        self.visible = visible

    def append(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def toggle_visible(self) -> bool:
        self.visible = not self.visible
        return self.visible

    def clear(self) -> None:
        self._entries = []

    def render(self) -> str:
        """Entries joined by ", ", or "None" if empty."""
        if not self._entries:
            return EMPTY_TEXT
        return ', '.join(entry.render() for entry in self._entries)

    def display_text(self) -> str:
        return f"{HISTORY_PREFIX}{self.render()}"
