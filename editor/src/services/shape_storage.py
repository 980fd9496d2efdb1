"""
Dilation Sandbox - Shape Storage Service

Persists the point set in a key-value string store. The store is a JSON
object on disk mapping string keys to string values; the shape itself is
stored under SAVED_SHAPE_KEY as a JSON array of {"x": .., "y": ..} objects.

Reads never fail loudly: a missing or unreadable store, or a corrupt saved
shape, reads as "nothing saved".
"""

import json
import logging
import math
import os

from constants import SAVED_SHAPE_KEY
from models.point import Point
from models.transform_log import LogEntry
from utils.errors import EmptyLoadError, InvalidInputError

_logger = logging.getLogger('ShapeStorage')

NO_SAVED_SHAPE_MESSAGE = 'No saved shape found.'


class KeyValueStore:
    """String key-value store backed by a JSON file

    Last write wins; there are no transactions.

    Args:
        path: Path of the JSON file (created on first write)
    """

    def __init__(self, path):
        self.path = path

    def _read_all(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            _logger.warning(f"Could not read store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            _logger.warning(f"Ignoring store {self.path}: not a JSON object")
            return {}
        return data

    def _write_all(self, data):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def get_item(self, key):
        """Return the stored string, or None if absent"""
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key, value):
        data = self._read_all()
        data[key] = str(value)
        self._write_all(data)

    def remove_item(self, key):
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


def serialize_shape(points):
    """Serialize points to a JSON array of {"x", "y"} objects"""
    return json.dumps([p.to_dict() for p in points], allow_nan=False)


def _coordinate(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"Invalid coordinate: {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"Invalid coordinate: {value!r}")
    return value


def deserialize_shape(text):
    """Parse a serialized shape back into Points.

    Integers stay integers and reals stay reals, so the round trip is exact.

    Raises:
        InvalidInputError: Text is not a JSON array of {"x", "y"} objects
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise InvalidInputError(f"Saved shape is not valid JSON: {e}") from None
    if not isinstance(data, list):
        raise InvalidInputError("Saved shape must be a list of points")

    points = []
    for item in data:
        if not isinstance(item, dict) or 'x' not in item or 'y' not in item:
            raise InvalidInputError(f"Invalid point entry: {item!r}")
        points.append(Point(_coordinate(item['x']), _coordinate(item['y'])))
    return points


def save_shape(session, store, key=SAVED_SHAPE_KEY):
    """Persist the session's points and log the save"""
    store.set_item(key, serialize_shape(session.shape.points))
    session.log.append(LogEntry.saved_shape())
    _logger.info(f"Shape saved under '{key}' ({len(session.shape)} points)")


def read_saved_shape(store, key=SAVED_SHAPE_KEY):
    """Return the saved points, or None if nothing usable is stored"""
    text = store.get_item(key)
    if not text:
        return None
    try:
        return deserialize_shape(text)
    except InvalidInputError as e:
        _logger.warning(f"Ignoring saved shape under '{key}': {e}")
        return None


def load_shape(session, store, key=SAVED_SHAPE_KEY):
    """Replace the session's points with the saved shape.

    The current state is snapshotted first, so a load can be undone.

    Raises:
        EmptyLoadError: Nothing usable is saved under ``key``
    """
    points = read_saved_shape(store, key)
    if points is None:
        raise EmptyLoadError(NO_SAVED_SHAPE_MESSAGE)

    session.snapshot("Load shape")
    session.shape.replace_points(points)
    session.has_dilated = False
    session.log.append(LogEntry.loaded_shape())
    _logger.info(f"Shape loaded from '{key}' ({len(points)} points)")
    return points
