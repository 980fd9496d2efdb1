"""
Undo History Manager for Dilation Sandbox

Bounded stack of state snapshots. Every mutating operation pushes the state
it is about to replace; undo pops the most recent one. When the stack grows
past max_history the oldest snapshot is dropped.
"""

import copy
import logging


class HistoryManager:
	"""Manages undo history with state snapshots"""

	def __init__(self, max_history=20):
		"""
		Initialize the history manager

		Args:
			max_history: Maximum number of snapshots to keep
		"""
		self.max_history = max_history
		self.history = []  # List of snapshots, most recent last
		self._listeners = []  # Callbacks to notify on state changes
		self._logger = logging.getLogger('History')

	def save_state(self, state_data, description=""):
		"""
		Push a snapshot onto the stack

		Args:
			state_data: State to save (deep-copied)
			description: Optional description of the change about to happen
		"""
		snapshot = {
			'data': copy.deepcopy(state_data),
			'description': description
		}
		self.history.append(snapshot)

		# Evict the oldest snapshot once over capacity
		if len(self.history) > self.max_history:
			self.history.pop(0)

		self._notify_listeners()
		self._logger.debug(f"State saved: {description} (total: {len(self.history)})")

	def undo(self):
		"""
		Pop the most recent snapshot

		Returns:
			The saved state, or None if the stack is empty
		"""
		if not self.can_undo():
			self._logger.debug("Cannot undo - history is empty")
			return None

		snapshot = self.history.pop()
		self._notify_listeners()

		self._logger.debug(f"Undo: {snapshot['description']} (remaining: {len(self.history)})")
		return copy.deepcopy(snapshot['data'])

	def peek(self):
		"""Return a copy of the most recent snapshot without removing it, or None"""
		if not self.history:
			return None
		return copy.deepcopy(self.history[-1]['data'])

	def can_undo(self):
		"""Check if undo is available"""
		return len(self.history) > 0

	def __len__(self):
		return len(self.history)

	def clear(self):
		"""Clear all history"""
		self.history = []
		self._notify_listeners()
		self._logger.debug("History cleared")

	def add_listener(self, callback):
		"""
		Add a listener to be notified when history state changes

		Args:
			callback: Function to call when history changes (receives can_undo)
		"""
		self._listeners.append(callback)

	def remove_listener(self, callback):
		"""Remove a listener"""
		if callback in self._listeners:
			self._listeners.remove(callback)

	def _notify_listeners(self):
		"""Notify all listeners of history state change"""
		for callback in self._listeners:
			try:
				callback(self.can_undo())
			except Exception as e:
				self._logger.warning(f"Error notifying listener: {e}")

	def get_undo_description(self):
		"""Get the description of the change that undo would revert"""
		if self.can_undo():
			return self.history[-1]['description']
		return ""
