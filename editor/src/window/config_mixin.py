"""Configuration management for DilationSandbox"""

import os
import json
import logging

from constants import STORAGE_FILE_NAME
from utils.logger import report_error

_logger = logging.getLogger('Config')


class ConfigMixin:
	"""Configuration file operations and transformation log visibility"""

	def _load_config(self):
		"""Load settings from the config file

		A missing file means defaults; an unreadable one is logged and ignored.
		"""
		self.show_history = False
		self.storage_path = os.path.join(self.config_dir, STORAGE_FILE_NAME)
		if not os.path.exists(self.config_file):
			return
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				config = json.load(f)
		except (OSError, ValueError) as e:
			_logger.warning(f"Ignoring config file {self.config_file}: {e}")
			return
		if not isinstance(config, dict):
			_logger.warning(f"Ignoring config file {self.config_file}: not a JSON object")
			return
		self.show_history = bool(config.get('show_history', False))
		storage_path = config.get('storage_path')
		if isinstance(storage_path, str) and storage_path:
			self.storage_path = os.path.expanduser(storage_path)

	def _save_config(self):
		"""Save settings to the config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)

			config = {
				'show_history': self.session.log.visible,
				'storage_path': self.storage_path,
			}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except OSError as e:
			report_error(e, f"Error saving config: {e}")

	def toggle_history(self):
		"""Show or hide the transformation log"""
		self.session.log.toggle_visible()
		self._save_config()
		self.refresh_view()
