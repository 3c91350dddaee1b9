"""
Snapshot publication service.
"""

import logging
import threading
from typing import Optional

from ..models import Contributors


class SnapshotPublisher:
    """
    Holds the snapshot visible to readers.

    Publishing replaces the reference in a single assignment, so readers
    never block and always see a complete snapshot.
    """

    def __init__(self, initial: Contributors, logger: Optional[logging.Logger] = None):
        self._current = initial
        self._write_lock = threading.Lock()
        self.published_count = 0
        self.logger = logger or logging.getLogger(__name__)

    def publish(self, snapshot: Contributors) -> None:
        """Replace the visible snapshot."""
        with self._write_lock:
            self._current = snapshot
            self.published_count += 1
        self.logger.debug(f"Published snapshot #{self.published_count} with {snapshot.count} contributors")

    def current(self) -> Contributors:
        """Get the visible snapshot."""
        return self._current
