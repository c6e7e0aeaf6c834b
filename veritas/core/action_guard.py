"""
Per-client, per-action single-flight guards.

A guard holds a busy flag (a second concurrent invocation is rejected, not
queued) and a generation counter. Invalidating a guard bumps the generation,
so a result that arrives for an earlier generation is recognised as stale and
dropped by the caller instead of being delivered to a screen the user left.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Dict, Tuple

from veritas.config import settings
from veritas.core.errors import ActionBusyError

logger = logging.getLogger(__name__)


class ActionGuard:
    def __init__(self):
        self.busy = False
        self.generation = 0
        self.last_used = time.time()

    def begin(self) -> int:
        if self.busy:
            raise ActionBusyError("action already in progress")
        self.busy = True
        self.generation += 1
        self.last_used = time.time()
        return self.generation

    def finish(self) -> None:
        self.busy = False
        self.last_used = time.time()

    def invalidate(self) -> None:
        self.generation += 1

    def is_current(self, token: int) -> bool:
        return token == self.generation

    @asynccontextmanager
    async def hold(self):
        """Yields the invocation token; the busy flag is cleared on exit, success or not."""
        token = self.begin()
        try:
            yield token
        finally:
            self.finish()


class ActionGuardRegistry:
    """In-memory map of (client id, action) -> ActionGuard, pruned of idle guards when it grows."""

    def __init__(self, memory_limit: int = settings.action_guard_memory_limit):
        self.memory_limit = memory_limit
        self._guards: Dict[Tuple[str, str], ActionGuard] = {}

    def __len__(self) -> int:
        return len(self._guards)

    def get(self, client_id: str, action: str) -> ActionGuard:
        key = (client_id, action)
        guard = self._guards.get(key)
        if guard is None:
            if len(self._guards) >= self.memory_limit:
                self._cleanup_idle()
            guard = self._guards[key] = ActionGuard()
        return guard

    def _cleanup_idle(self) -> None:
        idle = sorted(
            (k for k, g in self._guards.items() if not g.busy),
            key=lambda k: self._guards[k].last_used,
        )
        # Drop the older half of idle guards; busy ones must survive.
        expired = idle[: max(1, len(idle) // 2)]
        for k in expired:
            del self._guards[k]
        logger.info(f"[GUARDS] Cleanup: removed {len(expired)} idle guards.")
