import asyncio
import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CooldownTracker:
    """Per-command, per-user invocation timestamps.

    Each entry removes itself ``cooldown`` seconds after it was recorded, so the
    mapping only ever holds users that are currently cooling down.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._timestamps: dict[str, dict[int, float]] = {}

    def remaining(self, command_name: str, user_id: int, cooldown: float) -> float | None:
        """Return the seconds left before ``user_id`` may reuse the command, or None."""
        if cooldown <= 0:
            return None

        timestamps = self._timestamps.get(command_name)
        if not timestamps or user_id not in timestamps:
            return None

        expiration_time = timestamps[user_id] + cooldown
        now = self._clock()
        if now < expiration_time:
            return expiration_time - now
        return None

    def touch(self, command_name: str, user_id: int, cooldown: float) -> None:
        """Record an invocation and schedule its expiry."""
        if cooldown <= 0:
            return

        now = self._clock()
        timestamps = self._timestamps.setdefault(command_name, {})
        timestamps[user_id] = now

        loop = asyncio.get_running_loop()
        loop.call_later(cooldown, self._expire, command_name, user_id, now)
        logger.debug(f"Cooldown started for {command_name} by {user_id} ({cooldown}s)")

    def _expire(self, command_name: str, user_id: int, recorded_at: float) -> None:
        timestamps = self._timestamps.get(command_name)
        # Only drop the timestamp this timer was scheduled for
        if timestamps is not None and timestamps.get(user_id) == recorded_at:
            del timestamps[user_id]

    def get_timestamps(self, command_name: str) -> dict[int, float]:
        return dict(self._timestamps.get(command_name, {}))

    def reset(self, command_name: str | None = None, user_id: int | None = None) -> None:
        if command_name is None:
            if user_id is None:
                self._timestamps.clear()
            else:
                for timestamps in self._timestamps.values():
                    timestamps.pop(user_id, None)
            return

        timestamps = self._timestamps.get(command_name)
        if timestamps is None:
            return
        if user_id is None:
            timestamps.clear()
        else:
            timestamps.pop(user_id, None)
