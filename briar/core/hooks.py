"""Hook Registry

Filters and actions the theme attaches its callbacks to. A filter threads a
value through its callbacks and returns the result; an action calls its
callbacks for their side effects.
"""

import logging
import threading
from typing import Dict, List, Callable, Any, Tuple
from collections import defaultdict
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


@dataclass(frozen=True)
class HookCallback:
    callback: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = 1


class HookRegistry:
    """Thread-safe registry of priority-ordered filter and action callbacks."""

    def __init__(self):
        self._hooks: Dict[str, List[HookCallback]] = defaultdict(list)
        self._lock = threading.RLock()
        self._fired: Dict[str, int] = defaultdict(int)

    def add_filter(self, tag: str, callback: Callable[..., Any],
                   priority: int = DEFAULT_PRIORITY, accepted_args: int = 1):
        with self._lock:
            entry = HookCallback(callback, priority, accepted_args)
            for existing in self._hooks[tag]:
                if existing.callback == callback and existing.priority == priority:
                    return
            self._hooks[tag].append(entry)
            # Stable sort keeps registration order within a priority
            self._hooks[tag].sort(key=lambda h: h.priority)

    def remove_filter(self, tag: str, callback: Callable[..., Any],
                      priority: int = DEFAULT_PRIORITY) -> bool:
        with self._lock:
            for existing in self._hooks.get(tag, []):
                if existing.callback == callback and existing.priority == priority:
                    self._hooks[tag].remove(existing)
                    return True
            return False

    def has_filter(self, tag: str) -> bool:
        with self._lock:
            return bool(self._hooks.get(tag))

    def _callbacks(self, tag: str) -> Tuple[HookCallback, ...]:
        with self._lock:
            self._fired[tag] += 1
            return tuple(self._hooks.get(tag, []))

    def apply_filters(self, tag: str, value: Any, *args: Any) -> Any:
        """Pass ``value`` through every callback registered on ``tag``.

        Each callback receives the current value plus the first
        ``accepted_args - 1`` extra arguments. A callback that raises is
        logged and skipped; the value it received is passed on unchanged.
        """
        callbacks = self._callbacks(tag)
        if not callbacks:
            logger.debug(f"No filters for {tag}")
            return value

        for hook in callbacks:
            try:
                value = hook.callback(value, *args[:max(hook.accepted_args - 1, 0)])
            except Exception as e:
                logger.error(
                    f"Error in filter {getattr(hook.callback, '__name__', hook.callback)} for {tag}: {e}",
                    exc_info=True,
                )
                continue
        return value

    # Actions share storage with filters, as in the host
    add_action = add_filter
    remove_action = remove_filter
    has_action = has_filter

    def do_action(self, tag: str, *args: Any) -> List[Any]:
        """Call every callback registered on ``tag``; returns their results."""
        results = []
        for hook in self._callbacks(tag):
            try:
                results.append(hook.callback(*args[:hook.accepted_args]))
            except Exception as e:
                logger.error(
                    f"Error in action {getattr(hook.callback, '__name__', hook.callback)} for {tag}: {e}",
                    exc_info=True,
                )
                continue
        return results

    def did_action(self, tag: str) -> int:
        """How many times ``tag`` has been applied or fired."""
        with self._lock:
            return self._fired.get(tag, 0)

    def get_callback_count(self, tag: str) -> int:
        with self._lock:
            return len(self._hooks.get(tag, []))


__all__ = ['HookRegistry', 'HookCallback', 'DEFAULT_PRIORITY']
