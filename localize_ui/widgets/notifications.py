"""Language change broadcast."""

import weakref
from typing import Any, Callable, Dict, Optional, Tuple

from ..utils.logging import get_module_logger

logger = get_module_logger('notifications')

Callback = Callable[[Any], None]


class LocaleNotifier:
    """
    Observer registry for "language changed" events.

    Observers are held weakly; a garbage-collected observer is dropped
    silently. Each observer has at most one callback.
    """

    def __init__(self):
        self._observers: Dict[int, Tuple['weakref.ref[Any]', Callback]] = {}

    def __len__(self) -> int:
        self._prune()
        return len(self._observers)

    def _prune(self) -> None:
        dead = [ident for ident, (ref, _) in self._observers.items() if ref() is None]
        for ident in dead:
            del self._observers[ident]

    def subscribe(self, observer: Any, callback: Callback) -> None:
        """
        Register ``callback(observer)`` to run on every post.

        Re-subscribing an observer replaces its callback.
        """
        ident = id(observer)
        ref = weakref.ref(observer, lambda _, ident=ident: self._observers.pop(ident, None))
        self._observers[ident] = (ref, callback)

    def unsubscribe(self, observer: Any) -> None:
        self._observers.pop(id(observer), None)

    def is_subscribed(self, observer: Any) -> bool:
        entry = self._observers.get(id(observer))
        return entry is not None and entry[0]() is observer

    def post(self, language: Optional[str] = None) -> int:
        """
        Notify every live observer.

        A failing callback is logged and does not stop delivery to the
        remaining observers.

        Args:
            language: New language code (for logging only)

        Returns:
            Number of observers notified
        """
        logger.debug("Posting language change (%s) to %d observers", language, len(self._observers))
        notified = 0
        for ref, callback in list(self._observers.values()):
            observer = ref()
            if observer is None:
                continue
            try:
                callback(observer)
            except Exception:
                logger.error("Observer %r failed to handle language change", observer, exc_info=True)
                continue
            notified += 1
        return notified
