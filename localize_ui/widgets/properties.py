"""Side-table of localization properties attached to components."""

import weakref
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LocalizationProperties:
    """Localization metadata of one component (keys by property name)."""
    auto_localize: bool = True
    keys: Dict[str, str] = field(default_factory=dict)


class PropertyStore:
    """
    Weak, identity-keyed map from components to their properties.

    Components are not modified; an entry disappears together with its
    component.
    """

    def __init__(self):
        self._properties: 'weakref.WeakKeyDictionary[Any, LocalizationProperties]' = (
            weakref.WeakKeyDictionary()
        )

    def __contains__(self, widget: Any) -> bool:
        return widget in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def get(self, widget: Any) -> LocalizationProperties:
        """Properties of a component, created with defaults on first access."""
        properties = self._properties.get(widget)
        if properties is None:
            properties = LocalizationProperties()
            self._properties[widget] = properties
        return properties

    def get_key(self, widget: Any, name: str) -> Optional[str]:
        """Stored key for a property name (e.g. 'localize_key')."""
        properties = self._properties.get(widget)
        if properties is None:
            return None
        return properties.keys.get(name)

    def set_key(self, widget: Any, name: str, value: Optional[str]) -> None:
        """
        Store a key.

        Setting None is ignored: a stored key is only ever replaced, never
        cleared, so a captured key survives later re-localizations.
        """
        if value is None:
            return
        self.get(widget).keys[name] = value

    def set_auto_localize(self, widget: Any, enabled: bool) -> None:
        self.get(widget).auto_localize = enabled

    def discard(self, widget: Any) -> None:
        """Forget everything stored for a component."""
        self._properties.pop(widget, None)
