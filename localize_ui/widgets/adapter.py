"""Generic localization adapter for UI components."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..core.resolver import KeyResolver
from ..core.segments import key_for_segment
from ..utils.logging import get_module_logger
from .components import (
    CONTROL_STATES,
    BarButtonItem,
    Button,
    ImageView,
    Label,
    NavigationItem,
    SearchBar,
    SegmentedControl,
    TabBarItem,
    TextField,
    TextView,
    ViewController,
)
from .notifications import LocaleNotifier
from .properties import PropertyStore

logger = get_module_logger('adapter')

TEXT = 'text'
FONT = 'font'
IMAGE = 'image'
SEGMENTS = 'segments'

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


class UnsupportedWidgetError(TypeError):
    """Raised when no bindings are registered for a component type."""

    def __init__(self, widget: Any):
        self.widget_type = type(widget)
        super().__init__(f"No localization bindings for {self.widget_type.__name__}")


@dataclass(frozen=True)
class AttributeBinding:
    """
    Connects one stored key property to one displayed attribute.

    ``size_property`` is only used by font bindings; ``update_key``
    disables key capture for attributes whose key is derived (segments).
    """
    kind: str
    key_property: str
    getter: Getter
    setter: Setter
    size_property: Optional[str] = None
    update_key: bool = True


def attribute(name: str):
    """Getter/setter pair for a plain attribute."""
    def getter(widget):
        return getattr(widget, name)

    def setter(widget, value):
        setattr(widget, name, value)

    return getter, setter


def item(name: str, entry: str):
    """Getter/setter pair for one entry of a dict attribute."""
    def getter(widget):
        return getattr(widget, name).get(entry)

    def setter(widget, value):
        getattr(widget, name)[entry] = value

    return getter, setter


def state_title(state: str):
    """Getter/setter pair for a button title in one control state."""
    def getter(button):
        return button.title(state)

    def setter(button, value):
        button.set_title(value, state)

    return getter, setter


def text(key_property: str, target: str) -> AttributeBinding:
    return AttributeBinding(TEXT, key_property, *attribute(target))


def font(name_property: str = 'localize_font_name', size_property: str = 'localize_font_size') -> AttributeBinding:
    return AttributeBinding(FONT, name_property, *attribute('font'), size_property=size_property)


def image(key_property: str, target: str) -> AttributeBinding:
    return AttributeBinding(IMAGE, key_property, *attribute(target))


WIDGET_BINDINGS: Dict[type, List[AttributeBinding]] = {
    BarButtonItem: [text('localize_key', 'title')],
    Button: (
        [AttributeBinding(TEXT, 'localize_key', *state_title(state)) for state in CONTROL_STATES]
        + [
            font(),
            AttributeBinding(IMAGE, 'localize_background', *item('background_images', 'normal')),
            AttributeBinding(IMAGE, 'localize_background_selected', *item('background_images', 'selected')),
        ]
    ),
    Label: [text('localize_key', 'text'), font()],
    NavigationItem: [text('localize_title', 'title'), text('localize_prompt', 'prompt')],
    SearchBar: [text('localize_placeholder', 'placeholder'), text('localize_prompt', 'prompt')],
    SegmentedControl: [
        AttributeBinding(SEGMENTS, 'localize_key', *attribute('titles'), update_key=False),
    ],
    TabBarItem: [text('localize_key', 'title')],
    TextField: [
        text('localize_text', 'text'),
        text('localize_placeholder', 'placeholder'),
        font(),
    ],
    TextView: [text('localize_key', 'text'), font()],
    ViewController: [text('localize_title', 'title')],
    ImageView: [image('localize_image', 'image'), image('localize_highlighted', 'highlighted_image')],
}


class LocalizeAdapter:
    """
    Applies the key resolver to components.

    Keys live in a :class:`PropertyStore`; values live on the component.
    ``awake`` is the load hook: it localizes the component once and
    subscribes it to language changes.

    Usage:
        adapter = LocalizeAdapter(KeyResolver(catalog), notifier=notifier)
        adapter.store.set_key(label, 'localize_key', 'home.title')
        adapter.awake(label)
    """

    def __init__(
        self,
        resolver: KeyResolver,
        store: Optional[PropertyStore] = None,
        notifier: Optional[LocaleNotifier] = None,
        bindings: Optional[Dict[type, List[AttributeBinding]]] = None
    ):
        self.resolver = resolver
        self.store = store if store is not None else PropertyStore()
        self.notifier = notifier
        self.bindings = dict(WIDGET_BINDINGS if bindings is None else bindings)

    def register(self, widget_type: type, bindings: List[AttributeBinding]) -> None:
        """Register (or replace) the bindings of a component type."""
        self.bindings[widget_type] = list(bindings)

    def bindings_for(self, widget: Any) -> List[AttributeBinding]:
        """Bindings of the closest registered type in the component's MRO."""
        for widget_type in type(widget).__mro__:
            if widget_type in self.bindings:
                return self.bindings[widget_type]
        raise UnsupportedWidgetError(widget)

    def awake(self, widget: Any) -> bool:
        """
        Load hook: localize now and on every language change.

        Returns:
            True if the component auto-localizes, False if it opted out
        """
        if not self.store.get(widget).auto_localize:
            return False

        self.localize(widget)
        if self.notifier is not None:
            self.notifier.subscribe(widget, self.localize)
        return True

    def localize(self, widget: Any) -> None:
        """Resolve every bound attribute of a component."""
        bindings = self.bindings_for(widget)
        logger.debug("Localizing %s (%d bindings)", type(widget).__name__, len(bindings))
        for binding in bindings:
            if binding.kind == TEXT:
                self._localize_text(widget, binding)
            elif binding.kind == FONT:
                self._localize_font(widget, binding)
            elif binding.kind == IMAGE:
                self._localize_image(widget, binding)
            elif binding.kind == SEGMENTS:
                self._localize_segments(widget, binding)
            else:
                raise ValueError(f"Unknown binding kind: {binding.kind}")

    def _localize_text(self, widget: Any, binding: AttributeBinding) -> None:
        key = self.store.get_key(widget, binding.key_property)
        result = self.resolver.resolve_text(key, binding.getter(widget), update_key=binding.update_key)
        binding.setter(widget, result.text)
        if result.key != key:
            self.store.set_key(widget, binding.key_property, result.key)

    def _localize_font(self, widget: Any, binding: AttributeBinding) -> None:
        key = self.store.get_key(widget, binding.key_property)
        size_key = self.store.get_key(widget, binding.size_property) if binding.size_property else None
        binding.setter(widget, self.resolver.resolve_font(key, size_key, binding.getter(widget)))

    def _localize_image(self, widget: Any, binding: AttributeBinding) -> None:
        key = self.store.get_key(widget, binding.key_property)
        binding.setter(widget, self.resolver.resolve_image(key, binding.getter(widget)))

    def _localize_segments(self, widget: Any, binding: AttributeBinding) -> None:
        spec = self.store.get_key(widget, binding.key_property)
        titles = list(binding.getter(widget))
        for index, title in enumerate(titles):
            key = key_for_segment(index, spec)
            titles[index] = self.resolver.resolve_text(key, title, update_key=binding.update_key).text
        binding.setter(widget, titles)
