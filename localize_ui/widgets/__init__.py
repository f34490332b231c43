"""UI component models and the localization adapter."""

from .adapter import AttributeBinding, LocalizeAdapter, UnsupportedWidgetError, WIDGET_BINDINGS
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
from .properties import LocalizationProperties, PropertyStore

__all__ = [
    'AttributeBinding',
    'LocalizeAdapter',
    'UnsupportedWidgetError',
    'WIDGET_BINDINGS',
    'CONTROL_STATES',
    'BarButtonItem',
    'Button',
    'ImageView',
    'Label',
    'NavigationItem',
    'SearchBar',
    'SegmentedControl',
    'TabBarItem',
    'TextField',
    'TextView',
    'ViewController',
    'LocaleNotifier',
    'LocalizationProperties',
    'PropertyStore',
]
