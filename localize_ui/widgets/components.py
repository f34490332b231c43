"""Headless models of localizable UI components."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.types import FontSpec, ImageHandle

# Control states that carry their own title / background image.
CONTROL_STATES = ('normal', 'highlighted', 'selected', 'disabled')


# eq=False keeps identity hashing, so components can key the property store.

@dataclass(eq=False)
class BarButtonItem:
    title: Optional[str] = None


@dataclass(eq=False)
class Button:
    titles: Dict[str, Optional[str]] = field(default_factory=dict)
    font: Optional[FontSpec] = None
    background_images: Dict[str, Optional[ImageHandle]] = field(default_factory=dict)

    def title(self, state: str = 'normal') -> Optional[str]:
        """Title for a state, falling back to the normal title."""
        if state in self.titles:
            return self.titles[state]
        return self.titles.get('normal')

    def set_title(self, title: Optional[str], state: str = 'normal') -> None:
        self.titles[state] = title


@dataclass(eq=False)
class Label:
    text: Optional[str] = None
    font: Optional[FontSpec] = None


@dataclass(eq=False)
class NavigationItem:
    title: Optional[str] = None
    prompt: Optional[str] = None


@dataclass(eq=False)
class SearchBar:
    placeholder: Optional[str] = None
    prompt: Optional[str] = None


@dataclass(eq=False)
class SegmentedControl:
    titles: List[Optional[str]] = field(default_factory=list)


@dataclass(eq=False)
class TabBarItem:
    title: Optional[str] = None


@dataclass(eq=False)
class TextField:
    text: Optional[str] = None
    placeholder: Optional[str] = None
    font: Optional[FontSpec] = None


@dataclass(eq=False)
class TextView:
    text: Optional[str] = None
    font: Optional[FontSpec] = None


@dataclass(eq=False)
class ViewController:
    title: Optional[str] = None


@dataclass(eq=False)
class ImageView:
    image: Optional[ImageHandle] = None
    highlighted_image: Optional[ImageHandle] = None
