"""
Page behaviour of the theme: responsive images, tooltips, tabs, the contact
form status and the sticky navigation bar controller.

The page is modelled as a flat list of elements, each carrying a tag name and
a set of CSS classes. Selections that match nothing are no-ops.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set


NAV_WIDTH_THRESHOLD = 1170

RESPONSIVE_CLASS = "img-responsive"
NAVBAR_CLASS = "navbar-custom"
FIXED_CLASS = "is-fixed"
VISIBLE_CLASS = "is-visible"
ACTIVE_CLASS = "active"


@dataclass
class Element:
    tag: str
    classes: Set[str] = field(default_factory=set)
    height: float = 0
    id: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)
    text: str = ""
    # jQuery plugins initialised on this element, e.g. "tooltip"
    widgets: Set[str] = field(default_factory=set)

    def add_class(self, *names: str) -> None:
        self.classes.update(names)

    def remove_class(self, *names: str) -> None:
        self.classes.difference_update(names)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    @property
    def toggle(self) -> Optional[str]:
        return self.attrs.get("data-toggle")


def tag_responsive_images(elements: Iterable[Element]) -> None:
    for el in elements:
        if el.tag == "img":
            el.add_class(RESPONSIVE_CLASS)


def init_tooltips(elements: Iterable[Element]) -> None:
    for el in elements:
        if el.toggle == "tooltip":
            el.widgets.add("tooltip")


def is_tab_trigger(el: Element) -> bool:
    return el.tag == "a" and el.toggle == "tab"


@dataclass
class NavigationController:
    """
    Slide-in behaviour of the navigation bar.

    Scrolling down past `header_height` pins the bar (`fixed`); scrolling up
    while pinned reveals it (`visible`); scrolling up to the very top, or up
    while not pinned, resets both. `header_height` is fixed at creation.
    """

    header_height: float
    navbar: Optional[Element] = None
    previous_offset: float = 0
    fixed: bool = False
    visible: bool = False

    def on_scroll(self, current: float) -> None:
        if current < self.previous_offset:
            if current > 0 and self.fixed:
                self.visible = True
            else:
                self.visible = False
                self.fixed = False
        else:
            self.visible = False
            if current > self.header_height and not self.fixed:
                self.fixed = True
        self.previous_offset = current
        self._sync()

    def _sync(self) -> None:
        if self.navbar is None:
            return
        for flag, name in ((self.fixed, FIXED_CLASS), (self.visible, VISIBLE_CLASS)):
            if flag:
                self.navbar.add_class(name)
            else:
                self.navbar.remove_class(name)


def install_navigation(
    viewport_width: float,
    navbar: Optional[Element],
    threshold: float = NAV_WIDTH_THRESHOLD,
) -> Optional[NavigationController]:
    """
    Create a controller for `navbar` if the viewport is wider than
    `threshold`. The check happens once; nothing reacts to later resizes.
    """
    if navbar is None or viewport_width <= threshold:
        return None
    return NavigationController(header_height=navbar.height, navbar=navbar)


@dataclass
class Page:
    """
    DOM-ready wiring of the theme.

    `on_ready` tags images, initialises tooltips and installs the navbar
    controller. Click and focus handlers only act once the page is ready.
    """

    elements: List[Element] = field(default_factory=list)
    navigation: Optional[NavigationController] = None
    ready: bool = False

    def find_navbar(self) -> Optional[Element]:
        for el in self.elements:
            if el.has_class(NAVBAR_CLASS):
                return el
        return None

    def find_by_id(self, element_id: str) -> Optional[Element]:
        for el in self.elements:
            if el.id == element_id:
                return el
        return None

    def on_ready(self, viewport_width: float) -> Optional[NavigationController]:
        init_tooltips(self.elements)
        tag_responsive_images(self.elements)
        self.navigation = install_navigation(viewport_width, self.find_navbar())
        self.ready = True
        return self.navigation

    def scroll_to(self, offset: float) -> None:
        if self.navigation is not None:
            self.navigation.on_scroll(offset)

    def click(self, el: Element) -> bool:
        """
        Dispatch a click. Returns True when the default action (following
        the link) was prevented.
        """
        if not self.ready or not is_tab_trigger(el):
            return False
        self.show_tab(el)
        return True

    def show_tab(self, trigger: Element) -> None:
        # tab triggers share one tab list; each points at its pane by href
        for other in self.elements:
            if not is_tab_trigger(other) or other is trigger:
                continue
            other.remove_class(ACTIVE_CLASS)
            pane = self._pane_for(other)
            if pane is not None:
                pane.remove_class(ACTIVE_CLASS)
        trigger.add_class(ACTIVE_CLASS)
        pane = self._pane_for(trigger)
        if pane is not None:
            pane.add_class(ACTIVE_CLASS)

    def _pane_for(self, trigger: Element) -> Optional[Element]:
        href = trigger.attrs.get("href", "")
        if not href.startswith("#") or len(href) == 1:
            return None
        return self.find_by_id(href[1:])

    def focus(self, el: Element) -> None:
        # focusing the contact form's name field clears the last status message
        if not self.ready or el.id != "name":
            return
        success = self.find_by_id("success")
        if success is not None:
            success.text = ""
