from blogassets.navigation import (
    FIXED_CLASS,
    VISIBLE_CLASS,
    Element,
    NavigationController,
    Page,
    install_navigation,
    tag_responsive_images,
)


def test_small_scroll_keeps_bar_in_flow():
    nav = NavigationController(header_height=80)

    nav.on_scroll(50)

    assert not nav.fixed
    assert not nav.visible
    assert nav.previous_offset == 50


def test_scrolling_down_past_header_pins_bar():
    nav = NavigationController(header_height=80)

    nav.on_scroll(200)

    assert nav.fixed
    assert not nav.visible


def test_scrolling_up_while_pinned_reveals_bar():
    nav = NavigationController(header_height=80, previous_offset=100, fixed=True)

    nav.on_scroll(50)

    assert nav.visible
    assert nav.fixed


def test_scrolling_up_to_top_resets_both():
    nav = NavigationController(header_height=80, previous_offset=100, fixed=True, visible=True)

    nav.on_scroll(0)

    assert not nav.visible
    assert not nav.fixed


def test_scrolling_up_while_not_pinned_stays_hidden():
    nav = NavigationController(header_height=80, previous_offset=60)

    nav.on_scroll(30)

    assert not nav.visible
    assert not nav.fixed


def test_scrolling_down_again_hides_revealed_bar():
    nav = NavigationController(header_height=80, previous_offset=300, fixed=True, visible=True)

    nav.on_scroll(400)

    assert nav.fixed
    assert not nav.visible


def test_stationary_scroll_counts_as_down():
    nav = NavigationController(header_height=80, previous_offset=150, fixed=True, visible=True)

    nav.on_scroll(150)

    assert nav.fixed
    assert not nav.visible


def test_flags_are_mirrored_as_classes():
    bar = Element("nav", {"navbar", "navbar-custom"}, height=80)
    nav = NavigationController(header_height=80, navbar=bar)

    nav.on_scroll(500)
    assert FIXED_CLASS in bar.classes
    assert VISIBLE_CLASS not in bar.classes

    nav.on_scroll(300)
    assert {FIXED_CLASS, VISIBLE_CLASS} <= bar.classes

    nav.on_scroll(0)
    assert bar.classes == {"navbar", "navbar-custom"}


def test_install_requires_wide_viewport():
    bar = Element("nav", {"navbar-custom"}, height=50)

    assert install_navigation(1170, bar) is None
    nav = install_navigation(1171, bar)
    assert nav is not None
    assert nav.header_height == 50


def test_header_height_is_captured_once():
    bar = Element("nav", {"navbar-custom"}, height=50)
    nav = install_navigation(1400, bar)

    bar.height = 500
    nav.on_scroll(100)

    assert nav.fixed


def test_install_without_navbar_is_noop():
    assert install_navigation(1920, None) is None


def test_responsive_tagging_is_idempotent():
    elements = [Element("img"), Element("img", {"avatar"}), Element("p")]

    tag_responsive_images(elements)
    once = [set(el.classes) for el in elements]
    tag_responsive_images(elements)

    assert [el.classes for el in elements] == once
    assert once == [{"img-responsive"}, {"avatar", "img-responsive"}, set()]


def test_page_ready_on_wide_screen():
    bar = Element("nav", {"navbar-custom"}, height=60)
    img = Element("img")
    page = Page(elements=[bar, img])

    assert page.on_ready(1280) is not None
    page.scroll_to(120)

    assert "img-responsive" in img.classes
    assert FIXED_CLASS in bar.classes


def test_page_ready_on_narrow_screen_only_tags_images():
    bar = Element("nav", {"navbar-custom"}, height=60)
    img = Element("img")
    page = Page(elements=[bar, img])

    assert page.on_ready(800) is None
    page.scroll_to(500)

    assert "img-responsive" in img.classes
    assert bar.classes == {"navbar-custom"}


def _tabs_page():
    first = Element("a", {"active"}, attrs={"data-toggle": "tab", "href": "#posts"})
    second = Element("a", attrs={"data-toggle": "tab", "href": "#about"})
    posts = Element("div", {"tab-pane", "active"}, id="posts")
    about = Element("div", {"tab-pane"}, id="about")
    return Page(elements=[first, second, posts, about]), first, second, posts, about


def test_tooltip_triggers_are_initialised_on_ready():
    trigger = Element("span", attrs={"data-toggle": "tooltip", "title": "Share"})
    plain = Element("span")
    page = Page(elements=[trigger, plain])

    page.on_ready(800)

    assert trigger.widgets == {"tooltip"}
    assert plain.widgets == set()


def test_tab_click_shows_tab_and_prevents_default():
    page, first, second, posts, about = _tabs_page()
    page.on_ready(1280)

    assert page.click(second) is True

    assert second.has_class("active")
    assert about.has_class("active")
    assert not first.has_class("active")
    assert not posts.has_class("active")


def test_tab_without_pane_still_activates():
    tab = Element("a", attrs={"data-toggle": "tab", "href": "#missing"})
    page = Page(elements=[tab])
    page.on_ready(1280)

    assert page.click(tab) is True
    assert tab.has_class("active")


def test_other_clicks_keep_default_action():
    link = Element("a", attrs={"href": "/about"})
    button = Element("button", attrs={"data-toggle": "tab"})
    page = Page(elements=[link, button])
    page.on_ready(1280)

    assert page.click(link) is False
    assert page.click(button) is False
    assert button.classes == set()


def test_handlers_do_nothing_before_ready():
    page, first, second, posts, about = _tabs_page()

    assert page.click(second) is False
    assert not second.has_class("active")


def test_focusing_name_clears_success_message():
    name = Element("input", id="name")
    email = Element("input", id="email")
    success = Element("div", id="success", text="Your message has been sent.")
    page = Page(elements=[name, email, success])
    page.on_ready(1280)

    page.focus(email)
    assert success.text == "Your message has been sent."

    page.focus(name)
    assert success.text == ""


def test_missing_elements_are_noops():
    name = Element("input", id="name")
    page = Page(elements=[name])

    assert page.on_ready(1920) is None
    page.focus(name)
    page.scroll_to(400)
    assert page.click(name) is False
