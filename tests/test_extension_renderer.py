"""Unit tests for the element renderers.

These tests build element descriptions by hand and render them through
``ExtensionRenderer`` (and the ``DefaultRenderer`` it decorates) to pin the
exact markup for heading anchors, link rewriting, responsive tables, safe
mode, and every element body variant.

Usage
-----
Run ``pytest tests/test_extension_renderer.py -v``. Fixtures supply a host-bound
renderer configuration.
"""

from __future__ import annotations

import pytest

from anchordown.config import RendererConfig, RendererConfigError
from anchordown.elements import (
    ContainerElement,
    Element,
    ElementError,
    HandlerElement,
    RawHtmlElement,
    TextElement,
    VoidElement,
    mark_heading,
)
from anchordown.renderer import DefaultRenderer, ExtensionRenderer
from anchordown.toc import TocEntry

HOST = "https://site.test"
HARDENING = ' target="_blank" rel="noopener noreferrer"'


@pytest.fixture
def config() -> RendererConfig:
    """Return a configuration bound to the test host."""
    return RendererConfig(host_link=HOST)


def _heading(tag: str, text: str, **attributes: str) -> Element:
    return mark_heading(TextElement(tag, attributes, text=text))


def test_eligible_heading_gets_prefixed_id_and_permalink() -> None:
    """Marked eligible headings carry the slug id and a trailing permalink."""
    config = RendererConfig(table_of_contents=True, id_prefix="doc-")
    renderer = ExtensionRenderer(config)

    html = renderer.render(_heading("h2", "Getting Started!"))

    assert html == (
        '<h2 id="doc-getting-started">Getting Started!'
        '<a class="anchor-link" href="#doc-getting-started"'
        ' title="Permalink to this headline"></a></h2>'
    )
    assert renderer.toc.entries() == [
        TocEntry("doc-getting-started", "Getting Started!")
    ]


def test_heading_anchor_can_be_disabled() -> None:
    """Without the permalink option the heading only gains its id."""
    config = RendererConfig(table_of_contents=True).set_heading_anchor(False)
    html = ExtensionRenderer(config).render(_heading("h3", "Usage"))
    assert html == '<h3 id="usage">Usage</h3>'


@pytest.mark.parametrize(
    ("element", "toc_enabled"),
    [
        (TextElement("h2", text="Unmarked"), True),
        (_heading("h4", "Too Deep"), True),
        (_heading("h2", "Disabled"), False),
    ],
    ids=["unmarked", "ineligible-tag", "toc-disabled"],
)
def test_headings_without_anchor(element: Element, toc_enabled: bool) -> None:  # noqa: FBT001
    """Headings outside the ToC rules render plainly and are not recorded."""
    renderer = ExtensionRenderer(RendererConfig(table_of_contents=toc_enabled))
    html = renderer.render(element)
    assert "id=" not in html, f"unexpected id in {html}"
    assert "anchor-link" not in html
    assert len(renderer.toc) == 0


def test_duplicate_headings_share_id_and_single_entry() -> None:
    """Identical heading text renders the same id and one ToC entry."""
    renderer = ExtensionRenderer(RendererConfig(table_of_contents=True))
    first = renderer.render(_heading("h2", "Setup"))
    second = renderer.render(_heading("h2", "Setup"))

    assert 'id="setup"' in first
    assert 'id="setup"' in second
    assert renderer.toc.as_dict() == {"setup": "Setup"}


def test_generated_id_replaces_existing_id_attribute() -> None:
    """An explicit id is superseded by the generated slug."""
    renderer = ExtensionRenderer(
        RendererConfig(table_of_contents=True, heading_anchor=False)
    )
    html = renderer.render(_heading("h2", "Intro", id="custom", title="x"))
    assert html == '<h2 title="x" id="intro">Intro</h2>'


def test_container_heading_uses_text_of_all_children() -> None:
    """Slugs and ToC text come from the heading's full text content."""
    heading = mark_heading(
        ContainerElement(
            "h2",
            children=("Use ", TextElement("code", text="anchordown"), " today"),
        )
    )
    renderer = ExtensionRenderer(
        RendererConfig(table_of_contents=True, heading_anchor=False)
    )
    html = renderer.render(heading)
    assert html == '<h2 id="use-anchordown-today">Use <code>anchordown</code> today</h2>'
    assert renderer.toc.as_dict() == {"use-anchordown-today": "Use anchordown today"}


def test_relative_link_resolves_against_host(config: RendererConfig) -> None:
    """Relative hrefs are joined to the host and stay internal."""
    html = ExtensionRenderer(config).render(
        TextElement("a", {"href": "/about"}, text="About")
    )
    assert html == '<a href="https://site.test/about">About</a>'


def test_external_link_is_hardened(config: RendererConfig) -> None:
    """Absolute links that leave the host open in a new tab."""
    html = ExtensionRenderer(config).render(
        TextElement("a", {"href": "https://other.test/page"}, text="Other")
    )
    assert html == f'<a href="https://other.test/page"{HARDENING}>Other</a>'


@pytest.mark.parametrize(
    ("href", "external"),
    [
        ("https://site.test/docs", False),
        ("/docs/guide", False),
        ("docs/guide", False),
        ("#section", False),
        ("https://other.test", True),
        ("http://site.test/docs", True),
        ("mailto:team@site.test", True),
    ],
)
def test_hardening_follows_host_prefix(
    config: RendererConfig,
    href: str,
    external: bool,  # noqa: FBT001
) -> None:
    """Hardening attributes appear exactly when the href leaves the host."""
    html = ExtensionRenderer(config).render(TextElement("a", {"href": href}, text="x"))
    assert (HARDENING in html) is external, f"unexpected hardening for {href}: {html}"


def test_configured_link_attributes_come_first(config: RendererConfig) -> None:
    """Configured attributes are emitted verbatim before the element's own."""
    config.set_link_attributes({"data-track": "nav"})
    html = ExtensionRenderer(config).render(
        TextElement("a", {"href": "guide", "title": "A & B"}, text="Guide")
    )
    assert html == (
        '<a data-track="nav" href="https://site.test/guide"'
        ' title="A &amp; B">Guide</a>'
    )


def test_none_attributes_are_omitted(config: RendererConfig) -> None:
    """Attributes with a ``None`` value do not appear in the output."""
    html = ExtensionRenderer(config).render(
        TextElement("a", {"href": "/x", "title": None}, text="x")
    )
    assert "title" not in html


def test_links_nested_in_other_tags_are_rewritten(config: RendererConfig) -> None:
    """Anchors inside default-rendered elements still get extension rules."""
    paragraph = ContainerElement(
        "p",
        children=(
            "Go ",
            TextElement("a", {"href": "https://other.test"}, text="there"),
            " & back.",
        ),
    )
    html = ExtensionRenderer(config).render(paragraph)
    assert html == (
        f'<p>Go <a href="https://other.test"{HARDENING}>there</a> &amp; back.</p>'
    )


def test_responsive_table_is_wrapped(config: RendererConfig) -> None:
    """Responsive mode wraps tables and adds the ``table`` class once."""
    renderer = ExtensionRenderer(config.set_responsive_table())
    html = renderer.render(TextElement("table", {"class": "data"}))
    assert html == (
        '<div class="table-responsive"><table class="table data"></table></div>'
    )
    again = renderer.render(TextElement("table", {"class": "table"}))
    assert again == '<div class="table-responsive"><table class="table"></table></div>'


def test_tables_untouched_without_responsive_mode(config: RendererConfig) -> None:
    """Tables render through the default renderer when responsive mode is off."""
    html = ExtensionRenderer(config).render(TextElement("table", {"class": "data"}))
    assert html == '<table class="data"></table>'


def test_text_and_attributes_are_escaped() -> None:
    """Text escapes markup characters; attributes also escape quotes."""
    html = DefaultRenderer().render(
        TextElement("p", {"title": "say \"hi\" & 'bye'"}, text='a < b & "c"')
    )
    assert html == (
        '<p title="say &quot;hi&quot; &amp; &#039;bye&#039;">a &lt; b &amp; "c"</p>'
    )


def test_existing_entities_are_not_escaped_twice() -> None:
    """Character references already in the text are preserved."""
    html = DefaultRenderer().render(TextElement("code", text="a &lt; b &amp;&amp; c"))
    assert html == "<code>a &lt; b &amp;&amp; c</code>"


def test_void_elements_self_close() -> None:
    """Void elements have no body and a self-closing tag."""
    renderer = DefaultRenderer()
    assert renderer.render(VoidElement("hr")) == "<hr />"
    assert (
        renderer.render(VoidElement("img", {"src": "a.png", "alt": "A"}))
        == '<img src="a.png" alt="A" />'
    )


def test_handler_output_becomes_body() -> None:
    """Handler elements render the handler's return value unescaped."""
    seen: list[tuple[object, frozenset[str]]] = []

    def handler(payload: object, non_nestables: frozenset[str]) -> str:
        seen.append((payload, non_nestables))
        return f"<em>{payload}</em>"

    element = HandlerElement(
        "p", non_nestables=frozenset({"a"}), payload="hi", handler=handler
    )
    assert DefaultRenderer().render(element) == "<p><em>hi</em></p>"
    assert seen == [("hi", frozenset({"a"}))]


def test_non_callable_handler_is_rejected() -> None:
    """A handler element must be given a callable."""
    with pytest.raises(ElementError, match="not callable"):
        HandlerElement("p", payload="x", handler="upper")  # type: ignore[arg-type]


def test_unknown_element_variant_is_rejected() -> None:
    """The bare base element has no body kind and cannot be rendered."""
    with pytest.raises(ElementError, match="Element"):
        ExtensionRenderer().render(Element("p"))


def test_raw_html_depends_on_safe_mode() -> None:
    """Raw payloads pass through unless safe mode escapes them."""
    element = RawHtmlElement("div", html="<b>x</b>")
    allowed = RawHtmlElement("div", html="<b>x</b>", allow_in_safe_mode=True)

    assert DefaultRenderer().render(element) == "<div><b>x</b></div>"
    safe = DefaultRenderer(safe_mode=True)
    assert safe.render(element) == "<div>&lt;b&gt;x&lt;/b&gt;</div>"
    assert safe.render(allowed) == "<div><b>x</b></div>"


def test_safe_mode_defuses_links(config: RendererConfig) -> None:
    """Safe mode drops event handlers and neutralizes unsafe URL schemes."""
    config.safe_mode = True
    html = ExtensionRenderer(config).render(
        TextElement(
            "a", {"href": "javascript:alert(1)", "onclick": "steal()"}, text="x"
        )
    )
    assert "onclick" not in html
    assert "javascript:" not in html
    assert html == '<a href="https://site.test/javascript%3Aalert(1)">x</a>'


def test_invalid_config_is_rejected_at_construction() -> None:
    """Configuration errors surface before anything is rendered."""
    with pytest.raises(RendererConfigError, match="h7"):
        ExtensionRenderer(RendererConfig(heading_tags=("h2", "h7")))


def test_rendering_is_deterministic() -> None:
    """Fresh renderers produce byte-identical output for the same tree."""
    tree = ContainerElement(
        "div",
        children=(
            _heading("h2", "Overview"),
            ContainerElement(
                "p", children=(TextElement("a", {"href": "/a"}, text="a"),)
            ),
            _heading("h3", "Details"),
        ),
    )
    config = RendererConfig(host_link=HOST, table_of_contents=True, id_prefix="p-")

    first = ExtensionRenderer(config).render(tree)
    second = ExtensionRenderer(config).render(tree)

    assert first == second
    assert 'id="p-overview"' in first
    assert 'id="p-details"' in first


def test_reset_clears_table_of_contents() -> None:
    """Reset prepares the renderer for another document."""
    renderer = ExtensionRenderer(RendererConfig(table_of_contents=True))
    renderer.render(_heading("h2", "Intro"))
    renderer.reset()
    assert renderer.toc.entries() == []


def test_reset_applies_settings_changed_after_construction() -> None:
    """Setters called after construction take effect from the next reset."""
    config = RendererConfig(heading_anchor=False)
    renderer = ExtensionRenderer(config)
    config.set_table_of_contents().set_id_prefix("doc-").set_headings(["h4"])

    renderer.reset()
    html = renderer.render(_heading("h4", "Deep Dive"))

    assert html == '<h4 id="doc-deep-dive">Deep Dive</h4>'
    assert renderer.toc.as_dict() == {"doc-deep-dive": "Deep Dive"}


def test_reset_revalidates_configuration() -> None:
    """Invalid values set after construction are reported on reset."""
    config = RendererConfig()
    renderer = ExtensionRenderer(config)
    config.set_headings(["h9"])
    with pytest.raises(RendererConfigError, match="h9"):
        renderer.reset()


def test_host_link_trailing_slash_is_not_doubled() -> None:
    """A host link set with a trailing slash still yields single separators."""
    config = RendererConfig().set_link("https://site.test/")
    html = ExtensionRenderer(config).render(
        TextElement("a", {"href": "/about"}, text="About")
    )
    assert html == '<a href="https://site.test/about">About</a>'
