"""Tests for the view renderers."""

import pytest

from cqrs_ddd_subscriptions.template.engines.jinja import JinjaViewRenderer
from cqrs_ddd_subscriptions.template.engines.string import StringFormatViewRenderer


@pytest.mark.asyncio
async def test_default_html_template_includes_unsubscribe_links():
    """Test the packaged html template renders content and both unsubscribe links."""
    renderer = JinjaViewRenderer()

    html = await renderer.render(
        "subscriber/html.j2",
        {
            "level": "info",
            "intro_lines": ["Here is what happened."],
            "outro_lines": [],
            "unsubscribe_link_for_list": "https://example/unsub?list=promo",
            "unsubscribe_link_for_all": "https://example/unsub",
        },
    )

    assert "Hello!" in html
    assert "Here is what happened." in html
    assert 'href="https://example/unsub?list=promo"' in html
    assert 'href="https://example/unsub"' in html
    assert "Regards" in html


@pytest.mark.asyncio
async def test_default_text_template_without_links():
    """Test the text template omits the unsubscribe block when no link is present."""
    renderer = JinjaViewRenderer()

    text = await renderer.render(
        "subscriber/text.j2",
        {
            "level": "error",
            "greeting": None,
            "intro_lines": ["Payment failed."],
            "outro_lines": [],
            "action_text": "Retry",
            "action_url": "https://example/retry",
            "salutation": "Thanks",
        },
    )

    assert "Whoops!" in text
    assert "Retry: https://example/retry" in text
    assert "Thanks" in text
    assert "Unsubscribe" not in text


@pytest.mark.asyncio
async def test_html_autoescape():
    """Test html templates escape caller content; text templates do not."""
    renderer = JinjaViewRenderer()
    data = {"intro_lines": ["<b>bold</b>"], "outro_lines": []}

    html = await renderer.render("subscriber/html.j2", data)
    text = await renderer.render("subscriber/text.j2", data)

    assert "&lt;b&gt;bold&lt;/b&gt;" in html
    assert "<b>bold</b>" in text


@pytest.mark.asyncio
async def test_custom_templates_dir_overrides_defaults(tmp_path):
    """Test templates in a custom directory win over the packaged ones."""
    (tmp_path / "subscriber").mkdir()
    (tmp_path / "subscriber" / "text.j2").write_text("Custom {{ subject }}")
    (tmp_path / "welcome.txt").write_text("Welcome {{ name }}")
    renderer = JinjaViewRenderer(tmp_path)

    assert await renderer.render("subscriber/text.j2", {"subject": "S"}) == "Custom S"
    assert await renderer.render("welcome.txt", {"name": "Alice"}) == "Welcome Alice"
    # Falls back to the packaged html template
    assert "Hello!" in await renderer.render("subscriber/html.j2", {})


@pytest.mark.asyncio
async def test_jinja_missing_template_raises():
    """Test unknown template ids propagate the Jinja error."""
    from jinja2 import TemplateNotFound

    with pytest.raises(TemplateNotFound):
        await JinjaViewRenderer().render("missing.j2", {})


@pytest.mark.asyncio
async def test_string_renderer():
    """Test the string renderer formats registered templates."""
    renderer = StringFormatViewRenderer({"greet": "Hi {name}"})
    renderer.register("bye", "Bye {name}")

    assert await renderer.render("greet", {"name": "Alice"}) == "Hi Alice"
    assert await renderer.render("bye", {"name": "Bob"}) == "Bye Bob"


@pytest.mark.asyncio
async def test_string_renderer_errors():
    """Test unknown templates and missing variables raise KeyError."""
    renderer = StringFormatViewRenderer({"greet": "Hi {name}"})

    with pytest.raises(KeyError):
        await renderer.render("unknown", {})
    with pytest.raises(KeyError):
        await renderer.render("greet", {})
