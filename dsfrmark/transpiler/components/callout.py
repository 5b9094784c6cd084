"""Callout: `/// callout | Title` -> fr-callout, with optional icon and button link."""

from ..models import Block, Options
from ..text import class_attr
from .base import Component, RenderContext, opt, target_attrs


def render_callout(title: str, options: Options, body: str) -> str:
    markup = opt(options, "markup", "p")
    color = opt(options, "color")
    icon = opt(options, "icon")
    link_label = opt(options, "link_label")
    link_url = opt(options, "link_url")

    classes = ["fr-callout", f"fr-callout--{color}" if color else ""]
    icon_html = f'<span class="fr-icon-{icon}" aria-hidden="true"></span>' if icon else ""

    link_html = ""
    if link_label and link_url:
        link_html = (
            f'<a class="fr-btn" href="{link_url}"{target_attrs(options, "link_newtab")}>'
            f"{link_label}</a>"
        )

    return (
        f'<div class="{class_attr(classes)}">'
        f'<{markup} class="fr-callout__title">{icon_html}{title}</{markup}>'
        f'<p class="fr-callout__text">{body.strip()}</p>'
        f"{link_html}"
        "</div>"
    )


class CalloutComponent(Component):
    keyword = "callout"
    defaults = {
        "color": None,
        "icon": None,
        "markup": "p",
        "link_label": None,
        "link_url": None,
        "link_newtab": False,
    }

    def render(self, block: Block, ctx: RenderContext) -> str:
        options = self.parse_block_options(block, ctx)
        return render_callout(block.title, options, block.body)
