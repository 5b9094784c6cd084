"""Alert: `/// alert | Title` -> fr-alert."""

from ..models import Block, Options
from ..text import generate_id
from .base import Component, RenderContext, opt


def render_alert(title: str, options: Options, body: str) -> str:
    alert_type = opt(options, "type", "info")
    markup = opt(options, "markup", "h5")
    return (
        f'<div class="fr-alert fr-alert--{alert_type}">'
        f'<{markup} class="fr-alert__title" id="{generate_id(title)}">{title}</{markup}>'
        f"<p>{body.strip()}</p>"
        "</div>"
    )


class AlertComponent(Component):
    keyword = "alert"
    defaults = {"type": "info", "markup": "h5"}
    choices = {
        "type": ("info", "success", "warning", "error"),
        "markup": ("h1", "h2", "h3", "h4", "h5", "h6", "p"),
    }

    def render(self, block: Block, ctx: RenderContext) -> str:
        options = self.parse_block_options(block, ctx)
        return render_alert(block.title, options, block.body)
