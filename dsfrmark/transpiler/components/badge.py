"""Badge: `/// badge` -> fr-badge. Options first, label on the last body line."""

from ..models import Block, Options
from ..text import class_attr
from .base import Component, RenderContext, enabled_unless_false, opt


def render_badge(label: str, options: Options) -> str:
    badge_type = opt(options, "type")
    color = opt(options, "color")
    classes = [
        "fr-badge",
        f"fr-badge--{badge_type}" if badge_type else "",
        f"fr-badge--{color}" if color else "",
        "fr-badge--icon-left" if badge_type and enabled_unless_false(options, "icon") else "",
    ]
    return f'<span class="{class_attr(classes)}">{label}</span>'


def split_badge_body(body: str) -> tuple[list[str], str]:
    """Return (option lines, label) from a badge body."""
    lines = body.strip().split("\n")
    return lines[:-1], lines[-1].strip()


class BadgeComponent(Component):
    keyword = "badge"
    defaults = {"type": None, "color": None, "icon": True}
    choices = {"type": ("success", "error", "info", "warning", "new")}
    header_options = False

    def render(self, block: Block, ctx: RenderContext) -> str:
        option_lines, label = split_badge_body(block.body)
        # Body starts on the line after the opener; skip leading blank lines
        leading = len(block.body) - len(block.body.lstrip("\n"))
        first = block.lineno + 1 + leading if block.lineno else 0
        options = self.parse_lines(option_lines, first, ctx)
        return render_badge(label, options)
