"""Accordion: `/// accordion | Title` -> fr-accordion with a per-call DOM id."""

from ..models import Block, Options
from .base import Component, RenderContext, is_set


def render_accordion(title: str, options: Options, body: str, index: int) -> str:
    """Render an accordion section.

    `index` is the accordion's 1-based position within the current
    transpile call; it becomes the `accordion-{index}` DOM id.
    """
    is_open = is_set(options, "open")
    collapse_class = "fr-collapse" if is_open else "fr-collapse fr-collapse--collapsed"
    dom_id = f"accordion-{index}"
    return (
        '<section class="fr-accordion">'
        '<h3 class="fr-accordion__title">'
        f'<button class="fr-accordion__btn" aria-expanded="{"true" if is_open else "false"}" '
        f'aria-controls="{dom_id}">{title}</button>'
        "</h3>"
        f'<div class="{collapse_class}" id="{dom_id}">\n'
        f"{body.strip()}\n"
        "</div>"
        "</section>"
    )


class AccordionComponent(Component):
    keyword = "accordion"
    defaults = {"open": False}

    def render(self, block: Block, ctx: RenderContext, index: int | None = None) -> str:
        options = self.parse_block_options(block, ctx)
        if index is None:
            index = ctx.next_accordion_id()
        return render_accordion(block.title, options, block.body, index)
