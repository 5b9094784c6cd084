"""Grid: `/// row` wrapping `/// col | 12 md-6` blocks.

Columns are always resolved before the row that contains them, so a row
only ever wraps finished column HTML.
"""

from ..models import Block, Options
from ..text import class_attr
from .base import Component, RenderContext, opt


def render_col(breakpoints: str, body: str) -> str:
    tokens = breakpoints.split()
    classes = [f"fr-col-{t}" for t in tokens] if tokens else ["fr-col"]
    return f'<div class="{class_attr(classes)}">\n{body.strip()}\n</div>'


def render_row(extra_classes: str, options: Options, body: str) -> str:
    classes = ["fr-grid-row", extra_classes.strip()]
    if halign := opt(options, "halign"):
        classes.append(f"fr-grid-row--{halign}")
    if valign := opt(options, "valign"):
        classes.append(f"fr-grid-row--{valign}")
    return f'<div class="{class_attr(classes)}">\n{body.strip()}\n</div>'


class ColComponent(Component):
    keyword = "col"
    header_options = False

    def render(self, block: Block, ctx: RenderContext) -> str:
        return render_col(block.title, block.body)


class RowComponent(Component):
    keyword = "row"
    defaults = {"halign": None, "valign": None}
    choices = {
        "halign": ("left", "center", "right"),
        "valign": ("top", "middle", "bottom"),
    }

    def render(self, block: Block, ctx: RenderContext) -> str:
        # A header holding a colon is an option line, not a class list
        if ":" in block.title:
            extra_classes = ""
            lines = [block.title, *block.option_lines]
            first_lineno = block.lineno
        else:
            extra_classes = block.title
            lines = block.option_lines
            first_lineno = block.options_lineno
        options = self.parse_lines(lines, first_lineno, ctx)
        return render_row(extra_classes, options, block.body)
