"""DSFR component renderers, keyed by their block keyword."""

from .accordion import AccordionComponent, render_accordion
from .alert import AlertComponent, render_alert
from .badge import BadgeComponent, render_badge
from .base import PICTOGRAM_PATH, Component, RenderContext
from .callout import CalloutComponent, render_callout
from .card import DOWNLOAD_DETAIL, CardComponent, TileComponent, render_card, render_tile
from .grid import ColComponent, RowComponent, render_col, render_row

COMPONENTS: dict[str, Component] = {
    c.keyword: c
    for c in (
        CardComponent(),
        TileComponent(),
        ColComponent(),
        RowComponent(),
        AlertComponent(),
        CalloutComponent(),
        AccordionComponent(),
        BadgeComponent(),
    )
}

__all__ = [
    "COMPONENTS",
    "DOWNLOAD_DETAIL",
    "PICTOGRAM_PATH",
    "AccordionComponent",
    "AlertComponent",
    "BadgeComponent",
    "CalloutComponent",
    "CardComponent",
    "ColComponent",
    "Component",
    "RenderContext",
    "RowComponent",
    "TileComponent",
    "render_accordion",
    "render_alert",
    "render_badge",
    "render_callout",
    "render_card",
    "render_col",
    "render_row",
    "render_tile",
]
