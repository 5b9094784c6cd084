"""Card and tile: link-bearing content blocks sharing most of their options."""

from ..models import Block, Options
from ..text import class_attr, split_label, split_list
from .base import (
    PICTOGRAM_PATH,
    Component,
    RenderContext,
    enabled_unless_false,
    is_set,
    opt,
    target_attrs,
)

DOWNLOAD_DETAIL = "Fichier à télécharger"

_HORIZONTAL_POSITIONS = ("tier", "half")


def _badge_html(options: Options) -> str:
    badge = opt(options, "badge")
    if not badge:
        return ""
    text, color = split_label(badge)
    return f'<p class="fr-badge fr-badge--{color}">{text}</p>'


def _modifier_classes(prefix: str, options: Options) -> list[str]:
    """Classes shared by cards and tiles, in rendering order."""
    classes = [prefix]
    if enabled_unless_false(options, "enlarge"):
        classes.append("fr-enlarge-link")
    if is_set(options, "horizontal"):
        classes.append(f"{prefix}--horizontal")
    return classes


def _title_html(prefix: str, title: str, options: Options) -> str:
    markup = opt(options, "markup", "h5")
    target = opt(options, "target")
    return (
        f'<{markup} class="{prefix}__title">'
        f'<a href="{target}"{target_attrs(options, "target_new")}>{title}</a>'
        f"</{markup}>"
    )


def render_card(title: str, options: Options, body: str) -> str:
    classes = _modifier_classes("fr-card", options)
    horizontal_pos = opt(options, "horizontal_pos")
    if horizontal_pos in _HORIZONTAL_POSITIONS:
        classes.append(f"fr-card--horizontal-{horizontal_pos}")
    download = is_set(options, "download")
    if download:
        classes.append("fr-card--download")
    classes.extend(f"fr-card--{v}" for v in split_list(opt(options, "variations")))

    image_html = ""
    if image := opt(options, "image"):
        image_alt = opt(options, "image_alt", title)
        image_html = (
            '<div class="fr-card__header">'
            '<div class="fr-card__img">'
            f'<img src="{image}" class="fr-responsive-img" alt="{image_alt}">'
            "</div>"
            "</div>"
        )

    description = opt(options, "description")
    description_html = f'<p class="fr-card__desc">{description}</p>' if description else ""
    detail_html = ""
    if download and is_set(options, "assess"):
        detail_html = f'<p class="fr-card__detail">{DOWNLOAD_DETAIL}</p>'

    return (
        f'<div class="{class_attr(classes)}">'
        f"{image_html}"
        '<div class="fr-card__body">'
        '<div class="fr-card__content">'
        f"{_title_html('fr-card', title, options)}"
        f"{description_html}"
        f'<p class="fr-card__desc">{body.strip()}</p>'
        f"{detail_html}"
        "</div>"
        f'<div class="fr-card__footer">{_badge_html(options)}</div>'
        "</div>"
        "</div>"
    )


def render_tile(
    title: str,
    options: Options,
    body: str,
    pictogram_path: str = PICTOGRAM_PATH,
) -> str:
    classes = _modifier_classes("fr-tile", options)
    download = is_set(options, "download")
    if download:
        classes.append("fr-tile--download")
    classes.extend(f"fr-tile--{v}" for v in split_list(opt(options, "variations")))

    picto_html = ""
    if picto := opt(options, "picto"):
        href = f"{pictogram_path.rstrip('/')}/{picto}.svg"
        picto_html = (
            '<div class="fr-tile__header">'
            '<div class="fr-tile__pictogram">'
            '<svg aria-hidden="true" class="fr-artwork" viewBox="0 0 80 80" width="80px" height="80px">'
            f'<use class="fr-artwork-decorative" href="{href}#artwork-decorative"></use>'
            f'<use class="fr-artwork-minor" href="{href}#artwork-minor"></use>'
            f'<use class="fr-artwork-major" href="{href}#artwork-major"></use>'
            "</svg>"
            "</div>"
            "</div>"
        )

    description = opt(options, "description")
    description_html = f'<p class="fr-tile__desc">{description}</p>' if description else ""
    detail = body.strip()
    if download and is_set(options, "assess"):
        detail = DOWNLOAD_DETAIL

    return (
        f'<div class="{class_attr(classes)}">'
        '<div class="fr-tile__body">'
        '<div class="fr-tile__content">'
        f"{_title_html('fr-tile', title, options)}"
        f"{description_html}"
        f'<p class="fr-tile__detail">{detail}</p>'
        "</div>"
        "</div>"
        f"{picto_html}"
        f"{_badge_html(options)}"
        "</div>"
    )


_SHARED_DEFAULTS: dict[str, str | bool | None] = {
    "description": None,
    "markup": "h5",
    "target": None,
    "target_new": False,
    "enlarge": True,
    "badge": None,
    "download": False,
    "assess": False,
    "horizontal": False,
    "variations": None,
}


class CardComponent(Component):
    keyword = "card"
    defaults = {
        **_SHARED_DEFAULTS,
        "image": None,
        "image_alt": None,
        "horizontal_pos": None,
    }
    choices = {"horizontal_pos": _HORIZONTAL_POSITIONS}

    def render(self, block: Block, ctx: RenderContext) -> str:
        options = self.parse_block_options(block, ctx)
        return render_card(block.title, options, block.body)


class TileComponent(Component):
    keyword = "tile"
    defaults = {**_SHARED_DEFAULTS, "picto": None}

    def render(self, block: Block, ctx: RenderContext) -> str:
        options = self.parse_block_options(block, ctx)
        return render_tile(block.title, options, block.body, ctx.pictogram_path)
