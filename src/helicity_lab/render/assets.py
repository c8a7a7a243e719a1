from __future__ import annotations

from collections import OrderedDict
from typing import Iterable

import pygame


Color = tuple[int, int, int] | tuple[int, int, int, int]


class FontSet:
    """Fonts used by the HUD; every entry is ``None`` when no font could be loaded."""

    def __init__(
        self,
        label: pygame.font.Font | None,
        hud: pygame.font.Font | None,
        tooltip_title: pygame.font.Font | None,
        tooltip_body: pygame.font.Font | None,
    ) -> None:
        self.label = label
        self.hud = hud
        self.tooltip_title = tooltip_title
        self.tooltip_body = tooltip_body

    @property
    def available(self) -> bool:
        return None not in (self.label, self.hud, self.tooltip_title, self.tooltip_body)

    @classmethod
    def load(cls, names: Iterable[str], *, label_size: int, hud_size: int,
             title_size: int, body_size: int) -> "FontSet":
        names = tuple(names)
        return cls(
            label=load_font(names, label_size),
            hud=load_font(names, hud_size),
            tooltip_title=load_font(names, title_size),
            tooltip_body=load_font(names, body_size),
        )


_TEXT_SURFACE_CACHE_MAX_SIZE = 256
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Return a cached rendered surface for the given font, text and color."""

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color[:3])
    if len(color) == 4 and color[3] < 255:
        rendered.set_alpha(color[3])
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font | None:
    """Load the first matching system font, or ``None`` if text cannot be drawn."""

    preferred_names = tuple(preferred_names)
    if not pygame.font.get_init():
        return None
    for name in preferred_names:
        try:
            match = pygame.font.match_font(name, bold=bold)
        except Exception:
            match = None
        if match:
            try:
                return pygame.font.Font(match, size)
            except (pygame.error, OSError):
                continue
    try:
        return pygame.font.Font(None, size)
    except (pygame.error, OSError):
        return None
