"""Drawing helpers translating top-left editor coordinates to arcade's."""
from __future__ import annotations

from typing import Any

from mapper.utils.grid_math import image_size


def draw_image(arcade_module, image: Any, x: int, y: int, screen_height: int, *, alpha: int = 255) -> None:
    """Draw a texture with its top-left corner at (x, y) in editor space."""
    if image is None:
        return
    width, height = image_size(image)
    bottom = screen_height - y - height
    arcade_module.draw_texture_rect(
        image,
        arcade_module.LBWH(x, bottom, width, height),
        alpha=max(0, min(255, int(alpha))),
    )


def draw_label(arcade_module, text: str, x: int, baseline_y: int, screen_height: int, *, font_size: int) -> None:
    """Draw black text whose baseline sits at baseline_y in editor space."""
    arcade_module.draw_text(
        text,
        x,
        screen_height - baseline_y,
        arcade_module.color.BLACK,
        font_size,
        anchor_y="baseline",
    )
