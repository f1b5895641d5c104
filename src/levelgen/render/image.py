# src/levelgen/render/image.py
# Debug render of a generated grid to a PNG using Pillow.

import os
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..grid import Grid
from ..tiles import TileRoles

EMPTY = -1

def _fallback_color(tile_id: int, tiles: TileRoles) -> Tuple[int, int, int, int]:
    if tile_id == EMPTY:           return (  0,   0,   0,   0)
    if tile_id == tiles.road_end:  return (255, 220,   0, 255)
    if tile_id == tiles.road:      return (150, 110,  60, 255)
    if tile_id == tiles.background: return (  0, 180,   0, 255)
    if tile_id == tiles.border:    return (160,  60,  40, 255)
    return (220, 220, 220, 255)

def tile_image(tile_id: int, tile_size: int, tiles: TileRoles, label: bool = False) -> Image.Image:
    img = Image.new("RGBA", (tile_size, tile_size), color=_fallback_color(tile_id, tiles))
    if label and tile_id != EMPTY:
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()
        text = str(tile_id)
        tw, th = draw.textlength(text, font=font), 8
        draw.text(((tile_size - tw) / 2, (tile_size - th) / 2), text, fill=(0, 0, 0, 255), font=font)
    return img

def render_image(grid: Grid, tile_size: int = 16, tiles: Optional[TileRoles] = None,
                 label: bool = False) -> Image.Image:
    tiles = tiles or TileRoles()
    rows = grid.as_matrix(empty=EMPTY)
    h = len(rows)
    w = len(rows[0]) if rows else 0
    canvas = Image.new("RGBA", (w * tile_size, h * tile_size), (0, 0, 0, 0))
    cache = {}
    for y, row in enumerate(rows):
        for x, tid in enumerate(row):
            if tid not in cache:
                cache[tid] = tile_image(tid, tile_size, tiles, label)
            img = cache[tid]
            x0, y0 = x * tile_size, y * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    return canvas

def render_png(grid: Grid, out_png: str, tile_size: int = 16,
               tiles: Optional[TileRoles] = None, label: bool = False) -> str:
    canvas = render_image(grid, tile_size, tiles, label)
    folder = os.path.dirname(out_png)
    if folder:
        os.makedirs(folder, exist_ok=True)
    canvas.save(out_png)
    return out_png
