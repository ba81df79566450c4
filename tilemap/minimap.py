PADDING = 5


class MinimapGeometry:
    """Maps between minimap panel pixels and map tiles.

    All panel coordinates are relative to the panel's top-left corner.
    """

    def __init__(self, map_width: int, map_height: int, max_size: int = 200):
        self.map_width = map_width
        self.map_height = map_height
        self.max_size = max_size
        self.scale = min(max_size / map_width, max_size / map_height)
        self.mini_width = int(map_width * self.scale)
        self.mini_height = int(map_height * self.scale)
        self.offset_x = (max_size - self.mini_width) // 2 + PADDING
        self.offset_y = (max_size - self.mini_height) // 2 + PADDING

    @property
    def panel_size(self) -> int:
        return self.max_size + 2 * PADDING

    def cell_rect(self, row: int, col: int) -> tuple[int, int, int, int]:
        side = max(1, int(self.scale))
        return (self.offset_x + int(col * self.scale),
                self.offset_y + int(row * self.scale),
                side, side)

    def world_point(self, px: int, py: int, tile_size: int):
        """World pixel under a panel click, or None left of/above the map."""
        x = px - self.offset_x
        y = py - self.offset_y
        if x < 0 or y < 0:
            return None
        return int(x / self.scale * tile_size), int(y / self.scale * tile_size)

    def viewport_rect(self, view_x: float, view_y: float, view_w: float, view_h: float,
                      tile_size: int) -> tuple[int, int, int, int]:
        """Panel rectangle covering the visible part of the map (world pixels in)."""
        return (self.offset_x + int(view_x / tile_size * self.scale),
                self.offset_y + int(view_y / tile_size * self.scale),
                int(view_w / tile_size * self.scale),
                int(view_h / tile_size * self.scale))


def centered_view(world_x: float, world_y: float, view_w: float, view_h: float,
                  map_px_w: float, map_px_h: float) -> tuple[float, float]:
    """Top-left of a view centred on a world point, kept inside the map."""
    x = world_x - view_w / 2
    y = world_y - view_h / 2
    x = max(0, min(x, map_px_w - view_w))
    y = max(0, min(y, map_px_h - view_h))
    return x, y
