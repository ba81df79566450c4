import pygame
from pygame import Rect

from .layer import SOLID, WALKABLE
from .minimap import MinimapGeometry

TILE_NAMES = {WALKABLE: 'Walkable (0)', SOLID: 'Solid (1)'}


def with_alpha(color: str, alpha: int) -> pygame.Color:
    c = pygame.Color(color)
    c.a = alpha
    return c


class MapRenderer:
    """Draws the tile layers, grid, minimap overlay and status bar."""

    def __init__(self, app):
        self.app = app
        self.font = pygame.font.Font(None, 20)

    # ---------------- map -----------------
    def visible_cells(self, surface: pygame.Surface):
        """Row/col ranges intersecting the screen."""
        app = self.app
        ts = app.tile_size
        x0, y0 = app.screen_to_world(0, 0)
        x1, y1 = app.screen_to_world(surface.get_width(), surface.get_height())
        col0 = max(0, int(x0 // ts))
        row0 = max(0, int(y0 // ts))
        col1 = min(app.session.width, int(x1 // ts) + 1)
        row1 = min(app.session.height, int(y1 // ts) + 1)
        return range(row0, row1), range(col0, col1)

    def draw(self, surface: pygame.Surface) -> None:
        ui = self.app.config.ui
        surface.fill(pygame.Color(ui['background']))
        self.draw_reference(surface)
        self.draw_layers(surface)
        self.draw_grid(surface)
        if self.app.show_ui:
            self.draw_minimap(surface)
            self.draw_status(surface)

    def draw_reference(self, surface: pygame.Surface) -> None:
        image = self.app.reference_image
        if image is None:
            return
        sx, sy = self.app.world_to_screen(0, 0)
        w = int(self.app.session.width * self.app.tile_size * self.app.zoom)
        h = int(self.app.session.height * self.app.tile_size * self.app.zoom)
        surface.blit(pygame.transform.scale(image, (w, h)), (sx, sy))

    def draw_layers(self, surface: pygame.Surface) -> None:
        app = self.app
        ui = app.config.ui
        grid = app.session.grid
        rows, cols = self.visible_cells(surface)
        size = max(1, int(app.tile_size * app.zoom))
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for layer in grid.layers:
            alpha = ui['active_alpha'] if layer.index == app.current_layer else ui['inactive_alpha']
            walk = with_alpha(ui['layer_colors'][layer.index], alpha)
            solid = with_alpha(ui['solid_colors'][layer.index], alpha)
            for r in rows:
                values = layer.rows[r]
                for c in cols:
                    value = values[c]
                    if value == WALKABLE:
                        continue
                    sx, sy = app.world_to_screen(c * app.tile_size, r * app.tile_size)
                    cell = Rect(sx, sy, size, size)
                    overlay.fill(solid if value == SOLID else walk, cell)
            # layers blend on top of each other
            surface.blit(overlay, (0, 0))
            overlay.fill((0, 0, 0, 0))

    def draw_grid(self, surface: pygame.Surface) -> None:
        app = self.app
        color = pygame.Color(app.config.ui['grid_color'])
        ts = app.tile_size
        left, top = app.world_to_screen(0, 0)
        right, bottom = app.world_to_screen(app.session.width * ts, app.session.height * ts)
        for r in range(app.session.height + 1):
            _, y = app.world_to_screen(0, r * ts)
            pygame.draw.line(surface, color, (left, y), (right, y))
        for c in range(app.session.width + 1):
            x, _ = app.world_to_screen(c * ts, 0)
            pygame.draw.line(surface, color, (x, top), (x, bottom))

    # ---------------- minimap -----------------
    def minimap_geometry(self) -> MinimapGeometry:
        return MinimapGeometry(self.app.session.width, self.app.session.height,
                               self.app.config.ui['minimap_max_size'])

    def minimap_rect(self, surface: pygame.Surface) -> Rect:
        ui = self.app.config.ui
        size = self.minimap_geometry().panel_size
        return Rect(surface.get_width() - size - ui['minimap_margin'],
                    surface.get_height() - ui['status_bar_height'] - size - ui['minimap_margin'],
                    size, size)

    def draw_minimap(self, surface: pygame.Surface) -> None:
        app = self.app
        ui = app.config.ui
        geo = self.minimap_geometry()
        rect = self.minimap_rect(surface)
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(pygame.Color(ui['minimap_background']))

        if app.reference_image is not None:
            thumb = pygame.transform.scale(app.reference_image, (geo.mini_width, geo.mini_height))
            panel.blit(thumb, (geo.offset_x, geo.offset_y))

        for layer in app.session.grid.layers:
            color = with_alpha(ui['layer_colors'][layer.index], 120)
            for r, values in enumerate(layer.rows):
                for c, value in enumerate(values):
                    if value != WALKABLE:
                        panel.fill(color, Rect(geo.cell_rect(r, c)))

        vx, vy = app.camera
        vw = surface.get_width() / app.zoom
        vh = surface.get_height() / app.zoom
        view = Rect(geo.viewport_rect(vx, vy, vw, vh, app.tile_size))
        panel.fill(with_alpha(ui['viewport_color'], 100), view)
        pygame.draw.rect(panel, pygame.Color(ui['viewport_color']), view, 2)

        surface.blit(panel, rect.topleft)
        pygame.draw.rect(surface, (128, 128, 128), rect, 2)

    # ---------------- status bar -----------------
    def status_text(self) -> str:
        app = self.app
        session = app.session
        col, row = app.hover_cell if app.hover_cell else (0, 0)
        layer = session.grid.layers[app.current_layer].name.capitalize()
        text = (f"Tile: ({col}, {row})   Layer: {layer}   Brush: {TILE_NAMES[app.current_tile]}"
                f"   Map: {session.width}x{session.height}")
        last = session.last_edit
        if last is not None:
            text += (f"   Last: {session.grid.layers[last.layer].name} ({last.col}, {last.row})"
                     f" {last.old_value}->{last.new_value}")
        if session.unsaved:
            text += '   *unsaved'
        return text

    def draw_status(self, surface: pygame.Surface) -> None:
        ui = self.app.config.ui
        height = ui['status_bar_height']
        bar = Rect(0, surface.get_height() - height, surface.get_width(), height)
        pygame.draw.rect(surface, (30, 30, 30), bar)
        label = self.font.render(self.status_text(), True, pygame.Color(ui['status_color']))
        surface.blit(label, (8, bar.y + (height - label.get_height()) // 2))
        swatch = Rect(bar.right - height, bar.y + 4, height - 8, height - 8)
        pygame.draw.rect(surface, pygame.Color(ui['layer_colors'][self.app.current_layer]), swatch)
