import logging
import os
import tkinter as tk
from tkinter import messagebox

import pygame

from tilemap.config_loader import Config
from tilemap.errors import TileMapError
from tilemap.input_handler import InputHandler
from tilemap.menu import FileMenu, ask_dimensions
from tilemap.minimap import centered_view
from tilemap.session import EditorSession, startup_dimensions
from tilemap.ui import MapRenderer

logger = logging.getLogger('tilemap')


class MapTool:
    def __init__(self):
        self.config = Config()
        logging.basicConfig(
            level=getattr(logging, str(self.config.general['log_level']).upper(), logging.INFO),
            format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        )

        # Create Tkinter root and embed the Pygame window inside it
        self.tk_root = tk.Tk()
        self.tk_root.title('2D Tile Map Maker - Multi-Layer')
        self.tk_root.protocol('WM_DELETE_WINDOW', self.exit_program)
        win_w, win_h = self.config.general['window_size']
        self.embed = tk.Frame(self.tk_root, width=win_w, height=win_h)
        self.embed.pack(fill=tk.BOTH, expand=True)
        self.tk_root.geometry(f'{win_w}x{win_h}')
        # Realize the frame so we can fetch its window id
        self.tk_root.update()
        os.environ['SDL_WINDOWID'] = str(self.embed.winfo_id())

        self.session = self.ask_startup_session()

        pygame.init()
        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption('2D Tile Map Maker - Multi-Layer')

        self.tile_size = self.config.tile_size
        self.zoom_levels = sorted(self.config.general['zoom_levels'])
        self.zoom = 1.0 if 1.0 in self.zoom_levels else self.zoom_levels[0]
        self.pan_speed = self.config.general['pan_speed']
        self.camera = [0, 0]
        self.current_layer = 0
        self.current_tile = 0
        self.reference_image = None
        self.hover_cell = None
        self.show_ui = True
        self.left_button_down = False
        self.running = True

        self.renderer = MapRenderer(self)
        self.input = InputHandler(self)
        self.menu = FileMenu(self, self.tk_root)

    def ask_startup_session(self) -> EditorSession:
        width, height = self.config.map_size
        entered = ask_dimensions(self.tk_root, 'Set Map Dimensions', width, height,
                                 center=self.center_window)
        if entered is not None:
            width, height, ok = startup_dimensions(*entered, default=self.config.map_size)
            if not ok:
                messagebox.showwarning(
                    'Invalid Input',
                    f'Dimensions must be whole numbers between 1 and 200. Using default {width}x{height}',
                    parent=self.tk_root)
        return EditorSession.new(width, height, self.config.layer_count, self.config.tile_size)

    # ---------------- camera -----------------
    def world_to_screen(self, x, y):
        return int((x - self.camera[0]) * self.zoom), int((y - self.camera[1]) * self.zoom)

    def screen_to_world(self, x, y):
        return x / self.zoom + self.camera[0], y / self.zoom + self.camera[1]

    def view_size(self):
        return self.screen.get_width() / self.zoom, self.screen.get_height() / self.zoom

    def clamp_camera(self):
        map_w = self.session.width * self.tile_size
        map_h = self.session.height * self.tile_size
        vis_w, vis_h = self.view_size()
        self.camera[0] = max(0, min(self.camera[0], map_w - vis_w))
        self.camera[1] = max(0, min(self.camera[1], map_h - vis_h))

    def pan(self, dx, dy):
        self.camera[0] += dx
        self.camera[1] += dy
        self.clamp_camera()

    def step_zoom(self, direction: int):
        idx = self.zoom_levels.index(self.zoom) + direction
        self.zoom = self.zoom_levels[max(0, min(len(self.zoom_levels) - 1, idx))]
        self.clamp_camera()

    def center_window(self, window):
        window.update_idletasks()
        w = window.winfo_width()
        h = window.winfo_height()
        px = self.tk_root.winfo_x()
        py = self.tk_root.winfo_y()
        pw = self.tk_root.winfo_width()
        ph = self.tk_root.winfo_height()
        x = px + (pw - w) // 2
        y = py + (ph - h) // 2
        window.geometry(f"+{x}+{y}")

    # ---------------- editing -----------------
    def cell_at(self, pos):
        x, y = self.screen_to_world(*pos)
        col = int(x // self.tile_size)
        row = int(y // self.tile_size)
        if 0 <= row < self.session.height and 0 <= col < self.session.width:
            return row, col
        return None

    def hover(self, pos):
        cell = self.cell_at(pos)
        if cell:
            self.hover_cell = (cell[1], cell[0])

    def paint_at(self, pos):
        cell = self.cell_at(pos)
        if cell:
            self.session.paint_cell(self.current_layer, cell[0], cell[1], self.current_tile)
            self.hover_cell = (cell[1], cell[0])

    def undo(self):
        if not self.session.undo():
            logger.debug("Nothing to undo")

    def set_layer(self, idx: int):
        self.current_layer = idx

    def set_tile(self, value: int):
        self.current_tile = value

    def on_map_replaced(self):
        self.hover_cell = None
        self.clamp_camera()

    # ---------------- minimap -----------------
    def minimap_rect(self):
        return self.renderer.minimap_rect(self.screen)

    def minimap_click(self, pos):
        rect = self.minimap_rect()
        geo = self.renderer.minimap_geometry()
        point = geo.world_point(pos[0] - rect.x, pos[1] - rect.y, self.tile_size)
        if point is None:
            return
        vis_w, vis_h = self.view_size()
        x, y = centered_view(point[0], point[1], vis_w, vis_h,
                             self.session.width * self.tile_size, self.session.height * self.tile_size)
        self.camera = [x, y]

    # ---------------- reference image -----------------
    def load_reference_image(self, path):
        """Returns an error message, or None on success."""
        try:
            self.reference_image = pygame.image.load(path).convert()
        except (pygame.error, OSError) as exc:
            logger.warning("Could not load reference image %s: %s", path, exc)
            return str(exc)
        return None

    def clear_reference(self):
        self.reference_image = None

    # ---------------- misc -----------------
    def quick_save(self):
        path = os.path.join(self.config.general['maps_dir'], 'quick.json')
        try:
            self.session.save(path, 'json')
        except TileMapError as exc:
            logger.warning("Quick save failed: %s", exc)
            messagebox.showerror('Error', f'Error saving map: {exc}', parent=self.tk_root)

    def reload_config(self):
        self.config = Config(self.config.path)

    def toggle_ui(self):
        self.show_ui = not self.show_ui
        self.menu.update_file_menu()

    def exit_program(self):
        self.running = False

    def run(self):
        clock = pygame.time.Clock()
        while self.running:
            self.tk_root.update_idletasks()
            self.tk_root.update()
            self.input.handle_events()
            self.renderer.draw(self.screen)
            pygame.display.flip()
            clock.tick(60)
        self.tk_root.destroy()


def main():
    tool = MapTool()
    tool.run()


if __name__ == '__main__':
    main()
