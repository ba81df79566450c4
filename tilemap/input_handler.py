import pygame

from .layer import SOLID, WALKABLE


class InputHandler:
    """Handle pygame input events."""

    def __init__(self, app):
        self.app = app
        self.panning = False
        self.minimap_drag = False
        self.last_mouse = (0, 0)

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.app.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)
            elif event.type == pygame.MOUSEWHEEL:
                self._handle_mousewheel(event)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._handle_mousebuttondown(event)
            elif event.type == pygame.MOUSEBUTTONUP:
                self._handle_mousebuttonup(event)
            elif event.type == pygame.MOUSEMOTION:
                self._handle_mousemotion(event)

    # ---------------- internal handlers -----------------
    def _handle_keydown(self, event):
        ctrl = pygame.key.get_mods() & pygame.KMOD_CTRL
        if pygame.K_1 <= event.key <= pygame.K_9:
            idx = event.key - pygame.K_1
            if idx < self.app.session.layer_count:
                self.app.set_layer(idx)
        elif event.key == pygame.K_s and ctrl:
            self.app.quick_save()
        elif event.key == pygame.K_z and ctrl:
            self.app.undo()
        elif event.key == pygame.K_w:
            self.app.set_tile(WALKABLE)
        elif event.key == pygame.K_s:
            self.app.set_tile(SOLID)
        elif event.key == pygame.K_TAB:
            self.app.toggle_ui()
        elif event.key == pygame.K_r:
            self.app.reload_config()
        elif event.key == pygame.K_ESCAPE:
            self.app.running = False
        elif event.key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN):
            step = self.app.pan_speed / self.app.zoom
            dx = {pygame.K_LEFT: -step, pygame.K_RIGHT: step}.get(event.key, 0)
            dy = {pygame.K_UP: -step, pygame.K_DOWN: step}.get(event.key, 0)
            self.app.pan(dx, dy)

    def _handle_mousewheel(self, event):
        if pygame.key.get_mods() & pygame.KMOD_CTRL:
            self.app.step_zoom(1 if event.y > 0 else -1)
        else:
            self.app.pan(0, -event.y * self.app.pan_speed / self.app.zoom)

    def _handle_mousebuttondown(self, event):
        if event.button == 1:
            if self.app.show_ui and self.app.minimap_rect().collidepoint(event.pos):
                self.minimap_drag = True
                self.app.minimap_click(event.pos)
            else:
                self.app.left_button_down = True
                self.app.paint_at(event.pos)
        elif event.button == 3:
            self.app.undo()
        elif event.button == 2:
            self.panning = True
            self.last_mouse = event.pos

    def _handle_mousebuttonup(self, event):
        if event.button == 1:
            self.app.left_button_down = False
            self.minimap_drag = False
        elif event.button == 2:
            self.panning = False

    def _handle_mousemotion(self, event):
        self.app.hover(event.pos)
        if self.panning:
            mx, my = event.pos
            dx = mx - self.last_mouse[0]
            dy = my - self.last_mouse[1]
            self.app.pan(-dx / self.app.zoom, -dy / self.app.zoom)
            self.last_mouse = event.pos
        if self.minimap_drag:
            self.app.minimap_click(event.pos)
        elif self.app.left_button_down:
            self.app.paint_at(event.pos)
