import logging
import os
import tkinter as tk
from tkinter import filedialog, messagebox

from .errors import InvalidDimension, TileMapError
from .layer import LAYER_NAMES, SOLID, WALKABLE
from .session import parse_dimensions

logger = logging.getLogger(__name__)

IMAGE_TYPES = [('Image files', '*.png *.jpg *.jpeg *.gif *.bmp')]
MAP_TYPES = {
    'txt': [('Text files', '*.txt')],
    'json': [('JSON files', '*.json')],
}


def ask_dimensions(tk_root: tk.Tk, title: str, width: int, height: int, center=None):
    """Modal width/height prompt. Returns the raw entry texts or None on cancel."""
    dlg = tk.Toplevel(tk_root)
    dlg.title(title)
    dlg.grab_set()
    result = {}

    tk.Label(dlg, text='Map Width:').grid(row=0, column=0, sticky='e')
    width_var = tk.StringVar(value=str(width))
    tk.Entry(dlg, textvariable=width_var).grid(row=0, column=1)

    tk.Label(dlg, text='Map Height:').grid(row=1, column=0, sticky='e')
    height_var = tk.StringVar(value=str(height))
    tk.Entry(dlg, textvariable=height_var).grid(row=1, column=1)

    def ok():
        result['value'] = (width_var.get(), height_var.get())
        dlg.destroy()

    tk.Button(dlg, text='OK', command=ok).grid(row=2, column=0, pady=5)
    tk.Button(dlg, text='Cancel', command=dlg.destroy).grid(row=2, column=1, pady=5)
    if center:
        center(dlg)
    tk_root.wait_window(dlg)
    return result.get('value')


class FileMenu:
    """Tkinter menu bar handling map, layer and file actions."""

    def __init__(self, app, tk_root: tk.Tk):
        self.app = app
        self.tk_root = tk_root
        self.menubar = tk.Menu(tk_root)
        self.file_menu = tk.Menu(self.menubar, tearoff=0)
        self.update_file_menu()
        self.menubar.add_cascade(label='File', menu=self.file_menu)

        layer_menu = tk.Menu(self.menubar, tearoff=0)
        for idx in range(app.session.layer_count):
            layer_menu.add_command(label=LAYER_NAMES[idx].capitalize(),
                                   command=lambda i=idx: app.set_layer(i))
        self.menubar.add_cascade(label='Layer', menu=layer_menu)

        tile_menu = tk.Menu(self.menubar, tearoff=0)
        tile_menu.add_command(label='Walkable (0)', command=lambda: app.set_tile(WALKABLE))
        tile_menu.add_command(label='Solid (1)', command=lambda: app.set_tile(SOLID))
        self.menubar.add_cascade(label='Tile', menu=tile_menu)

        edit_menu = tk.Menu(self.menubar, tearoff=0)
        edit_menu.add_command(label='Undo (Right-Click)', command=app.undo)
        edit_menu.add_separator()
        edit_menu.add_command(label='Clear Layer', command=self.clear_layer_prompt)
        edit_menu.add_command(label='Clear All Layers', command=self.clear_all_prompt)
        edit_menu.add_command(label='Resize Map', command=self.open_resize_dialog)
        self.menubar.add_cascade(label='Edit', menu=edit_menu)

        map_menu = tk.Menu(self.menubar, tearoff=0)
        map_menu.add_command(label='Save as TXT', command=lambda: self.open_save_map_dialog('txt'))
        map_menu.add_command(label='Save as JSON', command=lambda: self.open_save_map_dialog('json'))
        map_menu.add_command(label='Load Map', command=self.open_load_map_dialog)
        self.menubar.add_cascade(label='Map', menu=map_menu)

        ref_menu = tk.Menu(self.menubar, tearoff=0)
        ref_menu.add_command(label='Load Reference Image', command=self.open_reference_dialog)
        ref_menu.add_command(label='Clear Reference', command=app.clear_reference)
        self.menubar.add_cascade(label='Reference', menu=ref_menu)

        tk_root.config(menu=self.menubar)

    # ---------------- Menu update -----------------
    def update_file_menu(self) -> None:
        self.file_menu.delete(0, tk.END)
        label = 'Hide UI' if self.app.show_ui else 'Show UI'
        self.file_menu.add_command(label=label, command=self.app.toggle_ui)
        self.file_menu.add_separator()
        self.file_menu.add_command(label='Exit', command=self.app.exit_program)

    # ---------------- Menu callbacks -----------------
    def open_resize_dialog(self) -> None:
        session = self.app.session
        entered = ask_dimensions(self.tk_root, 'Resize Map', session.width, session.height,
                                 center=self.app.center_window)
        if entered is None:
            return
        try:
            width, height = parse_dimensions(*entered)
            session.resize(width, height)
        except InvalidDimension as exc:
            logger.warning("Resize rejected: %s", exc)
            messagebox.showwarning('Invalid Input', str(exc), parent=self.tk_root)
            return
        self.app.on_map_replaced()
        messagebox.showinfo('Resize Map', 'Map resized successfully!', parent=self.tk_root)

    def open_save_map_dialog(self, fmt: str) -> None:
        maps_dir = self.app.config.general['maps_dir']
        os.makedirs(maps_dir, exist_ok=True)
        path = filedialog.asksaveasfilename(
            defaultextension='.' + fmt, filetypes=MAP_TYPES[fmt],
            initialdir=maps_dir, initialfile='map.' + fmt, parent=self.tk_root
        )
        if not path:
            return
        try:
            self.app.session.save(path, fmt)
        except TileMapError as exc:
            logger.warning("Save failed: %s", exc)
            messagebox.showerror('Error', f'Error saving map: {exc}', parent=self.tk_root)
            return
        messagebox.showinfo('Save Map', f'Map saved successfully as {fmt.upper()}!', parent=self.tk_root)

    def open_load_map_dialog(self) -> None:
        maps_dir = self.app.config.general['maps_dir']
        path = filedialog.askopenfilename(
            filetypes=MAP_TYPES['txt'] + MAP_TYPES['json'],
            initialdir=maps_dir if os.path.isdir(maps_dir) else None, parent=self.tk_root
        )
        if not path:
            return
        try:
            fmt = self.app.session.load(path)
        except TileMapError as exc:
            logger.warning("Load failed: %s", exc)
            messagebox.showerror('Error', f'Error loading map: {exc}', parent=self.tk_root)
            return
        self.app.on_map_replaced()
        messagebox.showinfo('Load Map', f'Map loaded successfully from {fmt.upper()}!', parent=self.tk_root)

    def open_reference_dialog(self) -> None:
        path = filedialog.askopenfilename(filetypes=IMAGE_TYPES, parent=self.tk_root)
        if not path:
            return
        error = self.app.load_reference_image(path)
        if error:
            messagebox.showerror('Error', f'Error loading image: {error}', parent=self.tk_root)
        else:
            messagebox.showinfo('Reference Image',
                                'Reference image loaded! It will be displayed behind the grid.',
                                parent=self.tk_root)

    def clear_layer_prompt(self) -> None:
        if messagebox.askyesno('Confirm Clear', 'Are you sure you want to clear the current layer?',
                               parent=self.tk_root):
            self.app.session.clear_layer(self.app.current_layer)

    def clear_all_prompt(self) -> None:
        if messagebox.askyesno('Confirm Clear All', 'Are you sure you want to clear ALL layers?',
                               parent=self.tk_root):
            self.app.session.clear_all()
