from tilemap.minimap import MinimapGeometry, centered_view


def test_square_map_fills_panel():
    geo = MinimapGeometry(50, 50, 200)
    assert geo.scale == 4
    assert (geo.mini_width, geo.mini_height) == (200, 200)
    assert (geo.offset_x, geo.offset_y) == (5, 5)
    assert geo.panel_size == 210


def test_wide_map_is_letterboxed():
    geo = MinimapGeometry(200, 100, 200)
    assert geo.scale == 1
    assert (geo.mini_width, geo.mini_height) == (200, 100)
    assert geo.offset_y == 55


def test_cell_rect_min_one_pixel():
    geo = MinimapGeometry(200, 200, 100)
    assert geo.cell_rect(10, 20) == (15, 10, 1, 1)


def test_world_point():
    geo = MinimapGeometry(50, 50, 200)
    assert geo.world_point(4, 100, 64) is None
    assert geo.world_point(5 + 40, 5 + 8, 64) == (640, 128)


def test_viewport_rect():
    geo = MinimapGeometry(50, 50, 200)
    assert geo.viewport_rect(640, 0, 800, 640, 64) == (45, 5, 50, 40)


def test_centered_view_clamps():
    assert centered_view(640, 640, 200, 100, 3200, 3200) == (540, 590)
    assert centered_view(10, 10, 200, 100, 3200, 3200) == (0, 0)
    assert centered_view(3190, 3190, 200, 100, 3200, 3200) == (3000, 3100)
    assert centered_view(10, 10, 800, 600, 320, 320) == (0, 0)
