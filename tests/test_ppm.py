import io

from weekendtracer.ppm import gradient_pixels, main, write_gradient


def test_gradient_corners():
    pixels = list(gradient_pixels(256, 256))
    assert len(pixels) == 256 * 256
    assert pixels[0] == (0, 0, 0)
    assert pixels[255] == (255, 0, 0)
    assert pixels[-256] == (0, 255, 0)
    assert pixels[-1] == (255, 255, 0)


def test_gradient_is_row_major():
    pixels = list(gradient_pixels(2, 3))
    assert [p[0] for p in pixels] == [0, 255, 0, 255, 0, 255]
    assert [p[1] for p in pixels[:2]] == [0, 0]


def test_gradient_channels_are_monotonic():
    pixels = list(gradient_pixels(10, 4))
    row = [p[0] for p in pixels[:10]]
    assert row == sorted(row)
    column = [pixels[j * 10][1] for j in range(4)]
    assert column == sorted(column)
    assert all(p[2] == 0 for p in pixels)


def test_single_pixel_width_gives_zero():
    assert list(gradient_pixels(1, 1)) == [(0, 0, 0)]


def test_write_gradient_format():
    out, log = io.StringIO(), io.StringIO()
    write_gradient(out, 3, 2, log)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert len(lines) == 3 + 6
    assert lines[3] == "0 0 0"
    assert lines[-1] == "255 255 0"
    assert log.getvalue().splitlines()[-1] == "Done."
    assert "Scanlines remaining: 2" in log.getvalue()


def test_main_writes_default_image(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[:3] == ["P3", "256 256", "255"]
    assert len(lines) == 3 + 256 * 256
    assert captured.err.endswith("Done.\n")