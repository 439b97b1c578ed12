import io

from genkicub.errors import (
    CLR_RANGE_ERR,
    FLOOD_FAIL,
    CubError,
    TextureNotFoundError,
    report_error,
)


def test_cub_error_message():
    err = CubError(FLOOD_FAIL)
    assert str(err) == FLOOD_FAIL
    assert err.message == FLOOD_FAIL


def test_texture_error_is_cub_error():
    err = TextureNotFoundError("./walls/north.xpm")
    assert isinstance(err, CubError)
    assert err.path == "./walls/north.xpm"
    assert str(err) == "Texture not found: ./walls/north.xpm"


def test_texture_error_without_path():
    err = TextureNotFoundError(None)
    assert str(err) == "Texture not found: "


def test_report_error_format():
    out = io.StringIO()
    report_error(CubError(CLR_RANGE_ERR), out)
    assert out.getvalue() == "Error\n" + CLR_RANGE_ERR + "\n"


def test_report_texture_error_has_no_trailing_newline():
    out = io.StringIO()
    report_error(TextureNotFoundError("a.xpm"), out)
    assert out.getvalue() == "Error\nTexture not found: a.xpm"


def test_report_error_defaults_to_stderr(capsys):
    report_error(CubError(FLOOD_FAIL))
    captured = capsys.readouterr()
    assert captured.err == "Error\n" + FLOOD_FAIL + "\n"
    assert captured.out == ""


def test_report_texture_error_without_path():
    out = io.StringIO()
    report_error(TextureNotFoundError(None), out)
    assert out.getvalue() == "Error\nTexture not found: "