import pytest

from fdfview.app import is_map_filename, main


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("map.fdf", True),
        ("a.fdf", True),
        ("dir/42.fdf", True),
        (".fdf", False),
        ("fdf", False),
        ("map.FDF", False),
        ("map.fdf.txt", False),
        ("", False),
    ],
)
def test_is_map_filename(path, expected):
    assert is_map_filename(path) is expected


def test_main_without_arguments_fails():
    assert main([]) == 1


def test_main_with_too_many_arguments_fails():
    assert main(["a.fdf", "b.fdf"]) == 1


def test_main_rejects_wrong_suffix(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("0 0\n0 0\n")
    assert main([str(path)]) == 1


def test_main_rejects_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.fdf")]) == 1


def test_main_classic_flag_still_requires_a_file(tmp_path):
    assert main(["--classic"]) == 1
    assert main(["--classic", str(tmp_path / "missing.fdf")]) == 1


def test_main_rejects_directory_named_like_a_map(tmp_path):
    folder = tmp_path / "maps.fdf"
    folder.mkdir()
    assert main([str(folder)]) == 1