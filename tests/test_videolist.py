import pytest

from daylab.tablemodel import USER_ROLE
from daylab.videolist import VideoListModel, load_videos


def _video(name, date):
    return (
        f'<video name="{name}" date="{date}">'
        f'<attr tag="Director">Dir {name}</attr>'
        f'<attr tag="Actor">Act {name}</attr>'
        f'<attr tag="Rating">Rate {name}</attr>'
        f'<attr tag="Desc">Desc {name}</attr>'
        f'<poster img="{name}.png"/>'
        f'<page link="http://example.com/{name}"/>'
        f'<playtimes>plays {name}</playtimes>'
        f'</video>'
    )


def _expected(name, date):
    return [
        name, date, "Director", f"Dir {name}", "Actor", f"Act {name}",
        "Rating", f"Rate {name}", "Desc", f"Desc {name}", f"{name}.png",
        f"http://example.com/{name}", f"plays {name}",
    ]


@pytest.fixture
def catalogue(tmp_path):
    path = tmp_path / "videos.xml"
    path.write_text(f"<videos>{_video('alpha', '2001')}{_video('beta', '2002')}</videos>",
                    encoding="utf-8")
    return path


def test_load_videos_reads_fields_in_order(catalogue):
    assert load_videos(catalogue) == [_expected("alpha", "2001"), _expected("beta", "2002")]


def test_load_videos_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_videos(tmp_path / "missing.xml")


def test_load_videos_malformed(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("<videos><video name='a'>", encoding="utf-8")
    with pytest.raises(ValueError):
        load_videos(path)


def test_model_data_and_roles(catalogue):
    model = VideoListModel(catalogue)
    assert not model.has_error()
    assert model.error_string() == ""
    assert model.source == str(catalogue)
    assert model.row_count() == 2
    names = model.role_names()
    assert len(names) == 13
    assert names[USER_ROLE] == "name"
    assert names[USER_ROLE + 12] == "playtimes"
    for role, _ in names.items():
        assert model.data(1, role) == _expected("beta", "2002")[role - USER_ROLE]


def test_model_missing_file_records_error(tmp_path):
    path = tmp_path / "missing.xml"
    model = VideoListModel(path)
    assert model.has_error()
    assert model.error_string() == f"{path} File Not Found!"
    assert model.row_count() == 0


def test_model_keeps_videos_before_parse_error(tmp_path):
    path = tmp_path / "partial.xml"
    path.write_text(f"<videos>{_video('alpha', '2001')}<video name='x'></oops>",
                    encoding="utf-8")
    model = VideoListModel(path)
    assert model.has_error()
    assert model.row_count() == 1
    assert model.data(0, USER_ROLE) == "alpha"


def test_remove(catalogue):
    model = VideoListModel(catalogue)
    model.remove(0)
    assert model.row_count() == 1
    assert model.data(0, USER_ROLE) == "beta"
    with pytest.raises(IndexError):
        model.remove(1)


def test_reload_picks_up_changes_and_clears_error(tmp_path):
    path = tmp_path / "videos.xml"
    model = VideoListModel(path)
    assert model.has_error()
    path.write_text(f"<videos>{_video('gamma', '2003')}</videos>", encoding="utf-8")
    model.reload()
    assert not model.has_error()
    assert model.row_count() == 1
    assert model.data(0, USER_ROLE + 1) == "2003"


def test_data_invalid_role(catalogue):
    model = VideoListModel(catalogue)
    with pytest.raises(IndexError):
        model.data(0, USER_ROLE - 1)
    with pytest.raises(IndexError):
        model.data(0, USER_ROLE + 13)