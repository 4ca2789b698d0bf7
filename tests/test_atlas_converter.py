import os
import plistlib

from atlas_converter import (
    CONVERTED, FAILED, SKIPPED, DirectoryTree, SingleFile,
    convert_atlas_file, convert_atlas_text, convert_directory, convert_path, resolve_target,
)


def quiet(message):
    pass


def test_convert_atlas_text(sample_atlas):
    xml = convert_atlas_text(sample_atlas)

    assert plistlib.loads(xml.encode("utf-8"))["metadata"]["realTextureFileName"] == "hero.png"


def test_convert_atlas_text_rejects_prose():
    assert convert_atlas_text("not an atlas") is None


def test_resolve_target(tmp_path):
    assert resolve_target(str(tmp_path)) == DirectoryTree(str(tmp_path))
    assert resolve_target(str(tmp_path / "a.atlas")) == SingleFile(str(tmp_path / "a.atlas"))


def test_convert_file_writes_plist_named_after_image(write_atlas, sample_atlas, tmp_path):
    path = write_atlas("skeleton.atlas", sample_atlas)

    result = convert_atlas_file(path, quiet)

    assert result.status == CONVERTED
    assert result.plist_path == str(tmp_path / "hero.plist")
    assert (tmp_path / "hero.plist").exists()


def test_convert_file_skips_non_atlas(write_atlas, tmp_path):
    path = write_atlas("notes.atlas", "hello")
    messages = []

    result = convert_atlas_file(path, messages.append)

    assert result.status == SKIPPED
    assert os.listdir(tmp_path) == ["notes.atlas"]
    assert any(m.strip().startswith("SKIPPING") for m in messages)


def test_convert_missing_file(tmp_path):
    result = convert_atlas_file(str(tmp_path / "gone.atlas"), quiet)

    assert result.status == FAILED
    assert result.plist_path is None


def test_convert_directory(write_atlas, sample_atlas, header_only, tmp_path):
    write_atlas("chars/hero.atlas", sample_atlas)
    write_atlas("ui/deep/menu.atlas", header_only.replace("hero.png", "menu.png"))
    write_atlas("ui/readme.atlas", "nothing here")
    write_atlas("ui/other.txt", sample_atlas)

    summary = convert_directory(str(tmp_path), quiet, show_progress=False)

    assert summary.count(CONVERTED) == 2
    assert summary.count(SKIPPED) == 1
    assert summary.success
    assert (tmp_path / "chars" / "hero.plist").exists()
    assert (tmp_path / "ui" / "deep" / "menu.plist").exists()
    assert not (tmp_path / "ui" / "hero.plist").exists()


def test_directory_continues_after_failure(write_atlas, sample_atlas, tmp_path):
    bad = tmp_path / "a" / "bad.atlas"
    bad.parent.mkdir()
    bad.write_bytes(b"\xff\xfe\x00")
    write_atlas("b/hero.atlas", sample_atlas)

    summary = convert_directory(str(tmp_path), quiet, show_progress=False)

    assert [r.status for r in summary.results] == [FAILED, CONVERTED]
    assert not summary.success
    assert summary.describe() == "Converted 1 atlas file(s), skipped 0, failed 1."


def test_convert_path_dispatch(write_atlas, sample_atlas, tmp_path):
    path = write_atlas("hero.atlas", sample_atlas)

    single = convert_path(path, quiet)
    tree = convert_path(str(tmp_path), quiet, show_progress=False)

    assert [r.status for r in single.results] == [CONVERTED]
    assert [r.atlas_path for r in tree.results] == [path]


def test_control_character_in_one_file_does_not_stop_run(write_atlas, sample_atlas, header_only, tmp_path):
    write_atlas("a/x.atlas", header_only.replace("hero.png", "bad.png") + (
        "a\x01b\n  rotate: false\n  xy: 0, 0\n  size: 1, 1\n  orig: 1, 1\n  offset: 0, 0\n  index: -1\n"
    ))
    write_atlas("b/y.atlas", sample_atlas)

    summary = convert_directory(str(tmp_path), quiet, show_progress=False)

    assert [r.status for r in summary.results] == [CONVERTED, CONVERTED]
    assert (tmp_path / "a" / "bad.plist").exists()
    assert (tmp_path / "b" / "hero.plist").exists()


def test_default_progress_goes_to_stdout(write_atlas, sample_atlas, tmp_path, capsys):
    write_atlas("hero.atlas", sample_atlas)

    convert_directory(str(tmp_path), show_progress=False)

    assert "Wrote plist file to:" in capsys.readouterr().out
