import os
from types import SimpleNamespace

from wpdock.core.fileutils import WPFileUtils


class Dummy:
    class App:
        class Log:
            def debug(self, *args, **kwargs):
                pass

            def error(self, *args, **kwargs):
                pass

            def info(self, *args, **kwargs):
                pass

            def warning(self, *args, **kwargs):
                pass
        log = Log()
    app = App()


def test_copyfiles_overwrite(tmp_path):
    src = tmp_path / "src"
    dest = tmp_path / "dest"
    src.mkdir()
    dest.mkdir()
    (src / "functions.php").write_text("<?php")
    (dest / "old.txt").write_text("old")
    inode = os.stat(dest).st_ino
    # destination starts with a file the source does not have
    WPFileUtils.copyfiles(Dummy(), str(src), str(dest), overwrite=True)
    assert (dest / "functions.php").read_text() == "<?php"
    assert not (dest / "old.txt").exists()
    assert os.stat(dest).st_ino == inode


def test_copyfiles_merges_without_overwrite(tmp_path):
    src = tmp_path / "src"
    dest = tmp_path / "dest"
    (src / "plugins").mkdir(parents=True)
    dest.mkdir()
    (src / "plugins" / "hello.php").write_text("hello")
    (dest / "keep.txt").write_text("keep")
    WPFileUtils.copyfiles(Dummy(), str(src), str(dest))
    assert (dest / "plugins" / "hello.php").is_file()
    assert (dest / "keep.txt").is_file()


def test_unique_path_suffixes(tmp_path):
    base = tmp_path / "20240101_000000"
    assert WPFileUtils.unique_path(Dummy(), str(base)) == str(base)
    base.mkdir()
    assert WPFileUtils.unique_path(Dummy(), str(base)) == f"{base}_1"
    (tmp_path / "20240101_000000_1").mkdir()
    assert WPFileUtils.unique_path(Dummy(), str(base)) == f"{base}_2"


def test_clear_keeps_directory(tmp_path):
    content = tmp_path / "wp-content"
    (content / "uploads" / "2024").mkdir(parents=True)
    (content / "index.php").write_text("")
    WPFileUtils.clear(Dummy(), str(content))
    assert content.is_dir()
    assert os.listdir(content) == []


def test_rm_missing_path_is_noop(tmp_path):
    WPFileUtils.rm(Dummy(), str(tmp_path / "nothing"))


def test_chmod_recursive(tmp_path):
    content = tmp_path / "wp-content"
    (content / "themes").mkdir(parents=True)
    (content / "themes" / "style.css").write_text("")
    os.chmod(content / "themes" / "style.css", 0o600)
    WPFileUtils.chmod(SimpleNamespace(app=Dummy.app), str(content), 0o755, recursive=True)
    assert os.stat(content / "themes" / "style.css").st_mode & 0o777 == 0o755


def test_dirsize_and_human_size(tmp_path):
    (tmp_path / "a").write_bytes(b"x" * 1000)
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b").write_bytes(b"x" * 48)
    assert WPFileUtils.dirsize(str(tmp_path)) == 1048
    assert WPFileUtils.human_size(512) == "512B"
    assert WPFileUtils.human_size(2048) == "2.0K"
    assert WPFileUtils.human_size(5 * 1024 * 1024) == "5.0M"
