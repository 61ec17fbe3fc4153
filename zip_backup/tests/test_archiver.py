"""
测试 zip 压缩器
"""

import os
import zipfile
import pytest

from ..archiver import ZipArchiver
from ..errors import ArchiveError
from ..models import CompressionLevel


@pytest.fixture
def source(tmp_path):
    """带子目录和空目录的源目录"""
    src = tmp_path / "My Project"
    src.mkdir()
    (src / "a.txt").write_text("hello " * 200)
    (src / "sub").mkdir()
    (src / "sub" / "b.txt").write_text("world")
    (src / "empty").mkdir()
    return src


def test_archive_contains_contents_not_top_folder(source, tmp_path):
    """测试压缩包根目录对应源目录的内容"""
    dest = tmp_path / "out.zip"

    result = ZipArchiver().archive(str(source), str(dest))

    with zipfile.ZipFile(dest) as zf:
        names = set(zf.namelist())
        assert zf.read("sub/b.txt") == b"world"

    assert names == {"a.txt", "sub/", "sub/b.txt", "empty/"}
    assert result.entry_count == 4
    assert result.output_path == str(dest)
    assert result.archive_bytes == dest.stat().st_size
    assert result.level == CompressionLevel.FASTEST


@pytest.mark.parametrize("level, compress_type", [
    (CompressionLevel.NONE, zipfile.ZIP_STORED),
    (CompressionLevel.FASTEST, zipfile.ZIP_DEFLATED),
    (CompressionLevel.OPTIMAL, zipfile.ZIP_DEFLATED),
])
def test_compression_levels(source, tmp_path, level, compress_type):
    """测试三种压缩级别"""
    dest = tmp_path / "out.zip"

    result = ZipArchiver().archive(str(source), str(dest), level)

    with zipfile.ZipFile(dest) as zf:
        info = zf.getinfo("a.txt")
    assert info.compress_type == compress_type
    assert result.level == level


def test_archive_accepts_level_string(source, tmp_path):
    """测试压缩级别可以传字符串"""
    result = ZipArchiver().archive(str(source), str(tmp_path / "out.zip"), "none")

    assert result.level == CompressionLevel.NONE


def test_archive_overwrites_existing_file(source, tmp_path):
    """测试目标已存在时直接覆盖"""
    dest = tmp_path / "out.zip"
    dest.write_bytes(b"not a zip at all")

    ZipArchiver().archive(str(source), str(dest))

    assert zipfile.is_zipfile(dest)
    with zipfile.ZipFile(dest) as zf:
        assert "a.txt" in zf.namelist()


def test_archive_tolerates_old_timestamps(source, tmp_path):
    """测试1980年以前的修改时间不会报错"""
    old = 315000000  # 1979
    os.utime(source / "a.txt", (old, old))
    dest = tmp_path / "out.zip"

    result = ZipArchiver().archive(str(source), str(dest))

    assert result.entry_count == 4
    with zipfile.ZipFile(dest) as zf:
        assert zf.getinfo("a.txt").date_time[0] == 1980


def test_archive_failure_raises_archive_error(source, tmp_path):
    """测试输出路径不可写时抛出 ArchiveError"""
    dest = tmp_path / "missing_dir" / "out.zip"

    with pytest.raises(ArchiveError) as exc_info:
        ZipArchiver().archive(str(source), str(dest))

    assert exc_info.value.output_path == str(dest)
    assert isinstance(exc_info.value.__cause__, OSError)
    assert not dest.exists()


def test_archive_skips_its_own_output(source):
    """测试输出文件位于源目录内时不把自己打包进去"""
    dest = source / "self.zip"

    ZipArchiver().archive(str(source), str(dest))

    with zipfile.ZipFile(dest) as zf:
        assert "self.zip" not in zf.namelist()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlink not supported")
def test_archive_skips_dangling_links(source, tmp_path):
    """测试失效链接被跳过"""
    os.symlink(tmp_path / "gone.txt", source / "dangling.txt")
    dest = tmp_path / "out.zip"

    ZipArchiver().archive(str(source), str(dest))

    with zipfile.ZipFile(dest) as zf:
        assert "dangling.txt" not in zf.namelist()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlink not supported")
def test_archive_skips_directory_links(source, tmp_path):
    """测试目录链接不展开、不写入"""
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "big.bin").write_bytes(b"b" * 100)
    os.symlink(outside, source / "linked_dir")
    dest = tmp_path / "out.zip"

    result = ZipArchiver().archive(str(source), str(dest))

    with zipfile.ZipFile(dest) as zf:
        names = zf.namelist()
    assert not any(name.startswith("linked_dir") for name in names)
    assert result.entry_count == 4
