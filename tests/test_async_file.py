import pytest

from parallab.async_file import (
    AsyncFile,
    OpenMode,
    copy_file,
    copy_two_files,
    main,
    open_file,
)


@pytest.mark.asyncio
async def test_open_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        await open_file(tmp_path / "missing.in", OpenMode.READ)


@pytest.mark.asyncio
async def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = b"hello\x00world" * 10
    async with await open_file(path, OpenMode.WRITE) as out:
        assert await out.write(payload) == len(payload)
    async with await open_file(path, OpenMode.READ) as src:
        data = await src.read(len(payload) * 2)
        assert data == payload
        assert await src.read(16) == b""


@pytest.mark.asyncio
async def test_write_mode_truncates(tmp_path):
    path = tmp_path / "t.txt"
    path.write_bytes(b"a much longer original content")
    async with await open_file(path, OpenMode.WRITE) as out:
        await out.write(b"short")
    assert path.read_bytes() == b"short"


@pytest.mark.asyncio
async def test_context_manager_closes(tmp_path):
    path = tmp_path / "c.txt"
    path.write_bytes(b"x")
    async with await open_file(path, OpenMode.READ) as f:
        assert f.is_open()
    assert not f.is_open()


@pytest.mark.asyncio
async def test_closed_file_rejects_io():
    f = AsyncFile()
    assert not f.is_open()
    with pytest.raises(RuntimeError):
        await f.read(10)
    with pytest.raises(RuntimeError):
        await f.write(b"abc")


@pytest.mark.asyncio
async def test_close_is_idempotent(tmp_path):
    path = tmp_path / "i.txt"
    path.write_bytes(b"x")
    f = await open_file(path, OpenMode.READ)
    f.close()
    f.close()
    assert f.fd == -1


@pytest.mark.asyncio
async def test_copy_file_copies_content(tmp_path):
    src = tmp_path / "src.bin"
    dst = tmp_path / "dst.bin"
    content = bytes(range(256)) * 50
    src.write_bytes(content)
    copied = await copy_file(src, dst)
    assert copied == len(content)
    assert dst.read_bytes() == content


@pytest.mark.asyncio
async def test_copy_file_small_chunks(tmp_path):
    src = tmp_path / "src.txt"
    dst = tmp_path / "dst.txt"
    content = b"line of text\n" * 37
    src.write_bytes(content)
    copied = await copy_file(src, dst, chunk_size=7)
    assert copied == len(content)
    assert dst.read_bytes() == content


@pytest.mark.asyncio
async def test_copy_empty_file(tmp_path):
    src = tmp_path / "empty.in"
    dst = tmp_path / "empty.out"
    src.write_bytes(b"")
    assert await copy_file(src, dst) == 0
    assert dst.read_bytes() == b""


@pytest.mark.asyncio
async def test_copy_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        await copy_file(tmp_path / "nope.in", tmp_path / "nope.out")
    assert not (tmp_path / "nope.out").exists()


@pytest.mark.asyncio
async def test_copy_two_files(tmp_path):
    a = b"first file\n" * 100
    b = b"second file\n" * 40
    (tmp_path / "a.in").write_bytes(a)
    (tmp_path / "b.in").write_bytes(b)
    result = await copy_two_files(tmp_path)
    assert result == (len(a), len(b))
    assert (tmp_path / "a.out").read_bytes() == a
    assert (tmp_path / "b.out").read_bytes() == b


def test_main_creates_and_copies(tmp_path):
    assert main([str(tmp_path)]) == 0
    a_in = (tmp_path / "a.in").read_bytes()
    b_in = (tmp_path / "b.in").read_bytes()
    assert (tmp_path / "a.out").read_bytes() == a_in
    assert (tmp_path / "b.out").read_bytes() == b_in
    assert len(a_in.decode("utf-8").splitlines()) == 512
    assert len(b_in.decode("utf-8").splitlines()) == 256


def test_main_reports_missing_directory(tmp_path):
    assert main([str(tmp_path / "does-not-exist")]) == 1