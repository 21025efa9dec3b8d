import pytest

from fsndn.fileblock import BlockStore
from fsndn.service import (
    AddFileSegRequest,
    AddNewFileRequest,
    DataNodeService,
    ServiceCancelled,
    WriteRequest,
)

SEG = 16


@pytest.fixture
def service(tmp_path):
    return DataNodeService(1000, BlockStore(tmp_path, SEG))


def test_add_new_file_round_trip(service):
    content = b"hello world"
    assert service.add_new_file(AddNewFileRequest("/a", content, len(content))) == 0
    assert service.get_file_size("/a") == len(content)
    assert service.read_from_file("/a", len(content)) == content


def test_large_file_split_and_read(service):
    content = bytes(range(40))
    service.add_new_file(AddNewFileRequest("/big", content, len(content)))
    assert service.read_from_file("/big", len(content)) == content


def test_add_new_file_size_mismatch(service):
    with pytest.raises(ServiceCancelled):
        service.add_new_file(AddNewFileRequest("/a", b"abc", 5))
    assert service.get_file_size("/a") == -1


def test_missing_file_size_is_minus_one(service):
    assert service.get_file_size("/nothing") == -1


def test_add_empty_file(service):
    assert service.add_empty_file("/e", 1, 2, 3) == 0
    assert service.get_file_size("/e") == 0


def test_del_file(service):
    service.add_new_file(AddNewFileRequest("/a", b"abc", 3))
    assert service.del_file("/a") == 0
    assert service.get_file_size("/a") == -1
    with pytest.raises(ServiceCancelled):
        service.del_file("/a")


def test_del_dir(service):
    service.add_new_file(AddNewFileRequest("/d/a", b"xy", 2))
    service.add_new_file(AddNewFileRequest("/d/b", b"z", 1))
    assert service.del_dir("/d") == 0
    assert service.get_file_size("/d/a") == -1
    assert service.get_file_size("/d/b") == -1
    with pytest.raises(ServiceCancelled):
        service.del_dir("/d")


def test_write_to_file_errors(service):
    with pytest.raises(ServiceCancelled):
        service.write_to_file(WriteRequest("/missing", b"abc", 3))
    service.add_empty_file("/w", 0, 0, 0)
    with pytest.raises(ServiceCancelled):
        service.write_to_file(WriteRequest("/w", b"abc", 4))


def test_write_to_file(service):
    service.add_empty_file("/w", 0, 0, 0)
    assert service.write_to_file(WriteRequest("/w", b"data", 4)) == 0
    assert service.read_from_file("/w", 4) == b"data"


def test_read_missing_file(service):
    with pytest.raises(ServiceCancelled, match="No Such File"):
        service.read_from_file("/missing", 4)


def test_segments_round_trip(service):
    first = b"a" * SEG
    second = b"b" * SEG
    assert service.add_file_seg(AddFileSegRequest("/f", first, SEG, 0)) == 0
    service.add_file_seg(AddFileSegRequest("/f", second, SEG, 1))
    assert service.get_file_seg("/f", SEG, 0) == first
    assert service.get_file_seg("/f", SEG, 1) == second
    assert service.get_file_size("/f") == 2 * SEG


def test_add_file_seg_errors(service):
    with pytest.raises(ServiceCancelled):
        service.add_file_seg(AddFileSegRequest("/f", b"abc", 2, 0))
    big = b"x" * (SEG + 1)
    with pytest.raises(ServiceCancelled):
        service.add_file_seg(AddFileSegRequest("/f", big, len(big), 0))


def test_get_file_seg_missing(service):
    with pytest.raises(ServiceCancelled, match="No Such File"):
        service.get_file_seg("/missing", 4, 0)


def test_space_size_tracks_usage(service):
    before = service.get_space_size()
    service.add_new_file(AddNewFileRequest("/a", b"12345", 5))
    assert service.get_space_size() == before - 5
    service.del_file("/a")
    assert service.get_space_size() == before


def test_children(service):
    service.add_new_file(AddNewFileRequest("/a/x", b"1", 1))
    service.add_new_file(AddNewFileRequest("/a/y", b"2", 1))
    assert sorted(service.get_children("/a")) == ["x", "y"]
    assert "/ndn/fsndn/prefix/a/x" in service.get_all_children()