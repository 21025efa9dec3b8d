import pytest

from fsndn.fileblock import BlockStore, FileBlock, SpaceEntry, SpaceTable

SEG = 16


@pytest.fixture
def store(tmp_path):
    return BlockStore(tmp_path / "blocks", SEG)


def test_small_block_registers_free_space(store):
    data = b"abcd"
    block = FileBlock("/f", data, 0, store)
    assert block.offset == 0
    assert block.size == len(data)
    entries = list(store.space_table)
    assert len(entries) == 1
    assert entries[0].path == str(block.path)
    assert entries[0].offset == len(data) + 1
    assert block.read(len(data)) == data


def test_second_small_block_shares_file(store):
    first = FileBlock("/f", b"abcd", 0, store)
    second = FileBlock("/g", b"xyz", 0, store)
    assert second.path == first.path
    assert second.offset == len(b"abcd") + 1
    assert first.read(4) == b"abcd"
    assert second.read(3) == b"xyz"


def test_full_segment_gets_its_own_file(store):
    data = bytes(range(SEG))
    block = FileBlock("/big", data, 2, store)
    assert len(store.space_table) == 0
    assert block.path.name.endswith("_seg2.fsndn")
    assert block.read(SEG) == data


def test_entry_removed_when_full(store):
    FileBlock("/a", b"1234567", 0, store)
    assert len(store.space_table) == 1
    FileBlock("/b", b"1234567", 0, store)
    assert len(store.space_table) == 0


def test_read_pads_past_end(store):
    block = FileBlock("/f", b"ab", 0, store)
    result = block.read(6)
    assert len(result) == 6
    assert result[:2] == b"ab"


def test_read_missing_file_raises(store):
    block = FileBlock("/f", b"ab", 0, store)
    block.path.unlink()
    with pytest.raises(FileNotFoundError):
        block.read(2)


def test_blocks_order_by_segment(store):
    blocks = [FileBlock("/f", bytes(SEG), seg, store) for seg in (3, 1, 2)]
    assert [b.seg for b in sorted(blocks)] == [1, 2, 3]


def test_space_table_find_and_sort():
    table = SpaceTable(100)
    table.add("p1", 10)
    table.add("p2", 60)
    assert table.find(50).path == "p1"
    assert table.find(95) is None
    table.update("p1", 9)
    assert [e.path for e in table] == ["p2", "p1"]
    assert table.find(30).path == "p2"


def test_space_entry_space():
    entry = SpaceEntry("p", 10, 100)
    assert entry.space == 100 - 10