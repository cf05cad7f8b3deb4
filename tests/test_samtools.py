import pytest

from bambi.samtools import CigarOp, reg2bin


@pytest.mark.parametrize("op", list(CigarOp))
def test_char_round_trip(op):
    assert CigarOp.from_char(op.char()) is op


def test_codes_follow_cigar_letters():
    letters = "MIDNSHP=X"
    ops = [CigarOp.from_char(letter) for letter in letters]
    assert ops == sorted(CigarOp)
    assert [op.value for op in ops] == list(range(9))
    assert "".join(op.char() for op in ops) == letters


@pytest.mark.parametrize("bad", ["Q", "", "MM"])
def test_from_char_rejects_unknown(bad):
    with pytest.raises(ValueError):
        CigarOp.from_char(bad)


def test_first_leaf_bin():
    assert reg2bin(0, 1) == 4681


def test_whole_genome_bin():
    assert reg2bin(0, 1 << 29) == 0


def test_leaf_bins_are_consecutive():
    width = 1 << 14
    assert reg2bin(width, width + 1) == reg2bin(0, 1) + 1


def test_region_spanning_leaves_gets_parent_bin():
    width = 1 << 14
    spanning = reg2bin(width - 1, width + 1)
    assert spanning < reg2bin(0, 1)
    assert spanning == reg2bin(0, width * 8)


def test_bins_in_range():
    for beg, end in [(0, 10), (100000, 200000), (5, 1 << 20), (1 << 28, (1 << 28) + 7)]:
        assert 0 <= reg2bin(beg, end) <= 37449