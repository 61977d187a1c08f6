import pytest

from sudokugen.constraints import ConstraintIndex
from sudokugen.exceptions import InvalidInput
from sudokugen.game_matrix import GameMatrix


def test_empty_index_allows_everything():
    index = ConstraintIndex()
    assert all(index.can_place(r, c, d)
               for r in range(9) for c in range(9) for d in range(1, 10))


def test_place_blocks_row_column_and_block():
    index = ConstraintIndex()
    index.place(4, 4, 7)
    assert not index.can_place(4, 0, 7)
    assert not index.can_place(0, 4, 7)
    assert not index.can_place(3, 5, 7)
    assert index.can_place(0, 0, 7)
    assert index.can_place(4, 0, 6)


def test_remove_restores_state():
    index = ConstraintIndex()
    index.place(0, 0, 5)
    index.place(8, 8, 5)
    index.remove(0, 0, 5)
    assert index.can_place(0, 1, 5)
    assert not index.can_place(8, 0, 5)
    assert index.rows[0] == 0
    assert index.cols[0] == 0
    assert index.blocks[0] == 0


def test_masks_mirror_grid(solved):
    index = ConstraintIndex.from_matrix(solved)
    full = sum(1 << d for d in range(1, 10))
    assert index.rows == [full] * 9
    assert index.cols == [full] * 9
    assert index.blocks == [full] * 9


def test_from_matrix_rejects_conflicts():
    matrix = GameMatrix()
    matrix.set(0, 0, 3)
    matrix.set(1, 1, 3)
    with pytest.raises(InvalidInput, match="Digit 3"):
        ConstraintIndex.from_matrix(matrix)


def test_used_mask():
    index = ConstraintIndex()
    index.place(0, 8, 1)
    index.place(8, 0, 2)
    index.place(1, 1, 3)
    assert index.used(0, 0) == (1 << 1) | (1 << 2) | (1 << 3)
    assert index.used(4, 4) == 0
