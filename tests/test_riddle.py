from sudokugen.game_matrix import UNSET
from sudokugen.riddle import Riddle


def test_writeable_follows_unset_cells(riddle):
    r = Riddle(riddle.board)
    assert not r.is_writeable(0, 0)
    assert r.is_writeable(0, 2)
    assert r.given_count() == riddle.set_count()


def test_player_moves_keep_givens(riddle):
    r = Riddle(riddle.board)
    r.set(0, 2, 4)
    assert r.is_writeable(0, 2)
    assert r.given_count() == riddle.set_count()


def test_copy_keeps_writeable_flags(riddle):
    r = Riddle(riddle.board)
    r.set_writeable(0, 0, True)
    other = r.copy()
    assert isinstance(other, Riddle)
    assert other.is_writeable(0, 0)
    other.set(0, 0, UNSET)
    assert r.get(0, 0) == 5
