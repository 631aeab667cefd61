import pytest
from minefield.engine import Board, FlagOutcome, RevealOutcome


def brute_adjacent(board, x, y):
    count = 0
    for ny in range(y - 1, y + 2):
        for nx in range(x - 1, x + 2):
            if (nx, ny) == (x, y):
                continue
            if 0 <= nx < board.width and 0 <= ny < board.height and board.grid[ny][nx].has_mine:
                count += 1
    return count


@pytest.mark.parametrize("width,height,mines", [(1, 1, 0), (1, 1, 1), (9, 9, 10), (26, 30, 99), (5, 4, 20)])
def test_place_mines_exact_count(width, height, mines):
    board = Board(width, height, mines, seed=7)
    assert not board.initialized
    assert board.mine_coordinates() == []
    board.place_mines()
    assert board.initialized
    assert len(board.mine_coordinates()) == mines


def test_place_mines_is_idempotent():
    board = Board(8, 8, 10, seed=1)
    board.place_mines()
    before = board.mine_coordinates()
    board.place_mines()
    assert board.mine_coordinates() == before


def test_mine_count_clamped_to_area():
    board = Board(3, 2, 50, seed=0)
    assert board.mine_count == 6
    board.place_mines()
    assert len(board.mine_coordinates()) == 6


def test_same_seed_same_layout():
    a = Board(16, 16, 40, seed=42)
    b = Board(16, 16, 40, seed=42)
    a.place_mines()
    b.place_mines()
    assert a.mine_coordinates() == b.mine_coordinates()


def test_default_seeds_differ():
    assert Board(5, 5, 3).seed != Board(5, 5, 3).seed


def test_every_tile_can_receive_a_mine():
    hit = set()
    for seed in range(300):
        board = Board(4, 3, 1, seed=seed)
        board.place_mines()
        hit.update(board.mine_coordinates())
    assert len(hit) == 12


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_adjacent_count_matches_neighbours(seed):
    board = Board(10, 7, 25, seed=seed)
    board.place_mines()
    # Flags and reveals do not change the count.
    board.toggle_flag(0, 0)
    board.grid[3][3].revealed = True
    for (x, y) in board.coordinates():
        assert board.adjacent_mine_count(x, y) == brute_adjacent(board, x, y)


def test_adjacent_count_clipped_at_corner():
    board = Board.with_mines(3, 3, [(1, 0), (0, 1), (1, 1), (2, 2)])
    assert board.adjacent_mine_count(0, 0) == 3
    assert board.adjacent_mine_count(2, 0) == 2
    assert board.adjacent_mine_count(1, 1) == 3


def test_reveal_mineless_board_opens_everything():
    board = Board(3, 3, 0, seed=0)
    board.place_mines()
    assert board.reveal(0, 0) is RevealOutcome.OPENED
    assert all(board.tile(x, y).revealed for (x, y) in board.coordinates())
    assert board.revealed_count == 9
    # Nothing flagged on a mineless board already satisfies the win rule.
    assert board.is_won()


def test_reveal_largest_empty_board_does_not_recurse():
    board = Board(26, 30, 0, seed=0)
    board.place_mines()
    assert board.reveal(13, 15) is RevealOutcome.OPENED
    assert board.revealed_count == 26 * 30


def test_flood_stops_at_numbers_and_never_opens_mines():
    board = Board.with_mines(5, 5, [(4, 4)])
    assert board.reveal(0, 0) is RevealOutcome.OPENED
    assert not board.tile(4, 4).revealed
    assert board.revealed_count == 24


def test_flood_is_bounded_by_nonzero_tiles():
    board = Board.with_mines(5, 1, [(2, 0)])
    board.reveal(0, 0)
    revealed = [board.tile(x, 0).revealed for x in range(5)]
    assert revealed == [True, True, False, False, False]


def test_flag_blocks_flood():
    board = Board.with_mines(4, 1, [])
    assert board.toggle_flag(2, 0) is FlagOutcome.FLAGGED
    board.reveal(0, 0)
    assert board.tile(0, 0).revealed and board.tile(1, 0).revealed
    assert board.tile(2, 0).flagged and not board.tile(2, 0).revealed
    assert not board.tile(3, 0).revealed


def test_reveal_single_numbered_tile():
    board = Board.with_mines(3, 3, [(0, 0)])
    board.reveal(1, 1)
    assert board.revealed_count == 1


def test_reveal_mine_changes_nothing():
    board = Board.with_mines(2, 2, [(1, 1)])
    assert board.reveal(1, 1) is RevealOutcome.MINE
    assert not board.tile(1, 1).revealed
    assert board.flag_count == 0 and board.found_count == 0


def test_reveal_again_is_noop():
    board = Board.with_mines(3, 3, [(2, 2)])
    board.reveal(0, 0)
    count = board.revealed_count
    assert board.reveal(0, 0) is RevealOutcome.OPENED
    assert board.revealed_count == count


def test_reveal_flagged_tile_is_noop():
    board = Board.with_mines(3, 3, [(2, 2)])
    board.toggle_flag(0, 0)
    assert board.reveal(0, 0) is RevealOutcome.OPENED
    assert not board.tile(0, 0).revealed


@pytest.mark.parametrize("pos", [(0, 0), (1, 0)])
def test_toggle_flag_is_its_own_inverse(pos):
    board = Board.with_mines(3, 1, [(0, 0)])
    assert board.toggle_flag(*pos) is FlagOutcome.FLAGGED
    assert board.flag_count == 1
    assert board.found_count == (1 if pos == (0, 0) else 0)
    assert board.toggle_flag(*pos) is FlagOutcome.UNFLAGGED
    assert board.flag_count == 0
    assert board.found_count == 0


def test_flag_on_revealed_tile_is_ignored():
    board = Board.with_mines(3, 1, [(2, 0)])
    board.reveal(0, 0)
    assert board.toggle_flag(0, 0) is FlagOutcome.IGNORED
    assert board.flag_count == 0
    assert not board.tile(0, 0).flagged


def test_win_requires_exact_flags():
    board = Board.with_mines(2, 1, [(0, 0)])
    board.toggle_flag(1, 0)
    assert not board.is_won()
    board.toggle_flag(0, 0)
    assert not board.is_won()
    board.toggle_flag(1, 0)
    assert board.is_won()


def test_relocate_moves_mine_to_free_tile():
    board = Board.with_mines(3, 1, [(0, 0), (1, 0)])
    assert board.relocate_if_mined(0, 0) == (2, 0)
    assert board.mine_coordinates() == [(1, 0), (2, 0)]


@pytest.mark.parametrize("seed", range(20))
def test_relocate_keeps_mine_count(seed):
    board = Board(6, 6, 30, seed=seed)
    board.place_mines()
    mined = board.mine_coordinates()[0]
    dest = board.relocate_if_mined(*mined)
    assert dest is not None and dest != mined
    assert not board.tile(*mined).has_mine
    assert len(board.mine_coordinates()) == 30


def test_relocate_on_clear_tile_does_nothing():
    board = Board.with_mines(3, 1, [(0, 0)])
    assert board.relocate_if_mined(2, 0) is None
    assert board.mine_coordinates() == [(0, 0)]


def test_relocate_fully_mined_board_does_nothing():
    board = Board.with_mines(2, 1, [(0, 0), (1, 0)])
    assert board.relocate_if_mined(0, 0) is None
    assert len(board.mine_coordinates()) == 2


def test_reveal_all_keeps_flags():
    board = Board.with_mines(3, 1, [(0, 0)])
    board.toggle_flag(1, 0)
    board.reveal_all()
    assert board.tile(0, 0).revealed
    assert board.tile(1, 0).flagged and not board.tile(1, 0).revealed
    assert board.tile(2, 0).revealed
    assert board.flag_count == 1


def test_score_uses_found_mines():
    board = Board.with_mines(10, 10, [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)])
    assert board.score() == 0
    for x in range(3):
        board.toggle_flag(x, 0)
    board.toggle_flag(9, 9)
    assert board.score() == 3 * 3 * 1000 // 100
