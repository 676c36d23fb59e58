from grid_tron.systems.terminal import terminal_system
from tests.test_utils import make_player, make_state


def test_round_continues_while_players_alive() -> None:
    state = make_state(make_player())
    assert terminal_system(state) is state
    two = make_state(make_player(1), make_player(2, position=(7, 7)))
    assert terminal_system(two) is two


def test_single_player_crash_ends_round() -> None:
    new_state = terminal_system(make_state(make_player(is_alive=False)))
    assert new_state.is_game_over
    assert new_state.winner_id is None


def test_two_player_survivor_wins_and_scores() -> None:
    p1 = make_player(1, is_alive=False, score=2)
    p2 = make_player(2, position=(7, 7), score=1)
    new_state = terminal_system(make_state(p1, p2))
    assert new_state.is_game_over
    assert new_state.winner_id == 2
    assert [p.score for p in new_state.players] == [2, 2]


def test_two_player_draw() -> None:
    p1 = make_player(1, is_alive=False)
    p2 = make_player(2, position=(7, 7), is_alive=False)
    new_state = terminal_system(make_state(p1, p2))
    assert new_state.is_game_over
    assert new_state.winner_id is None
    assert [p.score for p in new_state.players] == [0, 0]


def test_gravitron_death_overrides() -> None:
    new_state = terminal_system(
        make_state(make_player(is_alive=False), gravitron_death=True)
    )
    assert new_state.is_game_over
    assert new_state.winner_id is None
