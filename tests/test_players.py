from centiped.players import Player, PlayerManager, PlayerSlot


def test_starts_with_ai_and_three_lives():
    manager = PlayerManager()
    assert manager.which is PlayerSlot.AI
    assert manager.lives == 3
    assert manager.score == 0


def test_sub_life_reduces_current_only():
    manager = PlayerManager()
    manager.select(1)
    manager.sub_life()
    assert manager.lives == 2
    manager.select(2)
    assert manager.lives == 3


def test_select_maps_anything_else_to_player_two():
    manager = PlayerManager()
    manager.select(7)
    assert manager.which is PlayerSlot.TWO
    manager.select(0)
    assert manager.which is PlayerSlot.AI


def test_add_score_accumulates_and_reports_increment():
    seen = []
    manager = PlayerManager(seen.append)
    manager.select(PlayerSlot.ONE)
    manager.add_score(10)
    manager.add_score(200)
    assert manager.score == 210
    assert manager.one_score == 210
    assert manager.two_score == 0
    assert seen == [10, 200]


def test_set_score_reports_new_value():
    seen = []
    manager = PlayerManager(seen.append)
    manager.select(2)
    manager.set_score(1000)
    assert manager.two_score == 1000
    assert seen == [1000]


def test_wave_is_saved_per_player():
    manager = PlayerManager()
    manager.select(1)
    manager.save_wave(4)
    manager.select(2)
    assert manager.wave == 0
    manager.select(1)
    assert manager.wave == 4


def test_field_add_and_remove_all_matches():
    manager = PlayerManager()
    manager.add_to_field((16.0, 32.0))
    manager.add_to_field((48.0, 64.0))
    manager.add_to_field((16.0, 32.0))
    manager.remove_from_field((16.0, 32.0))
    assert manager.field == [(48.0, 64.0)]


def test_field_returns_copy():
    manager = PlayerManager()
    manager.add_to_field((1.0, 2.0))
    manager.field.clear()
    assert manager.field == [(1.0, 2.0)]


def test_clear_fields_empties_all_players():
    manager = PlayerManager()
    for slot in PlayerSlot:
        manager.select(slot)
        manager.add_to_field((0.0, 16.0))
    manager.clear_fields()
    assert all(manager.player(slot).field == [] for slot in PlayerSlot)


def test_reset_restores_defaults_and_keeps_slot():
    manager = PlayerManager()
    manager.select(1)
    manager.add_score(50)
    manager.sub_life()
    manager.add_to_field((0.0, 16.0))
    manager.reset()
    assert manager.which is PlayerSlot.ONE
    assert manager.current == Player()