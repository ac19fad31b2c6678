import pytest

from centiped.players import PlayerManager
from centiped.scoring import ScoreEvent, ScoreManager, ScoreValue, SpiderScore


@pytest.fixture
def setup():
    players = PlayerManager()
    players.select(1)
    distance = {"value": 0}
    manager = ScoreManager(players, lambda: distance["value"])
    return players, manager, distance


def test_flea_command_awards_source_value(setup):
    players, manager, _ = setup
    cmd = manager.command(ScoreEvent.FLEA_KILLED)
    assert isinstance(cmd, ScoreValue)
    cmd.execute()
    assert players.score == 200


def test_scorpion_by_integer_event(setup):
    players, manager, _ = setup
    manager.command(1).execute()
    assert players.score == 1000


def test_sent_commands_wait_until_processed(setup):
    players, manager, _ = setup
    manager.send(manager.command(ScoreEvent.HEAD_KILLED))
    manager.send(manager.command(ScoreEvent.SEGMENT_KILLED))
    assert players.score == 0
    assert len(manager) == 2
    manager.process()
    assert players.score == 110
    assert len(manager) == 0


def test_same_command_may_be_sent_repeatedly(setup):
    players, manager, _ = setup
    cmd = manager.command(ScoreEvent.MUSHROOM_KILLED)
    for _ in range(5):
        manager.send(cmd)
    manager.process()
    assert players.score == 5 * cmd.points


def test_process_runs_in_send_order():
    order = []

    class Recorder:
        def __init__(self, tag):
            self.tag = tag

        def execute(self):
            order.append(self.tag)

    manager = ScoreManager(PlayerManager(), lambda: 0)
    for tag in "abc":
        manager.send(Recorder(tag))
    assert len(manager) == 3
    manager.process()
    assert len(manager) == 0
    assert order == ["a", "b", "c"]


def test_spider_command_uses_distance(setup):
    players, manager, distance = setup
    cmd = manager.command(ScoreEvent.SPIDER_KILLED)
    assert isinstance(cmd, SpiderScore)
    distance["value"] = 0
    cmd.execute()
    assert players.score == 900
    distance["value"] = 100
    cmd.execute()
    assert players.score == 900 + 300


def test_spider_points_never_grow_with_distance(setup):
    _, manager, _ = setup
    cmd = manager.command(ScoreEvent.SPIDER_KILLED)
    points = [cmd.points_for(d) for d in range(0, 10)]
    assert points == sorted(points, reverse=True)
    assert set(points) == {900, 600, 300}


def test_created_commands_are_kept(setup):
    _, manager, _ = setup
    a = manager.command(ScoreEvent.FLEA_KILLED)
    b = manager.command(ScoreEvent.SPIDER_KILLED)
    assert manager.created == [a, b]


def test_unknown_event_raises(setup):
    _, manager, _ = setup
    with pytest.raises(ValueError):
        manager.command(42)