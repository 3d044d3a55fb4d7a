import pytest

from astroduel.ansi import gotoxy
from astroduel.players import Player
from astroduel.shoot import (
    MAX_BULLETS,
    TARGET_ROW,
    UPDATE_INTERVAL,
    Bullet,
    BulletStyle,
    BulletSystem,
)


def _players():
    return Player(x=30, y=20), Player(x=60, y=25)


def _tick_until_move(system):
    outputs = [system.update() for _ in range(UPDATE_INTERVAL)]
    return outputs


def test_spawn_player_one_position_and_output():
    p1, p2 = _players()
    system = BulletSystem()
    out = system.spawn(1, p1, p2)
    bullet = system.bullets[0]
    assert (bullet.x, bullet.y) == (p1.x + 1, p1.y - 1)
    assert bullet.player == 1
    assert bullet.style is BulletStyle.SLOW
    assert out == gotoxy(bullet.x, bullet.y) + "*"


def test_spawn_player_two_uses_second_player():
    p1, p2 = _players()
    system = BulletSystem()
    system.spawn(2, p1, p2)
    bullet = system.bullets[0]
    assert (bullet.x, bullet.y) == (p2.x + 1, p2.y - 1)
    assert bullet.player == 2


def test_spawn_rejects_unknown_shooter():
    p1, p2 = _players()
    with pytest.raises(ValueError):
        BulletSystem().spawn(3, p1, p2)


def test_spawn_stops_at_capacity():
    p1, p2 = _players()
    system = BulletSystem()
    for _ in range(MAX_BULLETS):
        system.spawn(1, p1, p2)
    assert system.spawn(1, p1, p2) == ""
    assert len(system) == MAX_BULLETS


def test_update_is_throttled():
    p1, p2 = _players()
    system = BulletSystem()
    system.spawn(1, p1, p2)
    start_y = system.bullets[0].y
    for _ in range(UPDATE_INTERVAL - 1):
        assert system.update() == ""
    assert system.bullets[0].y == start_y
    system.update()
    assert system.bullets[0].y == start_y - BulletStyle.SLOW.speed


def test_update_output_erases_then_draws():
    p1, p2 = _players()
    system = BulletSystem()
    system.spawn(1, p1, p2)
    bullet = system.bullets[0]
    x, old_y = bullet.x, bullet.y
    out = _tick_until_move(system)[-1]
    assert out == gotoxy(x, old_y) + " " + gotoxy(x, bullet.y) + "*"


def test_fast_bullet_moves_further():
    p1, p2 = _players()
    system = BulletSystem()
    system.spawn(1, p1, p2)
    system.bullets[0].style = BulletStyle.FAST
    start_y = system.bullets[0].y
    _tick_until_move(system)
    assert system.bullets[0].y == start_y - BulletStyle.FAST.speed
    assert BulletStyle.FAST.speed > BulletStyle.SLOW.speed


def test_bullet_removed_at_top():
    p1, p2 = Player(x=30, y=6), Player(x=60, y=25)
    system = BulletSystem()
    system.spawn(1, p1, p2)
    system.spawn(2, p1, p2)
    out = _tick_until_move(system)[-1]
    assert [b.player for b in system.bullets] == [2]
    assert gotoxy(p1.x + 1, p1.y - 1) + " " in out
    assert gotoxy(p1.x + 1, p1.y - 2) + "*" not in out


def test_removal_moves_last_bullet_into_gap():
    system = BulletSystem()
    system.bullets.extend(
        [Bullet(player=1, x=1, y=5), Bullet(player=2, x=2, y=20), Bullet(player=1, x=3, y=30)]
    )
    _tick_until_move(system)
    assert [b.x for b in system.bullets] == [3, 2]


def test_count_points_on_targets():
    p1, p2 = _players()
    system = BulletSystem()
    system.bullets.extend(
        [
            Bullet(player=1, x=15, y=TARGET_ROW),
            Bullet(player=2, x=85, y=TARGET_ROW),
            Bullet(player=2, x=45, y=TARGET_ROW),
        ]
    )
    hits = system.count_points(p1, p2)
    assert hits == len(system.bullets)
    assert (p1.points, p2.points) == (1, 2)


@pytest.mark.parametrize("x", [9, 21, 30, 44, 56, 79, 91])
def test_count_points_misses_between_targets(x):
    p1, p2 = _players()
    system = BulletSystem()
    system.bullets.append(Bullet(player=1, x=x, y=TARGET_ROW))
    assert system.count_points(p1, p2) == 0
    assert p1.points == 0


@pytest.mark.parametrize("x", [10, 20, 55, 80, 90])
def test_count_points_target_edges(x):
    p1, p2 = _players()
    system = BulletSystem()
    system.bullets.append(Bullet(player=1, x=x, y=TARGET_ROW))
    system.count_points(p1, p2)
    assert p1.points == 1


def test_count_points_requires_target_row():
    p1, p2 = _players()
    system = BulletSystem()
    system.bullets.append(Bullet(player=1, x=15, y=TARGET_ROW + 1))
    assert system.count_points(p1, p2) == 0
    assert p1.points == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        BulletSystem(capacity=0)