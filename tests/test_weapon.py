import pytest

from crazythursday.weapon import Weapon


def test_default_level_is_one():
    weapon = Weapon()
    assert weapon.level == 1
    assert weapon.damage == 20
    assert weapon.multiple == 1


@pytest.mark.parametrize(
    "level, damage, multiple",
    [
        (1, 20, 1),
        (2, 30, 1),
        (3, 40, 1),
        (4, 30, 3),
        (5, 35, 3),
        (6, 40, 3),
        (7, 50, 3),
        (8, 40, 5),
        (9, 50, 5),
        (10, 60, 5),
    ],
)
def test_level_table(level, damage, multiple):
    weapon = Weapon(level)
    assert weapon.damage == damage
    assert weapon.multiple == multiple


def test_max_level():
    assert Weapon.max_level() == 10


def test_upgrade_follows_table():
    weapon = Weapon(3)
    weapon.upgrade()
    assert weapon.level == 4
    assert weapon.damage == Weapon(4).damage
    assert weapon.multiple == Weapon(4).multiple


def test_upgrade_stops_at_max():
    weapon = Weapon()
    for _ in range(20):
        weapon.upgrade()
    assert weapon.level == Weapon.max_level()
    assert weapon.can_upgrade() is False


def test_can_upgrade_below_max():
    assert Weapon(Weapon.max_level() - 1).can_upgrade() is True


@pytest.mark.parametrize("level", [0, -1, 11])
def test_invalid_level_raises(level):
    with pytest.raises(ValueError):
        Weapon(level)