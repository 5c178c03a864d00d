import pytest

from crazythursday.player import WEAPON_UPGRADE_COST, Player

BASE_HP = 100
FOOD = 5


def make_player(people=3, crop=30, gold=30, difficulty="MEDIUM"):
    return Player(people, crop, gold, difficulty, BASE_HP, FOOD)


def test_initial_state():
    player = make_player(people=4, crop=12, gold=7, difficulty="HARD")
    assert player.people == 4
    assert player.available_people == 4
    assert player.crop == 12
    assert player.gold == 7
    assert player.weapon_level == 1
    assert player.difficulty == "HARD"
    assert (
        player.farming_workers,
        player.mining_workers,
        player.recruiting_workers,
        player.shopping_workers,
        player.exploring_workers,
    ) == (0, 0, 0, 0, 0)


@pytest.mark.parametrize(
    "name, level", [("EASY", 1), ("MEDIUM", 2), ("HARD", 3), ("unknown", 2)]
)
def test_difficulty_level(name, level):
    assert make_player(difficulty=name).difficulty_level == level


def test_add_crop_and_gold_clamp_at_zero():
    player = make_player(crop=10, gold=10)
    player.add_crop(5)
    player.add_gold(-4)
    assert player.crop == 15
    assert player.gold == 6
    player.add_crop(-1000)
    player.add_gold(-1000)
    assert player.crop == 0
    assert player.gold == 0


def test_add_people_changes_available_too():
    player = make_player(people=3)
    player.add_people(2)
    assert player.people == 5
    assert player.available_people == 5
    player.add_people(-100)
    assert player.people == 0
    assert player.available_people == 0


def test_assign_workers_reduces_available():
    player = make_player(people=5)
    assert player.assign_workers(1, 1, 0, 1, 0) is True
    assert player.available_people == 2
    assert player.farming_workers == 1
    assert player.mining_workers == 1
    assert player.shopping_workers == 1


def test_assign_too_many_workers_changes_nothing():
    player = make_player(people=2)
    assert player.assign_workers(1, 1, 1, 0, 0) is False
    assert player.available_people == 2
    assert player.farming_workers == 0
    assert player.recruiting_workers == 0


def test_reset_daily_workers():
    player = make_player(people=4)
    player.assign_workers(0, 2, 0, 0, 1)
    player.reset_daily_workers()
    assert player.available_people == player.people
    assert player.mining_workers == 0
    assert player.exploring_workers == 0


def test_total_hp_follows_population():
    player = make_player(people=3)
    assert player.total_hp == player.people * BASE_HP
    player.add_people(-1)
    assert player.total_hp == player.people * BASE_HP


def test_consume_daily_food_with_enough_food():
    player = make_player(people=2, crop=50)
    player.consume_daily_food()
    assert player.crop == 50 - 2 * FOOD
    assert player.people == 2


def test_consume_daily_food_starvation_loses_one_person():
    player = make_player(people=3, crop=1)
    player.consume_daily_food()
    assert player.crop == 0
    assert player.people == 2


def test_starvation_never_goes_negative():
    player = make_player(people=0, crop=0)
    player.consume_daily_food()
    assert player.people == 0
    assert player.crop == 0


def test_upgrade_weapon_pays_cost():
    player = make_player(gold=100)
    cost = WEAPON_UPGRADE_COST[player.weapon_level]
    player.upgrade_weapon()
    assert player.weapon_level == 2
    assert player.gold == 100 - cost


def test_upgrade_weapon_to_max_then_fails():
    player = make_player(gold=0)
    for _ in WEAPON_UPGRADE_COST:
        player.upgrade_weapon()
    assert player.weapon_level == max(WEAPON_UPGRADE_COST) + 1
    assert player.gold == -sum(WEAPON_UPGRADE_COST.values())
    with pytest.raises(ValueError):
        player.upgrade_weapon()


def test_upgrade_costs_do_not_decrease():
    player = make_player(gold=1000)
    paid = []
    while player.weapon_level < 10:
        before = player.gold
        player.upgrade_weapon()
        paid.append(before - player.gold)
    assert paid == [30, 30, 30, 40, 40, 40, 50, 50, 50]
    assert paid == sorted(paid)
    assert Player.WEAPON_UPGRADE_COST is WEAPON_UPGRADE_COST