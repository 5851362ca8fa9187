from seedcrawl.domain.entities import Enemy, Player
from seedcrawl.services.progression_service import apply_battle_rewards


def _build_enemy(exp: int, gold: int = 4) -> Enemy:
    return Enemy(
        name="Test", hp=0, max_hp=10, atk=1, defense=0, exp_reward=exp, gold_reward=gold
    )


def test_rewards_without_level_up() -> None:
    player = Player()
    messages = apply_battle_rewards(player, _build_enemy(exp=5, gold=7))
    assert (player.exp, player.gold, player.level) == (5, 22, 1)
    assert [message.key for message in messages] == ["log.progression.defeated_reward"]


def test_enough_exp_triggers_level_up_and_full_restore() -> None:
    player = Player(hp=5, mp=1, exp=19)
    messages = apply_battle_rewards(player, _build_enemy(exp=1))

    assert player.level == 2
    assert player.exp == 0
    assert player.next_exp == 20 + 12 + 2 * 6
    assert (player.max_hp, player.max_mp, player.base_atk, player.base_def) == (46, 14, 12, 5)
    assert (player.hp, player.mp) == (46, 14)
    assert [message.key for message in messages] == [
        "log.progression.defeated_reward",
        "log.progression.level_up",
    ]


def test_multiple_level_ups_each_logged_in_order() -> None:
    player = Player()
    # level 2 needs 20, level 3 needs 44 more, level 4 needs 74 more
    messages = apply_battle_rewards(player, _build_enemy(exp=20 + 44 + 74 + 3))

    assert player.level == 4
    assert player.exp == 3
    assert player.exp < player.next_exp
    level_ups = [message.params["level"] for message in messages if message.key == "log.progression.level_up"]
    assert level_ups == [2, 3, 4]
