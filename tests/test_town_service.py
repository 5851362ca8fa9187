from seedcrawl.domain.entities import Player
from seedcrawl.domain.equipment import WEAPON_TIERS
from seedcrawl.domain.quest_state import QuestState
from seedcrawl.services.town_service import action_label, apply_action


def test_buy_potion_updates_inventory_and_gold() -> None:
    player = Player(gold=30)
    player.bag.potion = 0
    outcome = apply_action(player, QuestState(), "buy_potion")
    assert outcome.kind == "stay"
    assert (player.gold, player.bag.potion) == (20, 1)


def test_buy_fails_with_explanation_when_short_of_gold() -> None:
    player = Player(gold=11)
    potion = apply_action(player, QuestState(), "buy_ether")
    assert potion.kind == "stay"
    assert potion.message.key == "log.town.not_enough_gold_ether"
    assert (player.gold, player.bag.ether) == (11, 1)


def test_upgrade_weapon_moves_to_next_tier_and_costs_gold() -> None:
    player = Player(gold=100)
    outcome = apply_action(player, QuestState(), "upgrade_weapon")
    assert player.equipment.weapon == "bronze_sword"
    assert player.gold == 70
    assert player.total_atk() == 13
    assert outcome.message.params["weapon"].key == "item.weapon.bronze_sword"


def test_upgrade_weapon_rejected_at_max_tier() -> None:
    player = Player(gold=500)
    player.equipment.weapon = "knight_sword"
    outcome = apply_action(player, QuestState(), "upgrade_weapon")
    assert outcome.message.key == "log.town.weapon_max"
    assert player.gold == 500
    assert WEAPON_TIERS["knight_sword"].is_max
    assert not WEAPON_TIERS["wooden_sword"].is_max


def test_upgrade_armor_fails_when_not_enough_gold() -> None:
    player = Player(gold=5)
    outcome = apply_action(player, QuestState(), "upgrade_armor")
    assert outcome.kind == "stay"
    assert outcome.message.key == "log.town.need_more_gold_armor"
    assert outcome.message.params["cost"] == 26
    assert player.equipment.armor == "cloth_armor"
    assert player.gold == 5


def test_armor_upgrades_through_every_tier() -> None:
    player = Player(gold=200)
    apply_action(player, QuestState(), "upgrade_armor")
    apply_action(player, QuestState(), "upgrade_armor")
    final = apply_action(player, QuestState(), "upgrade_armor")
    assert player.equipment.armor == "steel_armor"
    assert player.gold == 200 - 26 - 80
    assert player.total_def() == 10
    assert final.message.key == "log.town.armor_max"


def test_healer_restores_hp_only() -> None:
    player = Player(hp=10, mp=2, gold=20)
    outcome = apply_action(player, QuestState(), "healer")
    assert (player.hp, player.mp, player.gold) == (40, 2, 12)
    assert outcome.message.key == "log.town.healer_done"


def test_healer_no_op_when_full_or_broke() -> None:
    full = Player(gold=20)
    assert apply_action(full, QuestState(), "healer").message.key == "log.town.healer_not_needed"
    assert full.gold == 20
    broke = Player(hp=1, gold=7)
    assert apply_action(broke, QuestState(), "healer").message.key == "log.town.not_enough_gold_healer"
    assert broke.hp == 1


def test_inn_restores_hp_and_mp() -> None:
    player = Player(hp=40, mp=0, gold=15)
    outcome = apply_action(player, QuestState(), "inn")
    assert (player.hp, player.mp, player.gold) == (40, 12, 0)
    assert outcome.message.key == "log.town.inn_rest"
    assert apply_action(player, QuestState(), "inn").message.key == "log.town.inn_not_needed"


def test_inn_rejected_without_gold() -> None:
    player = Player(hp=3, gold=14)
    assert apply_action(player, QuestState(), "inn").message.key == "log.town.not_enough_gold_inn"
    assert player.hp == 3


def test_quest_board_is_routed_through_town() -> None:
    quest = QuestState()
    outcome = apply_action(Player(), quest, "quest_board")
    assert outcome.kind == "stay"
    assert quest.accepted


def test_leave_returns_leave_outcome() -> None:
    outcome = apply_action(Player(), QuestState(), "leave")
    assert outcome.kind == "leave"
    assert outcome.message.key == "log.town.leaving"


def test_action_labels_carry_prices() -> None:
    assert action_label("buy_potion").params == {"cost": 10}
    assert action_label("inn").params == {"cost": 15}
    assert action_label("leave").params == {}
