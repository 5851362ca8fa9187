"""Turn resolution for a single player-vs-enemy battle."""
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, List

from seedcrawl.core.rng import RNG
from seedcrawl.core.types import BattleAction, EnemyStyle
from seedcrawl.domain.balance import (
    ATTACK_VARIANCE,
    BOSS_BREATH_PERCENT,
    ENEMY_HIT_VARIANCE,
    ETHER_RESTORE,
    FIRE_SLASH_ATK_BONUS,
    FIRE_SLASH_MP_COST,
    FIRE_SLASH_VARIANCE,
    POTION_HEAL,
    RUN_BASE_CHANCE,
    RUN_BOSS_CHANCE,
    RUN_CHANCE_MAX,
    RUN_CHANCE_MIN,
)
from seedcrawl.domain.battle_models import Battle, TurnResult
from seedcrawl.domain.combat import random_damage
from seedcrawl.domain.difficulty import DifficultyProfile, clamp_rate
from seedcrawl.domain.entities import Enemy, Player
from seedcrawl.domain.messages import Message, msg

BATTLE_ACTION_LABEL_KEYS: Dict[BattleAction, str] = {
    "attack": "ui.battle.action_attack",
    "fire_slash": "ui.battle.action_fire_slash",
    "defend": "ui.battle.action_defend",
    "potion": "ui.battle.action_potion",
    "ether": "ui.battle.action_ether",
    "run": "ui.battle.action_run",
}


def enemy_name(enemy: Enemy) -> Message:
    return msg(enemy.name)


def apply_defense_guard(damage: int, defending: bool) -> int:
    """Halve (floor, min 1) while guarding; otherwise just enforce the floor of 1."""
    if defending:
        return max(1, damage // 2)
    return max(1, damage)


def run_chance(enemy: Enemy, profile: DifficultyProfile) -> int:
    base = RUN_BOSS_CHANCE if enemy.is_boss else RUN_BASE_CHANCE
    return max(RUN_CHANCE_MIN, min(RUN_CHANCE_MAX, base + profile.run_chance_bonus_percent))


def resolve_turn(
    action: BattleAction,
    battle: Battle,
    player: Player,
    rng: RNG,
    profile: DifficultyProfile,
) -> TurnResult:
    """Apply one player action and, when it used the turn, the enemy reaction."""
    messages: List[Message] = []
    enemy = battle.enemy
    player_acted = False

    if action == "attack":
        dmg = random_damage(rng, player.total_atk(), enemy.defense, ATTACK_VARIANCE)
        enemy.hp -= dmg
        messages.append(msg("log.battle.player_slash", enemy=enemy_name(enemy), dmg=dmg))
        player_acted = True
    elif action == "fire_slash":
        if player.mp < FIRE_SLASH_MP_COST:
            messages.append(msg("log.battle.not_enough_mp_fire_slash"))
        else:
            player.mp -= FIRE_SLASH_MP_COST
            dmg = random_damage(
                rng, player.total_atk() + FIRE_SLASH_ATK_BONUS, enemy.defense, FIRE_SLASH_VARIANCE
            )
            enemy.hp -= dmg
            messages.append(msg("log.battle.fire_slash", enemy=enemy_name(enemy), dmg=dmg))
            player_acted = True
    elif action == "defend":
        battle.defending = True
        messages.append(msg("log.battle.brace"))
        player_acted = True
    elif action == "potion":
        player_acted = use_potion(player, messages)
    elif action == "ether":
        player_acted = use_ether(player, messages)
    elif action == "run":
        if rng.percent() < run_chance(enemy, profile):
            messages.append(msg("log.battle.escape_success"))
            return TurnResult("escaped", messages)
        messages.append(msg("log.battle.escape_failed"))
        player_acted = True
    else:
        raise ValueError(f"Unknown battle action: {action}")

    if enemy.hp <= 0:
        return TurnResult("enemy_defeated", messages, enemy=replace(enemy))

    if player_acted:
        resolve_enemy_action(battle, player, rng, profile, messages)
        battle.defending = False
        if not player.is_alive:
            player.hp = 0
            return TurnResult("player_defeated", messages)

    return TurnResult("continue", messages)


def resolve_enemy_action(
    battle: Battle,
    player: Player,
    rng: RNG,
    profile: DifficultyProfile,
    messages: List[Message],
) -> None:
    enemy = battle.enemy
    special = rng.percent() < clamp_rate(profile.enemy_skill_rate_percent)
    skill = _ENEMY_SKILLS.get(enemy.style) if special else None
    if skill is None:
        dealt = _strike(battle, player, rng, 0, ENEMY_HIT_VARIANCE)
        messages.append(msg("log.battle.enemy_hit", enemy=enemy_name(enemy), dmg=dealt))
        return
    messages.append(skill(battle, player, rng))


def _strike(battle: Battle, player: Player, rng: RNG, atk_bonus: int, variance: int) -> int:
    raw = random_damage(rng, battle.enemy.atk + atk_bonus, player.total_def(), variance)
    dealt = apply_defense_guard(raw, battle.defending)
    player.hp -= dealt
    return dealt


def _heavy_blow(battle: Battle, player: Player, rng: RNG) -> Message:
    dealt = _strike(battle, player, rng, 4, 3)
    return msg("log.battle.enemy_skill_heavy", enemy=enemy_name(battle.enemy), dmg=dealt)


def _mana_burn(battle: Battle, player: Player, rng: RNG) -> Message:
    dealt = _strike(battle, player, rng, 1, 2)
    burn = min(3, player.mp)
    player.mp -= burn
    return msg("log.battle.enemy_skill_mana_burn", enemy=enemy_name(battle.enemy), dmg=dealt, mp=burn)


def _pounce(battle: Battle, player: Player, rng: RNG) -> Message:
    enemy = battle.enemy
    first = random_damage(rng, enemy.atk + 1, player.total_def(), 2)
    second = random_damage(rng, enemy.atk, player.total_def(), 1)
    # Both hits pass through the guard as a single instance.
    total = apply_defense_guard(first + second, battle.defending)
    player.hp -= total
    return msg("log.battle.enemy_skill_pounce", enemy=enemy_name(enemy), dmg=total)


def _drain(battle: Battle, player: Player, rng: RNG) -> Message:
    enemy = battle.enemy
    dealt = _strike(battle, player, rng, 2, 2)
    heal = max(1, dealt // 2)
    enemy.hp = min(enemy.max_hp, enemy.hp + heal)
    return msg("log.battle.enemy_skill_drain", enemy=enemy_name(enemy), dmg=dealt, heal=heal)


def _boss_ability(battle: Battle, player: Player, rng: RNG) -> Message:
    if rng.percent() < BOSS_BREATH_PERCENT:
        dealt = _strike(battle, player, rng, 6, 4)
        return msg("log.battle.enemy_skill_flame_breath", enemy=enemy_name(battle.enemy), dmg=dealt)
    dealt = _strike(battle, player, rng, 3, 2)
    return msg("log.battle.enemy_skill_tail_sweep", enemy=enemy_name(battle.enemy), dmg=dealt)


# Skirmishers have no skill and always fall back to the baseline hit.
_ENEMY_SKILLS: Dict[EnemyStyle, Callable[[Battle, Player, RNG], Message]] = {
    "brute": _heavy_blow,
    "caster": _mana_burn,
    "predator": _pounce,
    "undead": _drain,
    "boss": _boss_ability,
}


def use_potion(player: Player, messages: List[Message]) -> bool:
    if player.bag.potion <= 0:
        messages.append(msg("log.item.no_potion"))
        return False
    if player.hp >= player.max_hp:
        messages.append(msg("log.item.hp_full"))
        return False
    before = player.hp
    player.bag.potion -= 1
    player.hp = min(player.max_hp, player.hp + POTION_HEAL)
    messages.append(msg("log.item.potion_used", before=before, after=player.hp))
    return True


def use_ether(player: Player, messages: List[Message]) -> bool:
    if player.bag.ether <= 0:
        messages.append(msg("log.item.no_ether"))
        return False
    if player.mp >= player.max_mp:
        messages.append(msg("log.item.mp_full"))
        return False
    before = player.mp
    player.bag.ether -= 1
    player.mp = min(player.max_mp, player.mp + ETHER_RESTORE)
    messages.append(msg("log.item.ether_used", before=before, after=player.mp))
    return True
