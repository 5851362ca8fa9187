"""Built-in display text, keyed by catalog key."""
from __future__ import annotations

from typing import Dict

EN_CATALOG: Dict[str, str] = {
    # Names
    "enemy.slime": "Slime",
    "enemy.goblin": "Goblin",
    "enemy.wolf": "Wolf",
    "enemy.skeleton": "Skeleton",
    "enemy.orc_brute": "Orc Brute",
    "enemy.ancient_dragon": "Ancient Dragon",
    "item.weapon.wooden_sword": "Wooden Sword",
    "item.weapon.bronze_sword": "Bronze Sword",
    "item.weapon.knight_sword": "Knight Sword",
    "item.armor.cloth_armor": "Cloth Armor",
    "item.armor.chain_armor": "Chain Armor",
    "item.armor.steel_armor": "Steel Armor",
    # Game
    "log.game.welcome": "Welcome, adventurer. The Ancient Dragon waits in its lair.",
    "log.game.town_hint": "The town (T) restores you and sells supplies.",
    "log.game.difficulty": "Difficulty: {diff}",
    "log.game.saved_to": "Game saved to {path}.",
    "log.game.save_failed": "Save failed: {error}",
    "log.game.loaded_from": "Game loaded from {path}.",
    "log.game.load_failed": "Load failed: {error}",
    "log.game.player_fallen_restart": "You have fallen. Press r to restart or q to quit.",
    "log.game.dragon_defeated_restart_or_quit": "The Ancient Dragon is slain! Press r to play again or q to quit.",
    # Battle
    "log.battle.wild_appears": "A wild {enemy} appears!",
    "log.battle.boss_blocks_path": "{enemy} blocks the path!",
    "log.battle.player_slash": "You strike {enemy} for {dmg} damage.",
    "log.battle.fire_slash": "Fire Slash scorches {enemy} for {dmg} damage.",
    "log.battle.not_enough_mp_fire_slash": "Not enough MP for Fire Slash.",
    "log.battle.brace": "You brace for the next blow.",
    "log.battle.escape_success": "You escaped safely.",
    "log.battle.escape_failed": "You failed to escape!",
    "log.battle.enemy_hit": "{enemy} hits you for {dmg} damage.",
    "log.battle.enemy_skill_heavy": "{enemy} lands a heavy blow for {dmg} damage!",
    "log.battle.enemy_skill_mana_burn": "{enemy} burns your mind: {dmg} damage, {mp} MP lost.",
    "log.battle.enemy_skill_pounce": "{enemy} pounces twice for {dmg} damage!",
    "log.battle.enemy_skill_drain": "{enemy} drains {dmg} HP and recovers {heal}.",
    "log.battle.enemy_skill_flame_breath": "{enemy} breathes fire for {dmg} damage!",
    "log.battle.enemy_skill_tail_sweep": "{enemy} sweeps its tail for {dmg} damage!",
    # Items
    "log.item.no_potion": "You have no potions.",
    "log.item.no_ether": "You have no ethers.",
    "log.item.hp_full": "HP is already full.",
    "log.item.mp_full": "MP is already full.",
    "log.item.potion_used": "Potion used: HP {before} -> {after}.",
    "log.item.ether_used": "Ether used: MP {before} -> {after}.",
    # Progression
    "log.progression.defeated_reward": "{enemy} defeated! +{exp} EXP, +{gold} gold.",
    "log.progression.level_up": "Level up! You are now level {level}.",
    # World
    "log.world.chest_opened": "Chest opened: +{gold} gold, +{potion} potion, +{ether} ether.",
    "log.world.npc_reward": "You received {gold} gold.",
    "log.npc.wanderer": "Wanderer: \"Roads are safer near town. Take this for the journey.\"",
    "log.npc.hermit": "Hermit: \"The dragon's breath is worst. Brace yourself when it rears up.\"",
    "log.npc.scout": "Scout: \"The lair lies in the far corner. Here, my spare coin.\"",
    "log.event.gold_cache": "You found a hidden cache of {gold} gold.",
    "log.event.potion_stash": "You found {count} potion(s).",
    "log.event.ether_stash": "You found {count} ether(s).",
    "log.event.campfire_heal": "A warm campfire restores you: HP {before} -> {after}.",
    "log.event.spike_trap": "A spike trap deals {dmg} damage!",
    "log.event.spike_trap_deadly": "A spike trap deals {dmg} damage. It was fatal.",
    # Town
    "log.town.arrived_restore": "You arrive in town. HP and MP restored.",
    "log.town.menu_opened": "Town menu opened.",
    "log.town.leaving": "You leave town.",
    "log.town.bought_potion": "Bought {count} potion.",
    "log.town.bought_ether": "Bought {count} ether.",
    "log.town.not_enough_gold_potion": "Not enough gold for a potion.",
    "log.town.not_enough_gold_ether": "Not enough gold for an ether.",
    "log.town.weapon_max": "Your weapon is already the best available.",
    "log.town.armor_max": "Your armor is already the best available.",
    "log.town.need_more_gold_weapon": "You need {cost} gold to upgrade your weapon.",
    "log.town.need_more_gold_armor": "You need {cost} gold to upgrade your armor.",
    "log.town.weapon_upgraded": "Weapon upgraded to {weapon}.",
    "log.town.armor_upgraded": "Armor upgraded to {armor}.",
    "log.town.healer_done": "The healer restores your HP for {cost} gold.",
    "log.town.healer_not_needed": "Your HP is already full.",
    "log.town.not_enough_gold_healer": "The healer asks {cost} gold.",
    "log.town.inn_rest": "You rest at the inn for {cost} gold. HP and MP restored.",
    "log.town.inn_not_needed": "You are already fully rested.",
    "log.town.not_enough_gold_inn": "A room costs {cost} gold.",
    # Quest
    "log.quest.accepted": "Quest accepted: defeat {target} monsters for {reward} gold.",
    "log.quest.progress": "Quest progress: {progress}.",
    "log.quest.progress_short": "Quest {progress}",
    "log.quest.completed": "Quest complete ({progress})! Claim {reward} gold at the board.",
    "log.quest.reward_claimed": "Quest reward claimed: +{reward} gold.",
    "log.quest.already_claimed": "You already claimed this quest reward.",
    # Settings
    "log.settings.opened": "Settings opened.",
    "log.settings.language_changed": "Language set to {lang}.",
    "log.settings.difficulty_changed": "Difficulty set to {diff}.",
    # UI labels
    "ui.settings.lang_en": "English",
    "ui.settings.lang_zh_cn": "Simplified Chinese",
    "ui.settings.lang_zh_tw": "Traditional Chinese",
    "ui.settings.lang_ja": "Japanese",
    "ui.settings.lang_ko": "Korean",
    "ui.settings.title": "Settings",
    "ui.difficulty.easy": "Easy",
    "ui.difficulty.normal": "Normal",
    "ui.difficulty.hard": "Hard",
    "ui.battle.action_attack": "Attack",
    "ui.battle.action_fire_slash": "Fire Slash (4 MP)",
    "ui.battle.action_defend": "Defend",
    "ui.battle.action_potion": "Potion",
    "ui.battle.action_ether": "Ether",
    "ui.battle.action_run": "Run",
    "ui.battle.enemy_hp": "{enemy} HP {hp}/{max_hp}",
    "ui.town.action_buy_potion": "Buy potion ({cost} gold)",
    "ui.town.action_buy_ether": "Buy ether ({cost} gold)",
    "ui.town.action_upgrade_weapon": "Upgrade weapon",
    "ui.town.action_upgrade_armor": "Upgrade armor",
    "ui.town.action_healer": "Healer ({cost} gold)",
    "ui.town.action_inn": "Inn ({cost} gold)",
    "ui.town.action_quest_board": "Quest board",
    "ui.town.action_leave": "Leave town",
    "ui.stats.hero": "Lv {level}  HP {hp}/{max_hp}  MP {mp}/{max_mp}  ATK {atk}  DEF {defense}  "
    "EXP {exp}/{next_exp}  Gold {gold}",
    "ui.stats.gear": "{weapon} / {armor}  Potions {potion}  Ethers {ether}",
    "ui.quest.none": "Quest: none",
    "ui.quest.progress": "Quest: {progress}",
    "ui.quest.ready": "Quest: ready to claim",
    "ui.quest.done": "Quest: done",
    "ui.result.victory": "Victory!",
    "ui.result.game_over": "Game Over",
    "ui.banner.recent": "Latest: {event}",
}

CATALOGS: Dict[str, Dict[str, str]] = {"en": EN_CATALOG}
