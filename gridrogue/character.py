"""Character progression components: attributes, experience, skills and resources."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Stats:
    """Character attributes."""

    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10


def xp_for_level(level: int) -> int:
    """Experience required to reach ``level``."""
    return int(100 * float(level) * float(level) * 0.5)


@dataclass
class Experience:
    """Level, experience points and unspent points for progression."""

    level: int = 1
    current_xp: int = 0
    xp_to_next_level: int = 100
    total_xp: int = 0
    skill_points: int = 0
    attribute_points: int = 0

    def add_xp(self, amount: int) -> bool:
        """Gain experience; returns True if this caused a level up."""
        self.current_xp += amount
        self.total_xp += amount
        if self.current_xp >= self.xp_to_next_level:
            return self._level_up()
        return False

    def _level_up(self) -> bool:
        if self.current_xp < self.xp_to_next_level:
            return False
        self.current_xp -= self.xp_to_next_level
        self.level += 1
        self.xp_to_next_level = xp_for_level(self.level + 1)
        self.skill_points += 2
        self.attribute_points += 1
        return True


@dataclass
class Skills:
    """Combat, magic and utility skill levels."""

    melee_weapons: int = 1
    ranged_weapons: int = 1
    defense: int = 1
    evocation: int = 0
    conjuration: int = 0
    enchantment: int = 0
    divination: int = 0
    stealth: int = 1
    lockpicking: int = 0
    perception: int = 1
    medicine: int = 0
    crafting: int = 0


@dataclass
class Combat:
    """Combat-related statistics; critical damage is a percentage."""

    attack_power: int = 1
    defense: int = 0
    accuracy: int = 75
    dodge_chance: int = 5
    critical_chance: int = 5
    critical_damage: int = 150


@dataclass
class Mana:
    """Magical energy."""

    current_mp: int = 0
    max_mp: int = 0
    regen_rate: int = 1

    @classmethod
    def full(cls, max_mp: int) -> Mana:
        """Mana at its maximum."""
        return cls(current_mp=max_mp, max_mp=max_mp, regen_rate=1)

    def regenerate(self) -> None:
        """Restore one turn's worth of mana, up to the maximum."""
        self.current_mp = min(self.current_mp + self.regen_rate, self.max_mp)

    def use(self, amount: int) -> bool:
        """Spend mana if enough is available."""
        if self.current_mp >= amount:
            self.current_mp -= amount
            return True
        return False


@dataclass
class Stamina:
    """Physical energy."""

    current_sp: int = 0
    max_sp: int = 0
    regen_rate: int = 2

    @classmethod
    def full(cls, max_sp: int) -> Stamina:
        """Stamina at its maximum."""
        return cls(current_sp=max_sp, max_sp=max_sp, regen_rate=2)

    def regenerate(self) -> None:
        """Restore one turn's worth of stamina, up to the maximum."""
        self.current_sp = min(self.current_sp + self.regen_rate, self.max_sp)

    def use(self, amount: int) -> bool:
        """Spend stamina if enough is available."""
        if self.current_sp >= amount:
            self.current_sp -= amount
            return True
        return False


@dataclass
class StatusEffect:
    """A temporary effect with a duration in turns and stat modifiers."""

    name: str
    duration: int = 0
    kind: str = "neutral"  # "buff", "debuff" or "neutral"
    description: str = ""

    strength_mod: int = 0
    dexterity_mod: int = 0
    constitution_mod: int = 0
    intelligence_mod: int = 0
    wisdom_mod: int = 0
    charisma_mod: int = 0

    attack_mod: int = 0
    defense_mod: int = 0
    accuracy_mod: int = 0
    dodge_mod: int = 0

    poisoned: bool = False
    regenerating: bool = False
    paralyzed: bool = False
    confused: bool = False


@dataclass
class StatusEffects:
    """All active status effects on an entity."""

    effects: list[StatusEffect] = field(default_factory=list)

    def add_effect(self, effect: StatusEffect) -> None:
        """Add an effect, or refresh the duration of one with the same name."""
        for existing in self.effects:
            if existing.name == effect.name:
                existing.duration = effect.duration
                return
        self.effects.append(effect)

    def remove_effect(self, name: str) -> None:
        """Remove the first effect with the given name, if any."""
        for index, effect in enumerate(self.effects):
            if effect.name == name:
                del self.effects[index]
                return

    def update_effects(self) -> list[StatusEffect]:
        """Tick every effect down one turn and return those that expired."""
        expired: list[StatusEffect] = []
        active: list[StatusEffect] = []
        for effect in self.effects:
            effect.duration -= 1
            (expired if effect.duration <= 0 else active).append(effect)
        self.effects = active
        return expired

    def has_effect(self, name: str) -> bool:
        return any(effect.name == name for effect in self.effects)

    def total_modifiers(self) -> tuple[Stats, Combat]:
        """Sum the stat and combat modifiers of all active effects."""
        stats = Stats(0, 0, 0, 0, 0, 0)
        combat = Combat(0, 0, 0, 0, 0, 0)
        for e in self.effects:
            stats.strength += e.strength_mod
            stats.dexterity += e.dexterity_mod
            stats.constitution += e.constitution_mod
            stats.intelligence += e.intelligence_mod
            stats.wisdom += e.wisdom_mod
            stats.charisma += e.charisma_mod
            combat.attack_power += e.attack_mod
            combat.defense += e.defense_mod
            combat.accuracy += e.accuracy_mod
            combat.dodge_chance += e.dodge_mod
        return stats, combat