"""The player's weapons: firing cadence, ammunition and reloading."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_U32 = 0xFFFFFFFF


class WeaponType(Enum):
    NONE = 0
    AK = 1
    PISTOL = 2
    KNIFE = 3


class Pose(Enum):
    """How the player sprite is drawn for the weapon in hand."""

    STANDING = "standing"
    HOLDING_AK = "holding_ak"
    HOLDING_PISTOL = "holding_pistol"
    PUNCHING = "punching"


_POSES = {
    WeaponType.AK: Pose.HOLDING_AK,
    WeaponType.PISTOL: Pose.HOLDING_PISTOL,
    WeaponType.KNIFE: Pose.PUNCHING,
}

_RELOADABLE = (WeaponType.AK, WeaponType.PISTOL)


@dataclass
class Weapon:
    """One weapon; times are in milliseconds, fire_rate in seconds."""

    type: WeaponType
    name: str
    ammo_capacity: int
    ammo: int
    fire_rate: float
    reload_duration: int
    last_fire_time: float = 0.0
    reload_time: int = 0

    @property
    def fire_delay(self) -> int:
        return int(self.fire_rate * 1000)

    def ammo_text(self) -> str:
        return f"{self.ammo} / {self.ammo_capacity}"


@dataclass
class PlayerWeapons:
    """The weapons the player carries and which one is in hand (-1 for none)."""

    weapons: list[Weapon] = field(default_factory=list)
    current_index: int = 0

    @classmethod
    def standard(cls, now: int) -> PlayerWeapons:
        """The AK, pistol and knife loadout."""
        weapons = [
            Weapon(WeaponType.AK, "AK", 30, 30, 0.13, 2000),
            Weapon(WeaponType.PISTOL, "Pistol", 7, 7, 0.30, 1000),
            Weapon(WeaponType.KNIFE, "Knife", 0, 0, 0.50, 0),
        ]
        for weapon in weapons:
            weapon.last_fire_time = ((now - weapon.fire_delay) & _U32) / 1000.0
        return cls(weapons, 0)

    def current(self) -> Weapon | None:
        if 0 <= self.current_index < len(self.weapons):
            return self.weapons[self.current_index]
        return None

    def handle_fire(self, now: int) -> bool:
        """Record a shot if the weapon is ready; return whether it fired."""
        weapon = self.current()
        if weapon is None:
            return False
        if now - weapon.last_fire_time < weapon.fire_delay:
            return False
        if weapon.type is WeaponType.KNIFE or weapon.ammo > 0:
            weapon.last_fire_time = now
            return True
        return False

    def force_reload(self, now: int) -> bool:
        """Start reloading the weapon in hand unless full or already reloading."""
        weapon = self.current()
        if weapon is None:
            return False
        if weapon.ammo < weapon.ammo_capacity and weapon.reload_time == 0:
            weapon.reload_time = now
            return True
        return False

    def update_reloads(self, now: int) -> None:
        """Refill every firearm whose reload has run its course."""
        for weapon in self.weapons:
            if weapon.reload_time > 0 and weapon.type in _RELOADABLE:
                if ((now - weapon.reload_time) & _U32) >= weapon.reload_duration:
                    weapon.ammo = weapon.ammo_capacity
                    weapon.reload_time = 0

    def switch(self, slot: int) -> None:
        """Select weapon slot 1-3; choosing the one in hand puts it away."""
        if slot not in (1, 2, 3):
            return
        new_index = slot - 1
        if self.current_index == new_index:
            self.current_index = -1
            return
        old = self.current()
        if old is not None:
            old.reload_time = 0
        self.current_index = new_index
        new = self.current()
        if new is not None:
            new.reload_time = 0

    def reset(self) -> None:
        """Refill all weapons, cancel reloads and take the first one."""
        for weapon in self.weapons:
            weapon.ammo = weapon.ammo_capacity
            weapon.reload_time = 0
            weapon.last_fire_time = 0.0
        self.current_index = 0

    def reload_text(self) -> str | None:
        weapon = self.current()
        if weapon is None or weapon.reload_time == 0:
            return None
        return "Reloading..."

    def pose(self) -> Pose:
        weapon = self.current()
        if weapon is None:
            return Pose.STANDING
        return _POSES.get(weapon.type, Pose.STANDING)