import pytest

from zombieshooter.weapon import PlayerWeapons, Pose, WeaponType


@pytest.fixture
def loadout():
    weapons = PlayerWeapons.standard(0)
    weapons.reset()
    return weapons


def test_standard_loadout():
    weapons = PlayerWeapons.standard(5000)
    assert [w.type for w in weapons.weapons] == [
        WeaponType.AK,
        WeaponType.PISTOL,
        WeaponType.KNIFE,
    ]
    assert [w.ammo_capacity for w in weapons.weapons] == [30, 7, 0]
    assert weapons.current_index == 0
    assert weapons.current().name == "AK"


def test_standard_weapons_can_fire_immediately():
    weapons = PlayerWeapons.standard(5000)
    assert weapons.handle_fire(5000)
    assert weapons.current().last_fire_time == 5000


def test_ammo_text(loadout):
    assert loadout.current().ammo_text() == "30 / 30"


def test_fire_respects_delay(loadout):
    assert loadout.handle_fire(1000)
    delay = loadout.current().fire_delay
    assert not loadout.handle_fire(1000 + delay - 1)
    assert loadout.current().last_fire_time == 1000
    assert loadout.handle_fire(1000 + delay)


def test_empty_firearm_does_not_fire(loadout):
    loadout.current().ammo = 0
    assert not loadout.handle_fire(10_000)


def test_knife_fires_without_ammo(loadout):
    loadout.switch(3)
    assert loadout.current().type is WeaponType.KNIFE
    assert loadout.handle_fire(10_000)


def test_force_reload(loadout):
    assert not loadout.force_reload(100)
    loadout.current().ammo -= 1
    assert loadout.force_reload(100)
    assert loadout.current().reload_time == 100
    assert not loadout.force_reload(200)
    assert loadout.reload_text() == "Reloading..."


def test_update_reloads_refills_after_duration(loadout):
    ak = loadout.current()
    ak.ammo = 0
    loadout.force_reload(100)
    loadout.update_reloads(100 + ak.reload_duration - 1)
    assert ak.ammo == 0
    loadout.update_reloads(100 + ak.reload_duration)
    assert ak.ammo == ak.ammo_capacity
    assert ak.reload_time == 0
    assert loadout.reload_text() is None


def test_knife_never_reloads(loadout):
    loadout.switch(3)
    assert not loadout.force_reload(100)


def test_switch_clears_reloads(loadout):
    loadout.current().ammo = 0
    loadout.force_reload(50)
    loadout.switch(2)
    assert loadout.current_index == 1
    assert loadout.weapons[0].reload_time == 0
    assert loadout.pose() is Pose.HOLDING_PISTOL


def test_switch_same_slot_holsters(loadout):
    loadout.switch(2)
    loadout.switch(2)
    assert loadout.current_index == -1
    assert loadout.current() is None
    assert loadout.pose() is Pose.STANDING
    assert not loadout.force_reload(10)


def test_switch_ignores_unknown_slot(loadout):
    loadout.switch(5)
    assert loadout.current_index == 0


@pytest.mark.parametrize(
    "slot,pose",
    [(1, Pose.HOLDING_AK), (2, Pose.HOLDING_PISTOL), (3, Pose.PUNCHING)],
)
def test_pose_follows_weapon(slot, pose):
    weapons = PlayerWeapons.standard(0)
    weapons.current_index = slot - 1
    assert weapons.pose() is pose


def test_reset(loadout):
    loadout.switch(2)
    pistol = loadout.current()
    pistol.ammo = 1
    pistol.reload_time = 40
    pistol.last_fire_time = 999.0
    loadout.reset()
    assert loadout.current_index == 0
    assert pistol.ammo == pistol.ammo_capacity
    assert pistol.reload_time == 0
    assert pistol.last_fire_time == 0.0