"""Closed enumerations of the GOOD v3 format."""

from enum import StrEnum


class StatKey(StrEnum):
    HP = "hp"
    HP_PERCENT = "hp_"
    ATK = "atk"
    ATK_PERCENT = "atk_"
    DEF = "def"
    DEF_PERCENT = "def_"
    ELEMENTAL_MASTERY = "eleMas"
    ENERGY_RECHARGE = "enerRech_"
    HEALING_BONUS = "heal_"
    CRIT_RATE = "critRate_"
    CRIT_DMG = "critDMG_"
    PHYSICAL_DMG = "physical_dmg_"
    ANEMO_DMG = "anemo_dmg_"
    GEO_DMG = "geo_dmg_"
    ELECTRO_DMG = "electro_dmg_"
    HYDRO_DMG = "hydro_dmg_"
    PYRO_DMG = "pyro_dmg_"
    CRYO_DMG = "cryo_dmg_"
    DENDRO_DMG = "dendro_dmg_"


class SlotKey(StrEnum):
    FLOWER = "flower"
    PLUME = "plume"
    SANDS = "sands"
    GOBLET = "goblet"
    CIRCLET = "circlet"
