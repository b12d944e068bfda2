"""Shared fixtures for leysync tests."""

from __future__ import annotations

from typing import Any

import pytest

from leysync.models import GenshinData
from leysync.pipeline.parser import parse_genshin_data


def _constellation(cid: int, pos: int, active: bool, effect: str = "") -> dict[str, Any]:
    return {
        "id": cid,
        "icon": f"https://example.invalid/c{cid}.png",
        "pos": pos,
        "is_actived": active,
        "is_enhanced": False,
        "effect": effect,
    }


def _skill(skill_id: int, name: str, level: int, desc: str = "") -> dict[str, Any]:
    return {
        "skill_id": skill_id,
        "name": name,
        "icon": f"https://example.invalid/s{skill_id}.png",
        "is_unlock": True,
        "is_enhanced": False,
        "level": level,
        "desc": desc,
    }


def _sub(code: int, value: str, times: int = 0) -> dict[str, Any]:
    return {"property_type": code, "value": value, "times": times}


def ayaka() -> dict[str, Any]:
    return {
        "base": {
            "id": 10000002,
            "name": "Kamisato Ayaka",
            "icon": "https://example.invalid/ayaka.png",
            "side_icon": "https://example.invalid/ayaka_side.png",
            "image": "https://example.invalid/ayaka_full.png",
            "element": "Cryo",
            "fetter": 10,
            "level": 90,
            "actived_constellation_num": 3,
        },
        "weapon": {
            "id": 11509,
            "name": "Mistsplitter Reforged",
            "icon": "https://example.invalid/mistsplitter.png",
            "level": 90,
            "promote_level": 6,
            "affix_level": 1,
        },
        "relics": [
            {
                "id": 91544,
                "set": {"id": 14001, "name": "Blizzard Strayer"},
                "icon": "https://example.invalid/bs_flower.png",
                "pos": 1,
                "rarity": 5,
                "level": 20,
                "main_property": {"property_type": 2, "value": "4780", "times": 0},
                "sub_property_list": [
                    _sub(20, "3.9%", 1),
                    _sub(22, "12.8%", 2),
                    _sub(5, "19", 0),
                    _sub(23, "5.2%", 1),
                ],
            },
            {
                "id": 91545,
                "set": {"id": 14001, "name": "Blizzard Strayer"},
                "icon": "https://example.invalid/bs_circlet.png",
                "pos": 5,
                "rarity": 5,
                "level": 16,
                "main_property": {"property_type": 22, "value": "53.1%", "times": 0},
                "sub_property_list": [
                    _sub(6, "5.8%", 1),
                    _sub(28, "23", 0),
                ],
            },
        ],
        "constellations": [
            _constellation(201, 1, True, "Kamisato Art: Kabuki hits reduce the CD."),
            _constellation(202, 2, True, "Unleashes two smaller additional Cutting Storms."),
            _constellation(
                203, 3, True,
                "Increases the Level of Kamisato Art: Soumetsu by 3. Maximum upgrade level is 15.",
            ),
            _constellation(204, 4, False, "Opponents damaged by the Cutting Storm have DEF decreased."),
            _constellation(
                205, 5, False,
                "Increases the Level of Kamisato Art: Hyouka by 3. Maximum upgrade level is 15.",
            ),
            _constellation(206, 6, False, "Charged Attack DMG is increased by 298%."),
        ],
        "costumes": [
            {"id": 200201, "name": "Springbloom Missive", "icon": "https://example.invalid/cos.png"},
        ],
        "skills": [
            _skill(10024, "Normal Attack: Kamisato Art: Kabuki", 8),
            _skill(10018, "Kamisato Art: Hyouka", 9),
            _skill(10013, "Kamisato Art: Senho", 1, "Alternate Sprint: Ayaka moves swiftly."),
            _skill(10019, "Kamisato Art: Soumetsu", 13),
        ],
    }


def traveler() -> dict[str, Any]:
    return {
        "base": {
            "id": 10000007,
            "name": "Traveler",
            "element": "Anemo",
            "fetter": 10,
            "level": 55,
            "actived_constellation_num": 0,
        },
        "weapon": {
            "id": 11401,
            "name": "Favonius Sword",
            "level": 50,
            "promote_level": 2,
            "affix_level": 3,
        },
        "skills": [
            _skill(100543, "Normal Attack: Foreign Ironwind", 1),
            _skill(10067, "Palm Vortex", 1),
            _skill(10068, "Gust Surge", 1),
        ],
    }


def manekina() -> dict[str, Any]:
    return {
        "base": {
            "id": 10000118,
            "name": "Manekina",
            "element": "None",
            "level": 70,
            "actived_constellation_num": 0,
        },
        "weapon": {"id": 11101, "name": "Dull Blade", "level": 1, "promote_level": 0, "affix_level": 1},
        "relics": [
            {
                "id": 70001,
                "set": {"id": 15031, "name": "Marechaussee Hunter"},
                "pos": 2,
                "rarity": 4,
                "level": 0,
                "main_property": {"property_type": 5},
                "sub_property_list": [_sub(3, "4.1%")],
            },
        ],
        "constellations": [],
        "costumes": [],
        "skills": [
            _skill(1, "Normal Attack", 1),
            _skill(2, "Skill", 1),
            _skill(3, "Burst", 1),
        ],
    }


def xiangling() -> dict[str, Any]:
    return {
        "base": {
            "id": 10000023,
            "name": "Xiangling",
            "element": "Pyro",
            "fetter": 6,
            "level": 40,
            "actived_constellation_num": 6,
        },
        "weapon": {
            "id": 13415,
            "name": "\"The Catch\"",
            "level": 40,
            "promote_level": 1,
            "affix_level": 5,
        },
        "relics": [
            {
                "id": 80011,
                "set": {"id": 15020, "name": "Emblem of Severed Fate"},
                "pos": 3,
                "rarity": 5,
                "level": 8,
                "main_property": {"property_type": 23},
                "sub_property_list": [_sub(1, "209", 0), _sub(40, "7%", 0)],
            },
        ],
        "skills": [
            _skill(10231, "Normal Attack: Dough-Fu", 6),
            _skill(10232, "Guoba Attack", 6),
            _skill(10235, "Pyronado", 6),
        ],
    }


@pytest.fixture
def raw_payload() -> dict[str, Any]:
    """A successful character detail response with four characters."""
    return {
        "retcode": 0,
        "message": "OK",
        "data": {
            "uid": "812345678",
            "server": "os_euro",
            "list": [ayaka(), traveler(), manekina(), xiangling()],
        },
    }


@pytest.fixture
def genshin_data(raw_payload: dict[str, Any]) -> GenshinData:
    return parse_genshin_data(raw_payload)
