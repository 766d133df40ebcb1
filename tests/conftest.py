import pytest

from itemstash.testing.fixtures import item_factory  # noqa: F401


@pytest.fixture()
def breakout_documents():
    return {
        "skins": [
            {
                "id": "1",
                "name": "AK-47 | Redline",
                "type": "Weapon",
                "rarity": {"name": "Classified", "color": "#d32ce6"},
                "image": "https://example.com/ak47.png",
            },
            {
                "id": "2",
                "name": "Karambit | Doppler",
                "type": "Knife",
                "rarity": {"name": "Covert", "color": "#eb4b4b"},
                "image": "https://example.com/karambit.png",
            },
        ],
        "collections": [
            {
                "name": "The Breakout Collection",
                "image": "https://example.com/breakout.png",
                "contains": [{"id": "1"}, {"id": "2"}],
            }
        ],
        "crates": [
            {
                "name": "Operation Breakout Case",
                "type": "Case",
                "image": "https://example.com/breakout_case.png",
                "contains": [{"name": "The Breakout Collection"}],
                "contains_rare": [{"id": "2"}],
            }
        ],
        "agents": [{"id": "agent-1", "name": "Sir Bloody Darryl"}],
        "stickers": [{"id": "sticker-1", "name": "Sticker | Crown (Foil)"}],
    }
