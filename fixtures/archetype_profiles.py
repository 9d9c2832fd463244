"""
Hand-authored archetype and persona tables.
Static configuration: weights, condition rules and persona motivation vectors
are calibrated by hand, not derived from answers.
"""

ARCHETYPES = [
    "conqueror",
    "sage",
    "creator",
    "sovereign",
    "healer",
    "guardian",
    "rebel",
    "explorer",
]


ARCHETYPE_PROFILES = {
    "conqueror": {
        "name": "The Conqueror",
        "emoji": "⚔️",
        "weights": {"achievement": 0.45, "freedom": 0.25, "mastery": 0.15, "recognition": 0.15},
        "conditions": {
            "primary": ("achievement", 70),
            "exclude": ("security", 60),
        },
    },
    "sage": {
        "name": "The Sage",
        "emoji": "📚",
        "weights": {"mastery": 0.45, "achievement": 0.20, "creation": 0.20, "connection": 0.15},
        "conditions": {
            "primary": ("mastery", 70),
            "secondary": ("creation", 50),
        },
    },
    "creator": {
        "name": "The Creator",
        "emoji": "🎨",
        "weights": {"creation": 0.45, "mastery": 0.25, "freedom": 0.20, "recognition": 0.10},
        "conditions": {
            "primary": ("creation", 70),
            "secondary": ("freedom", 50),
        },
    },
    "sovereign": {
        "name": "The Sovereign",
        "emoji": "👑",
        "weights": {"recognition": 0.40, "achievement": 0.25, "security": 0.20, "connection": 0.15},
        "conditions": {
            "primary": ("recognition", 65),
            "secondary": ("achievement", 55),
        },
    },
    "healer": {
        "name": "The Healer",
        "emoji": "💚",
        "weights": {"connection": 0.45, "security": 0.25, "creation": 0.15, "mastery": 0.15},
        "conditions": {
            "primary": ("connection", 70),
            "secondary": ("security", 50),
        },
    },
    "guardian": {
        "name": "The Guardian",
        "emoji": "🛡️",
        "weights": {"security": 0.45, "connection": 0.25, "achievement": 0.15, "mastery": 0.15},
        "conditions": {
            "primary": ("security", 70),
            "secondary": ("connection", 55),
        },
    },
    "rebel": {
        "name": "The Rebel",
        "emoji": "🔥",
        "weights": {"freedom": 0.45, "creation": 0.25, "adventure": 0.20, "achievement": 0.10},
        "conditions": {
            "primary": ("freedom", 70),
            "exclude": ("security", 50),
        },
    },
    "explorer": {
        "name": "The Explorer",
        "emoji": "🧭",
        "weights": {"adventure": 0.45, "freedom": 0.25, "mastery": 0.20, "creation": 0.10},
        "conditions": {
            "primary": ("adventure", 70),
            "secondary": ("freedom", 55),
        },
    },
}


def _m(achievement, mastery, creation, recognition, connection, security, freedom, adventure):
    return {
        "achievement": achievement,
        "mastery": mastery,
        "creation": creation,
        "recognition": recognition,
        "connection": connection,
        "security": security,
        "freedom": freedom,
        "adventure": adventure,
    }


# (key, display name, origin, motivation vector on 0-1)
PERSONA_PROFILES = {
    "conqueror": [
        ("napoleon", "Napoleon", "France", _m(0.95, 0.80, 0.50, 0.85, 0.40, 0.30, 0.70, 0.75)),
        ("alexander", "Alexander", "Greece", _m(0.95, 0.70, 0.40, 0.80, 0.50, 0.20, 0.75, 0.90)),
        ("genghis", "Genghis Khan", "Mongolia", _m(0.95, 0.65, 0.30, 0.70, 0.45, 0.50, 0.85, 0.80)),
        ("caesar", "Julius Caesar", "Rome", _m(0.90, 0.75, 0.35, 0.90, 0.55, 0.40, 0.65, 0.60)),
        ("ares", "Ares", "Greek mythology", _m(0.90, 0.60, 0.25, 0.70, 0.30, 0.20, 0.80, 0.85)),
        ("guan_yu", "Guan Yu", "China", _m(0.85, 0.90, 0.30, 0.70, 0.75, 0.60, 0.55, 0.50)),
    ],
    "sage": [
        ("zhuge", "Zhuge Liang", "China", _m(0.80, 0.95, 0.75, 0.60, 0.70, 0.55, 0.45, 0.40)),
        ("athena", "Athena", "Greek mythology", _m(0.75, 0.90, 0.80, 0.65, 0.55, 0.60, 0.50, 0.45)),
        ("gandalf", "Gandalf", "Fantasy", _m(0.55, 0.90, 0.60, 0.45, 0.75, 0.40, 0.70, 0.65)),
        ("thoth", "Thoth", "Egyptian mythology", _m(0.65, 0.95, 0.85, 0.60, 0.50, 0.55, 0.45, 0.35)),
        ("odin_sage", "Odin", "Norse mythology", _m(0.80, 0.90, 0.60, 0.65, 0.50, 0.40, 0.75, 0.70)),
        ("saraswati", "Saraswati", "Hindu mythology", _m(0.50, 0.95, 0.90, 0.55, 0.65, 0.50, 0.55, 0.40)),
    ],
    "creator": [
        ("hephaestus", "Hephaestus", "Greek mythology", _m(0.60, 0.90, 0.95, 0.50, 0.45, 0.55, 0.50, 0.30)),
        ("daedalus", "Daedalus", "Greek mythology", _m(0.65, 0.85, 0.95, 0.50, 0.45, 0.40, 0.70, 0.55)),
        ("nuwa", "Nüwa", "Chinese mythology", _m(0.55, 0.65, 0.95, 0.50, 0.80, 0.70, 0.45, 0.35)),
        ("brahma", "Brahma", "Hindu mythology", _m(0.60, 0.80, 0.95, 0.65, 0.55, 0.55, 0.50, 0.40)),
        ("ptah", "Ptah", "Egyptian mythology", _m(0.60, 0.85, 0.95, 0.55, 0.50, 0.60, 0.45, 0.30)),
        ("izanagi", "Izanagi", "Japanese mythology", _m(0.55, 0.60, 0.90, 0.50, 0.75, 0.65, 0.50, 0.45)),
    ],
    "sovereign": [
        ("zeus", "Zeus", "Greek mythology", _m(0.85, 0.60, 0.40, 0.95, 0.55, 0.65, 0.70, 0.50)),
        ("jade_emperor", "Jade Emperor", "Chinese mythology", _m(0.75, 0.65, 0.45, 0.90, 0.60, 0.85, 0.40, 0.30)),
        ("odin_king", "Odin", "Norse mythology", _m(0.80, 0.90, 0.50, 0.85, 0.45, 0.55, 0.70, 0.65)),
        ("ra", "Ra", "Egyptian mythology", _m(0.80, 0.70, 0.60, 0.95, 0.50, 0.75, 0.45, 0.40)),
        ("indra", "Indra", "Hindu mythology", _m(0.85, 0.60, 0.40, 0.90, 0.45, 0.55, 0.65, 0.70)),
        ("amaterasu", "Amaterasu", "Japanese mythology", _m(0.60, 0.55, 0.65, 0.85, 0.75, 0.80, 0.45, 0.35)),
    ],
    "healer": [
        ("guanyin", "Guanyin", "East Asia", _m(0.40, 0.55, 0.60, 0.45, 0.95, 0.80, 0.50, 0.30)),
        ("asclepius", "Asclepius", "Greek mythology", _m(0.65, 0.85, 0.50, 0.55, 0.90, 0.60, 0.40, 0.35)),
        ("brigid", "Brigid", "Celtic mythology", _m(0.50, 0.65, 0.80, 0.55, 0.85, 0.70, 0.50, 0.40)),
        ("dian_cecht", "Dian Cecht", "Celtic mythology", _m(0.70, 0.90, 0.60, 0.55, 0.85, 0.65, 0.40, 0.35)),
        ("eir", "Eir", "Norse mythology", _m(0.55, 0.70, 0.50, 0.45, 0.90, 0.75, 0.50, 0.40)),
        ("yakushi", "Yakushi Nyorai", "Buddhism", _m(0.45, 0.70, 0.55, 0.40, 0.95, 0.80, 0.45, 0.30)),
    ],
    "guardian": [
        ("heimdall", "Heimdall", "Norse mythology", _m(0.70, 0.75, 0.35, 0.55, 0.65, 0.95, 0.40, 0.45)),
        ("hestia", "Hestia", "Greek mythology", _m(0.40, 0.50, 0.55, 0.35, 0.85, 0.90, 0.40, 0.25)),
        ("jizo", "Jizo", "Buddhism", _m(0.40, 0.60, 0.50, 0.35, 0.95, 0.85, 0.40, 0.30)),
        ("anubis", "Anubis", "Egyptian mythology", _m(0.55, 0.80, 0.40, 0.50, 0.60, 0.95, 0.35, 0.45)),
        ("zhong_kui", "Zhong Kui", "China", _m(0.75, 0.55, 0.35, 0.65, 0.60, 0.90, 0.45, 0.40)),
        ("durga", "Durga", "Hindu mythology", _m(0.85, 0.65, 0.50, 0.60, 0.70, 0.85, 0.55, 0.50)),
    ],
    "rebel": [
        ("prometheus", "Prometheus", "Greek mythology", _m(0.60, 0.65, 0.85, 0.55, 0.75, 0.15, 0.95, 0.70)),
        ("loki", "Loki", "Norse mythology", _m(0.55, 0.60, 0.80, 0.65, 0.45, 0.20, 0.95, 0.85)),
        ("sun_wukong", "Sun Wukong", "China", _m(0.80, 0.75, 0.55, 0.70, 0.60, 0.15, 0.95, 0.95)),
        ("maui", "Maui", "Polynesia", _m(0.80, 0.60, 0.75, 0.75, 0.65, 0.25, 0.90, 0.90)),
        ("eris", "Eris", "Greek mythology", _m(0.60, 0.50, 0.65, 0.80, 0.35, 0.15, 0.95, 0.75)),
        ("lucifer", "Lucifer", "Christianity", _m(0.75, 0.65, 0.55, 0.85, 0.25, 0.10, 0.95, 0.50)),
    ],
    "explorer": [
        ("odysseus", "Odysseus", "Greek mythology", _m(0.75, 0.85, 0.40, 0.60, 0.80, 0.55, 0.70, 0.90)),
        ("gilgamesh", "Gilgamesh", "Mesopotamia", _m(0.90, 0.70, 0.45, 0.80, 0.75, 0.35, 0.65, 0.90)),
        ("xuanzang", "Xuanzang", "China", _m(0.70, 0.90, 0.55, 0.50, 0.70, 0.45, 0.50, 0.80)),
        ("hermes", "Hermes", "Greek mythology", _m(0.55, 0.65, 0.50, 0.50, 0.60, 0.30, 0.85, 0.90)),
        ("marco_polo", "Marco Polo", "Venice", _m(0.80, 0.65, 0.55, 0.70, 0.50, 0.25, 0.75, 0.95)),
        ("ibn_battuta", "Ibn Battuta", "Morocco", _m(0.65, 0.75, 0.45, 0.55, 0.70, 0.30, 0.80, 0.95)),
    ],
}


# Archetype-specific names for maturity levels 1-4
LEVEL_NAMES = {
    "conqueror": {1: "Blind Destroyer", 2: "Warrior of Ambition", 3: "Strategic Conqueror", 4: "One Beyond Victory and Defeat"},
    "sage": {1: "Hidden Genius", 2: "Strategist Sought Thrice", 3: "Chancellor of the Memorial", 4: "Eternal Strategist"},
    "creator": {1: "Unfinished Maker", 2: "Honer of Craft", 3: "Master Artisan", 4: "Incarnation of Creation"},
    "sovereign": {1: "Drunk on Power", 2: "Keeper of the Throne", 3: "Wise Ruler", 4: "Eternal Sovereign"},
    "healer": {1: "Wounded Healer", 2: "Empathic Hand", 3: "Master Healer", 4: "Incarnation of Mercy"},
    "guardian": {1: "Overprotector", 2: "Faithful Sentinel", 3: "Wise Guardian", 4: "Eternal Shield"},
    "rebel": {1: "Reckless Destroyer", 2: "Rebel with a Cause", 3: "Pioneer of Change", 4: "Incarnation of Freedom"},
    "explorer": {1: "Fleeing Wanderer", 2: "Explorer with Purpose", 3: "Wise Adventurer", 4: "Eternal Traveller"},
}

NEXT_LEVEL_HINTS = {
    1: "when you find your purpose",
    2: "when you accept responsibility",
    3: "when you transcend your limits",
}
TOP_LEVEL_HINT = "You have reached the highest level"
