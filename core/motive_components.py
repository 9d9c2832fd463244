# Motive sources are the eight fundamental drivers the questionnaire measures
MOTIVE_SOURCES = [
    "achievement",
    "mastery",
    "creation",
    "recognition",
    "connection",
    "security",
    "freedom",
    "adventure",
]

# Ignition conditions are the situations that switch motivated behaviour on
IGNITION_CONDITIONS = [
    "competition",
    "complexity",
    "deadline",
    "audience",
    "autonomy",
    "crisis",
]

DIRECTIONS = ["approach", "avoidance"]

# Operating axes, each with (left pole, right pole)
OPERATING_AXES = {
    "rhythm": ("planned", "spontaneous"),
    "recharge": ("solitary", "social"),
    "release": ("endurance", "burst"),
    "recovery": ("quick", "slow"),
}

# Question subcategories that feed an axis under a different name
OPERATING_AXIS_ALIASES = {
    "relay": "release",
    "resistance": "recovery",
    "scope": "rhythm",
}

'''
no_progress: effort without visible movement
control: being micromanaged or boxed in
isolation: working cut off from people
routine: repetition without novelty
meaningless: work with no visible purpose
conflict: friction with people around you
unrecognized: contribution going unseen
uncertainty: unclear expectations or outcomes
'''
DRAIN_SOURCES = [
    "no_progress",
    "control",
    "isolation",
    "routine",
    "meaningless",
    "conflict",
    "unrecognized",
    "uncertainty",
]

FLOW_PATTERNS = {
    "deep": "deep_focus",
    "challenge": "challenge",
    "clarity": "clarity",
    "feedback": "feedback",
    "environment": "environment",
}

CONTEXTS = ["normal", "pressure", "growth", "crisis"]
STRESS_CONTEXTS = ("pressure", "crisis")

MATURITY_SUBSCALES = ["awareness", "integration", "growth"]
