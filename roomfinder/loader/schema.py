"""JSON schema definition for building layout files.

A layout lists hallways in order; each hallway lists its elements in walking
order. Element kinds are told apart by their ``type`` field.
"""

_SIDE = {"type": "string", "enum": ["left", "right", "front", "back"]}

_WEIGHT = {"type": "number"}

_FORK_NODE = {
    "oneOf": [
        {"type": "string", "minLength": 1},
        {
            "type": "object",
            "required": ["fork"],
            "properties": {
                "fork": {"type": "string", "minLength": 1},
                "reversed": {"type": "boolean", "default": False},
            },
            "additionalProperties": False,
        },
    ]
}

_STAIR_NODE = {
    "type": "object",
    "required": ["stairs", "floor"],
    "properties": {
        "stairs": {"type": "string", "minLength": 1},
        "floor": {"type": "integer"},
    },
    "additionalProperties": False,
}

ROOM_SCHEMA = {
    "type": "object",
    "required": ["type", "name"],
    "properties": {
        "type": {"const": "room"},
        "name": {"type": "string", "minLength": 1},
        "side": _SIDE,
        "prefix": {"type": "string"},
        "aliases": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "node": _FORK_NODE,
        "edge_length": _WEIGHT,
    },
    "additionalProperties": False,
}

FORK_SCHEMA = {
    "type": "object",
    "required": ["type", "side", "node", "destination"],
    "properties": {
        "type": {"const": "fork"},
        "side": _SIDE,
        "node": _FORK_NODE,
        "destination": {"type": "string"},
        "edge_length": _WEIGHT,
        "connection_weight": _WEIGHT,
    },
    "additionalProperties": False,
}

STAIRS_SCHEMA = {
    "type": "object",
    "required": ["type", "side", "node"],
    "properties": {
        "type": {"const": "stairs"},
        "side": _SIDE,
        "node": _STAIR_NODE,
        "label": {"type": "string", "minLength": 1},
        "edge_length": _WEIGHT,
    },
    "additionalProperties": False,
}

TURN_SCHEMA = {
    "type": "object",
    "required": ["type", "direction"],
    "properties": {
        "type": {"const": "turn"},
        "direction": {"type": "string", "enum": ["left", "right"]},
    },
    "additionalProperties": False,
}

HALLWAY_SCHEMA = {
    "type": "object",
    "required": ["elements"],
    "properties": {
        "name": {"type": "string"},
        "allow_front_connections_in_middle": {"type": "boolean", "default": False},
        "one_way": {"enum": ["forward", "backward", None]},
        "elements": {
            "type": "array",
            "items": {"oneOf": [ROOM_SCHEMA, FORK_SCHEMA, STAIRS_SCHEMA, TURN_SCHEMA]},
        },
    },
    "additionalProperties": False,
}

# A room holding other rooms, entered through one fork
SIMPLE_HALLWAY_SCHEMA = {
    "type": "object",
    "required": ["simple", "node", "name", "rooms"],
    "properties": {
        "simple": {"const": True},
        "node": _FORK_NODE,
        "name": {"type": "string", "minLength": 1},
        "rooms": {"type": "array", "items": ROOM_SCHEMA},
    },
    "additionalProperties": False,
}

LAYOUT_SCHEMA = {
    "type": "object",
    "required": ["hallways"],
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "allowed_connections": {"type": "array", "items": {"type": "string"}},
        "hallways": {
            "type": "array",
            "minItems": 1,
            "items": {"oneOf": [HALLWAY_SCHEMA, SIMPLE_HALLWAY_SCHEMA]},
        },
    },
    "additionalProperties": False,
}
