"""Phrase generation for walking directions.

Each hallway leg is narrated as: a *leave* phrase for the element we start
at, a *pass* phrase for every Turn walked through, and an *arrive* phrase for
the element we stop at. Phrases end with a newline; a phrase that should be
glued onto the next one ends with ", " instead. ``format_directions`` turns
the concatenated phrases into the final text.
"""
from __future__ import annotations
from typing import Optional

from .config import get_elevator_keyword
from .model import (
    Hallway,
    Room,
    Fork,
    Stairs,
    Turn,
    Element,
    HallwayElement,
    StairNode,
    dir_to_string,
    dir_to_turn_string,
    is_left_or_right,
)

__all__ = [
    "leave_phrase",
    "pass_phrase",
    "arrive_phrase",
    "stair_phrase",
    "hallway_leg",
    "simple_leg",
    "format_directions",
]

def leave_phrase(element: HallwayElement, forward: int, is_beginning: bool, entrance_was_straight: bool) -> str:
    """What to say when walking away from ``element``.

    Args:
        element: The element the leg starts at
        forward: +1 when walking towards higher indices, -1 otherwise
        is_beginning: First leg of the route, or first leg after a change of
            floor; the walker is told which way to turn out of the element
        entrance_was_straight: The hallway was entered through a FRONT/BACK
            fork, so the previous phrase ended with "after entering X, "

    Returns:
        The phrase, possibly empty
    """
    turn = dir_to_turn_string(element.side * forward)
    if is_beginning:
        ret = turn
        if element.full_name:
            ret += f" out of {element.full_name}"
        return ret + "\n"
    if entrance_was_straight:
        if turn.startswith("go "):
            turn = "continue " + turn[len("go "):]
        return turn + "\n"
    if is_left_or_right(element.side):
        return f", and then {turn}\n"
    return ""

def pass_phrase(element: Element, forward: int, prev: Optional[Element]) -> str:
    """What to say when walking past ``element``; only Turns say anything."""
    if isinstance(element, Turn):
        ret = "continue, then " + dir_to_turn_string(element.direction * forward)
        if (
            isinstance(prev, (Room, Fork, Stairs))
            and prev.full_name
            and is_left_or_right(prev.side)
        ):
            ret += f" (after passing {prev.full_name} on your {dir_to_string(prev.side * forward)})"
        return ret + "\n"
    if isinstance(element, (Room, Fork, Stairs)):
        return ""
    raise TypeError(f"Unknown hallway element: {element!r}")

def arrive_phrase(element: HallwayElement, forward: int, is_end: bool) -> str:
    if is_left_or_right(element.side) or is_end:
        return f"continue, then {dir_to_turn_string(element.side * forward)} into {element.full_name}\n"
    # Completed by the leave phrase of the next hallway
    return f"continue, then after entering {element.full_name}, "

def stair_phrase(start: StairNode, end: StairNode) -> str:
    if get_elevator_keyword().lower() in end.name.lower():
        return f"go to floor {end.floor}\n"
    floors = abs(end.floor - start.floor)
    way = "up" if end.floor > start.floor else "down"
    plural = "s" if floors > 1 else ""
    return f"go {way} {floors} floor{plural} of stairs\n"

def _degenerate_leg(element: HallwayElement, is_beginning: bool, is_end: bool, entrance_was_straight: bool) -> str:
    if is_beginning and is_end:
        return f"you are already at {element.full_name}\n"
    if is_end and entrance_was_straight:
        return "you have arrived\n"
    return ""

def simple_leg(hallway: Hallway, start: int, end: int) -> str:
    """Directions inside a simple hallway, whose entrance is index 0."""
    from_name = hallway.elements[start].full_name
    to_name = hallway.elements[end].full_name
    if start == 0:
        return f"Enter {to_name}, which is in {hallway.name}\n"
    if end == 0:
        return f"Exit {from_name}\n"
    return f"Exit {from_name} and enter {to_name} (both of which are in {hallway.name})\n"

def hallway_leg(
    hallway: Hallway,
    start: int,
    end: int,
    is_beginning: bool,
    is_end: bool,
    entrance_was_straight: bool,
) -> str:
    """Directions from index ``start`` to index ``end`` of one hallway."""
    elements = hallway.elements
    if start == end:
        return _degenerate_leg(elements[start], is_beginning, is_end, entrance_was_straight)
    if hallway.simple:
        return simple_leg(hallway, start, end)

    forward = 1 if end > start else -1
    parts = [leave_phrase(elements[start], forward, is_beginning, entrance_was_straight)]
    for i in range(start + forward, end, forward):
        parts.append(pass_phrase(elements[i], forward, elements[i - forward]))
    parts.append(arrive_phrase(elements[end], forward, is_end))
    return "".join(parts)

def format_directions(text: str, capitalize: bool = True, periods: bool = False) -> str:
    """Trim, merge comma continuations, capitalize and punctuate lines."""
    lines = []
    for line in text.strip().replace("\n,", ",").split("\n"):
        if line == "":
            continue
        if capitalize:
            line = line[0].upper() + line[1:]
        if periods:
            line += "."
        lines.append(line)
    return "\n".join(lines)
