"""Minimal CLI to ask a building for directions.

Usage (example):
    python run.py roomfinder/assets/buildings/example.json --from 102 --to 203
or, without --from/--to, an interactive loop:
    route 102 to 203
    rooms
    validate
"""
from __future__ import annotations
import argparse
import difflib
import logging
import sys
from typing import List, Optional

import jsonschema

from .bootstrap import load_building_and_validity
from .building import Building
from .config import get_default_capitalize, get_default_periods, get_log_level
from .validity import is_valid_building

PROMPT = "> "

COMMAND_HELP = {
    'route': {'usage': 'route <from> to <to>', 'desc': 'Directions from one room (or alias) to another.'},
    'rooms': {'usage': 'rooms', 'desc': 'Lists every room name and alias.'},
    'validate': {'usage': 'validate', 'desc': 'Runs the structural checks on the building.'},
    'help': {'usage': 'help [command]', 'desc': 'Without arguments lists everything; with one shows its usage.'},
    'quit': {'usage': 'quit | exit', 'desc': 'Leaves the program.'},
}

def help_lines() -> List[str]:
    lines = ["Available commands:"]
    max_usage = max(len(info['usage']) for info in COMMAND_HELP.values())
    for name, info in COMMAND_HELP.items():
        lines.append(f" {info['usage'].ljust(max_usage)}  - {info['desc']}")
    return lines

def _unknown_room_line(building: Building, name: str) -> str:
    close = difflib.get_close_matches(name, building.rooms_list, n=3)
    if close:
        return f"Unknown room '{name}'. Did you mean: {', '.join(close)}"
    return f"Unknown room '{name}'."

def route_lines(building: Building, from_name: str, to_name: str,
                capitalize: bool = True, periods: bool = False) -> List[str]:
    directions = building.get_directions(from_name, to_name, capitalize=capitalize, periods=periods)
    if directions is None:
        return [
            _unknown_room_line(building, name)
            for name in (from_name, to_name)
            if not building.is_valid_room_name(name)
        ]
    return directions.split("\n")

def validate_lines(building: Building) -> List[str]:
    validity = is_valid_building(building)
    if validity.valid:
        return [f"Valid building ({len(building.graph)} connector nodes)."]
    lines = [f"Invalid building: {validity.reason}"]
    if len(validity.connected_sections) > 1:
        for i, section in enumerate(validity.connected_sections, start=1):
            lines.append(f" section {i}: {', '.join(section)}")
    return lines

def run_command(building: Building, cmd: str, capitalize: bool = True, periods: bool = False) -> Optional[List[str]]:
    """Execute one interactive command; returns None when the user quits."""
    cmd = cmd.strip()
    if not cmd:
        return []
    if cmd in {"quit", "exit"}:
        return None
    if cmd.startswith("help"):
        parts = cmd.split(maxsplit=1)
        if len(parts) == 1:
            return help_lines()
        topic = parts[1].strip()
        info = COMMAND_HELP.get(topic)
        if info:
            return [f"Usage: {info['usage']}", info['desc']]
        close = difflib.get_close_matches(topic, COMMAND_HELP.keys(), n=3)
        if close:
            return [f"Command '{topic}' not found. Did you mean: {', '.join(close)}"]
        return [f"Command '{topic}' not found."]
    if cmd == "rooms":
        return building.rooms_list
    if cmd == "validate":
        return validate_lines(building)
    if cmd.startswith("route"):
        parts = cmd[len("route"):].split(" to ", 1)
        if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
            return ["Usage: route <from> to <to>"]
        return route_lines(building, parts[0].strip(), parts[1].strip(), capitalize, periods)
    close = difflib.get_close_matches(cmd.split()[0], COMMAND_HELP.keys(), n=3)
    if close:
        return [f"Unknown command: '{cmd}'. Did you mean: {', '.join(close)}"]
    return [f"Unknown command: '{cmd}'. Type 'help' for the list of commands."]

def repl(building: Building, capitalize: bool = True, periods: bool = False) -> None:
    print("-- Type 'help' for the list of commands. --")
    while True:
        try:
            cmd = input(PROMPT)
        except EOFError:
            break
        lines = run_command(building, cmd, capitalize, periods)
        if lines is None:
            print("Goodbye.")
            break
        for line in lines:
            print(line)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("room-finder")
    ap.add_argument("layout", nargs="?", help="Building layout JSON (default: RF_LAYOUT_FILE or the bundled example)")
    ap.add_argument("--from", dest="from_name")
    ap.add_argument("--to", dest="to_name")
    ap.add_argument("--validate", action="store_true", help="Only run the validity checks")
    ap.add_argument("--no-capitalize", action="store_true")
    ap.add_argument("--periods", action="store_true")
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(message)s")
    capitalize = get_default_capitalize() and not args.no_capitalize
    periods = get_default_periods() or args.periods

    try:
        building, validity = load_building_and_validity(args.layout)
    except (OSError, ValueError, jsonschema.ValidationError) as e:
        print(f"Could not load layout: {e}", file=sys.stderr)
        return 2

    if args.validate:
        for line in validate_lines(building):
            print(line)
        return 0 if validity.valid else 1

    if args.from_name or args.to_name:
        if not (args.from_name and args.to_name):
            print("Both --from and --to are required.", file=sys.stderr)
            return 2
        lines = route_lines(building, args.from_name, args.to_name, capitalize, periods)
        for line in lines:
            print(line)
        found = building.is_valid_room_name(args.from_name) and building.is_valid_room_name(args.to_name)
        return 0 if found else 1

    repl(building, capitalize, periods)
    return 0

if __name__ == "__main__":
    sys.exit(main())
