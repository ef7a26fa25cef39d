"""
Main entry point of the encounter engine.

Loads characters, monsters and adventures from the data folder, fields a
party and plays one adventure, printing the narration as it happens.

The runner supports:
- Choosing the adventure by index and the party by character names
- Seeding the random source to replay an adventure
- Overriding the rule bounds with a JSON settings file
"""

import argparse
import logging
from pathlib import Path

from adventure import AdventureManager, AdventureOrchestrator, CharacterManager
from core.config import load_settings
from core.dice import SeededRandomSource
from core.errors import GameException
from core.logging import setup_logging
from core.utils import cprint, crule, make_bar
from entities.party import PartyMember
from persistence import AdventureRepository, CharacterRepository

# Default data folder, next to the sources.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play an adventure with a party of characters.")
    parser.add_argument("--data", type=Path, default=None, help="Folder holding the JSON data files.")
    parser.add_argument("--settings", type=Path, default=None, help="JSON file overriding the rules.")
    parser.add_argument("--adventure", type=int, default=0, help="Index of the adventure to play.")
    parser.add_argument("--party", nargs="*", default=None, help="Names of the party members.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the dice.")
    parser.add_argument("--verbose", action="store_true", help="Show debug logs.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write the logs to this file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    settings = load_settings(args.settings)
    data_dir = args.data or (settings.data_dir if args.settings else DEFAULT_DATA_DIR)
    seed = args.seed if args.seed is not None else settings.seed
    dice = SeededRandomSource(seed)

    characters = CharacterManager(CharacterRepository(data_dir / "characters.json"), dice)
    adventures = AdventureManager(AdventureRepository(data_dir / "adventures.json"), settings)

    crule("Tavern", style="bold green")
    try:
        roster = characters.search()
        adventures.check_minimum_characters(len(roster))
        if args.party:
            by_name = {member.name: member for member in roster}
            missing = [name for name in args.party if name not in by_name]
            if missing:
                cprint(f"Unknown characters: {', '.join(missing)}", style="bold red")
                return 1
            members = [by_name[name] for name in args.party]
        else:
            members = roster[: adventures.max_party_size(len(roster))]
        adventures.check_party_size(len(members), len(roster))

        party = characters.set_up_party(members)
        adventure = adventures.set_up_adventure(args.adventure, party)
    except GameException as e:
        cprint(f"Error: {e}", style="bold red")
        return 1

    crule(adventure.name, style="bold green")
    orchestrator = AdventureOrchestrator(
        dice,
        settings,
        on_event=lambda line: cprint(line, markup=False, highlight=False),
        save_party=characters.save_party,
    )
    report = orchestrator.play(adventure, party)
    crule("Completed" if report.completed else "Defeated", style="bold green" if report.completed else "bold red")
    print_party(report.party)
    return 0 if report.completed else 2


def print_party(party: list[PartyMember]) -> None:
    """Prints the level, class and hit points of every party member."""
    width = max(len(member.name) for member in party)
    for member in party:
        cls = member.character_class
        cprint(
            f"{member.name:<{width}} {cls.colorize(f'{cls.display_name:<10}')} lvl {member.level:>2} "
            f"{make_bar(member.current_hp, member.max_hp, color='green')} "
            f"{member.current_hp}/{member.max_hp}"
        )


if __name__ == "__main__":
    raise SystemExit(main())
