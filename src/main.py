"""Voicing Architect — command-line entry point.

Lists ranked voicings for a set of pitch classes::

    python -m src.main 0 4 7 --bass 0 --tuning guitar.standard --frets 5

or picks a smoothly connected voicing for each chord of a progression::

    python -m src.main --progression 0,4,7 5,9,0 7,11,2 0,4,7

Chord-name parsing is left to the caller; pitch classes are given as
integers (0 = C), root first.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from src.config import describe_environment, setup_logging
from src.voicing_engine.cost_model import load_weights
from src.voicing_engine.generator import generate_voicings
from src.voicing_engine.progression import (
    ProgressionChord,
    build_voicing_family,
    optimize_progression,
)
from src.voicing_engine.tuning import get_tuning, resolve_tuning
from src.voicing_engine.voicing import VoicingConfig
from src.voicing_engine.voicing_utils import (
    difficulty_tier,
    inversion_label,
    shape_type,
    tab_shorthand,
)


def _parse_chord(text: str) -> list[int]:
    try:
        return [int(pc) for pc in text.split(",") if pc.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid chord {text!r}; expected e.g. 0,4,7") from None


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank playable chord voicings.")
    parser.add_argument("pitch_classes", nargs="*", type=int, help="Chord pitch classes (0-11)")
    parser.add_argument("--bass", type=int, default=None, help="Bass pitch class (default: first pitch class)")
    parser.add_argument(
        "--progression", nargs="+", type=_parse_chord, default=None, metavar="CHORD",
        help="Chords as comma-separated pitch classes, e.g. 0,4,7 5,9,0",
    )
    parser.add_argument("--tuning", default="guitar.standard", help="Preset such as guitar.standard")
    parser.add_argument("--strings", nargs="+", default=None, help="Explicit open-string notes, e.g. E2 A2 D3")
    parser.add_argument("--frets", type=int, default=5, help="Highest fret considered")
    parser.add_argument("--max-fingers", type=int, default=None)
    parser.add_argument("--max-span", type=int, default=None)
    parser.add_argument("--max-results", type=int, default=15)
    parser.add_argument("--no-open", action="store_true", help="Disallow open strings")
    parser.add_argument("--config", default=None, help="Cost weights YAML")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--quiet", action="store_true", help="Skip the environment banner")
    args = parser.parse_args(argv)
    if not args.pitch_classes and not args.progression:
        parser.error("give chord pitch classes or --progression")
    return args


def _print_voicings(args: argparse.Namespace, tuning: tuple[int, ...], config: VoicingConfig) -> None:
    bass = args.pitch_classes[0] if args.bass is None else args.bass
    voicings = generate_voicings(args.pitch_classes, bass, tuning, args.frets, config)
    if not voicings:
        print("No playable voicing found.")
        return

    for rank, voicing in enumerate(voicings, start=1):
        print(
            f"{rank:>3}. {tab_shorthand(voicing, len(tuning)):<14}"
            f" cost={voicing.cost:6.3f}"
            f"  {difficulty_tier(voicing.cost):<6}"
            f"  {shape_type(voicing, len(tuning))}"
        )


def _print_progression(args: argparse.Namespace, tuning: tuple[int, ...], config: VoicingConfig) -> None:
    chords = [
        ProgressionChord(
            voicings=build_voicing_family(pcs, tuning, args.frets, config),
            string_count=len(tuning),
        )
        for pcs in args.progression
    ]
    selections = optimize_progression(chords)

    for position, (pcs, chord, selection) in enumerate(zip(args.progression, chords, selections), start=1):
        name = ",".join(str(pc) for pc in pcs)
        if selection is None:
            print(f"{position:>3}. {name:<10} no playable voicing")
            continue
        voicing = chord.voicings[selection.inversion][selection.sequence_index]
        move = "-" if selection.distance is None else f"{selection.distance:g}"
        print(
            f"{position:>3}. {name:<10} {tab_shorthand(voicing, len(tuning)):<14}"
            f" {inversion_label(selection.inversion):<14}"
            f" move={move}"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and print one line per voicing (or per chord)."""
    args = _parse_args(argv)
    setup_logging(args.log_level)
    if not args.quiet:
        describe_environment()

    tuning = resolve_tuning(args.strings) if args.strings else get_tuning(args.tuning)
    weights = load_weights(args.config) if args.config else None
    config = VoicingConfig(
        max_fingers=args.max_fingers,
        max_span=args.max_span,
        max_results=args.max_results,
        allow_open=not args.no_open,
        weights=weights,
    )

    if args.progression:
        _print_progression(args, tuning, config)
    else:
        _print_voicings(args, tuning, config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
