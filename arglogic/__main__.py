"""
CLI entry point. Run as: python -m arglogic --problem <name>
"""

import argparse
import sys

from .core.state import SearchState, load_hypotheses
from .core.engine import run_search
from .core.validation import InvalidHypothesis, validate_hypotheses
from .visualization import print_state, print_history, print_result, export_dot
from .problems import PROBLEMS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Propositional inference by pairwise rule application")
    parser.add_argument(
        "--problem",
        choices=list(PROBLEMS.keys()),
        default="exo1",
        help="Which bundled problem to solve",
    )
    parser.add_argument("--load",  type=str, default=None,
                        help="Load hypotheses (JSON list) or a saved state from file")
    parser.add_argument("--steps", type=int, default=None,
                        help="Max search steps (default: number of hypotheses - 1)")
    parser.add_argument("--save",  type=str, default=None, help="Save final state to file")
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--list",  action="store_true",    help="List bundled problems")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    args = parser.parse_args(argv)

    if args.list:
        for name, problem in PROBLEMS.items():
            print(f"  {name:<15} {problem['description']}")
        return 0

    # --- Load or build the hypothesis set ---
    try:
        if args.load:
            hypotheses = load_hypotheses(args.load)
            print(f"Loaded {len(hypotheses)} hypotheses from {args.load}")
        else:
            hypotheses = PROBLEMS[args.problem]["make_hypotheses"]()
            print(f"Problem: {args.problem}")
        hypotheses = validate_hypotheses(hypotheses)
    except InvalidHypothesis as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    state = SearchState(working_set=hypotheses)
    print_state(state)

    max_steps = args.steps if args.steps is not None else max(len(hypotheses) - 1, 1)

    # --- Run ---
    try:
        state = run_search(state, max_steps=max_steps, verbose=not args.quiet)
    except KeyboardInterrupt:
        print("\nInterrupted.")

    print_state(state)
    print_history(state)
    print_result(state)

    if args.dot:
        export_dot(state, args.dot)

    if args.save:
        state.save(args.save)
        print(f"State saved to {args.save}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
