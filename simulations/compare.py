# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .common import ExperimentResult, format_stats_line
from .run import DEFAULT_SEED, run_experiment, sweep_people

DEFAULT_TRIALS = 10000
DEFAULT_REPEATS = 10
DEFAULT_TABLE_PEOPLE = [5, 10, 15, 20, 23, 25, 30, 40, 50, 60]


def plot_estimates(r: ExperimentResult) -> None:
    """
    Histogram of repeated estimates, with the exact answer marked when known.
    """
    plt.figure(figsize=(8, 4))
    plt.hist(r.estimates, bins=min(30, max(5, len(r.estimates))))
    if r.exact is not None:
        plt.axvline(r.exact, color="red", linestyle="--", label=f"exact={r.exact:.4f}")
        plt.legend()
    plt.xlabel("Estimated probability")
    plt.ylabel("Number of repeats")
    plt.title(
        f"{r.method} (people={r.spec.people}, trials={r.spec.trials}, "
        f"repeats={r.spec.repeats})"
    )
    plt.tight_layout()
    plt.show()


def format_table(rows) -> str:
    lines = [f"{'n':>5}  {'exact':>8}  {'simulated':>9}  {'diff':>8}"]
    for n, exact, est in rows:
        lines.append(f"{n:>5}  {exact:>8.4f}  {est:>9.4f}  {est - exact:>+8.4f}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Birthday-problem Monte Carlo estimates vs the exact answer."
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="base RNG seed")
    parser.add_argument("--verbose", action="store_true", help="log progress")
    sub = parser.add_subparsers(dest="command", required=True)

    rep = sub.add_parser("repeat", help="repeat one estimator and summarize the spread")
    rep.add_argument("--event", choices=["a", "b"], default="a",
                     help="a: shared birthday | b: consecutive-day run")
    rep.add_argument("--people", type=int, required=True, help="birthdays per trial")
    rep.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="trials per estimate")
    rep.add_argument("--repeats", type=int, default=DEFAULT_REPEATS, help="number of estimates")
    rep.add_argument("--run-length", type=int, default=1,
                     help="consecutive one-day gaps required (event b)")
    rep.add_argument("--workers", type=int, default=1, help="processes per estimate")
    rep.add_argument("--plot", action="store_true", help="show a histogram of estimates")

    tab = sub.add_parser("table", help="exact vs simulated shared-birthday table")
    tab.add_argument("--people", type=int, nargs="+", default=DEFAULT_TABLE_PEOPLE)
    tab.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="trials per row")

    return parser


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    try:
        if args.command == "table":
            rows = sweep_people(args.people, trials=args.trials, seed=args.seed)
            print(format_table(rows))
            return 0

        result = run_experiment(
            event=args.event,
            people=args.people,
            trials=args.trials,
            repeats=args.repeats,
            run_length=args.run_length,
            seed=args.seed,
            workers=args.workers,
        )
    except ValueError as e:
        parser.error(str(e))

    print(format_stats_line(result))
    if args.plot:
        plot_estimates(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
