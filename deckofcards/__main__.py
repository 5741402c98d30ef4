import argparse
import json
import logging
from typing import List, Optional

from .compare import compare_backends, run_deal
from .dealing import PreconditionError
from .decks import REFERENCE_BACKEND, available_backends
from .models import DealConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shuffle a 52-card deck and deal hands")
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--hand-size", type=int, default=5)
    parser.add_argument("--hand-count", type=int, default=5)
    parser.add_argument("--backend", choices=available_backends(), default=REFERENCE_BACKEND)
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Run every backend against the reference and report which agree",
    )
    parser.add_argument("--json", action="store_true", help="Print the deal as JSON")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    config = DealConfig(
        seed=args.seed,
        hand_size=args.hand_size,
        hand_count=args.hand_count,
        backend=args.backend,
    )

    try:
        if args.compare:
            results = compare_backends(config)
            for name, ok in results.items():
                print(f"{name}: {'ok' if ok else 'MISMATCH'}")
            return 0 if all(results.values()) else 1

        result = run_deal(config)
    except PreconditionError as exc:
        parser.error(str(exc))

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        for idx, hand in enumerate(result.hands, start=1):
            print(f"Hand {idx}: {', '.join(hand)}")
        print(f"Remaining: {result.remaining}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
