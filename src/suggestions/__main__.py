from __future__ import annotations
import argparse, json, sys
from .engine import SuggestionEngine
from .config import TOP_K


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Did-you-mean suggestions CLI (Engine-backed)")
    p.add_argument("--roots", nargs="+", default=[], help="Files or folders of choices (.txt, one per line)")
    p.add_argument("--choice", action="append", default=[], help="Literal choice (repeatable)")
    p.add_argument("-q", "--q", default=None, help="Single term to run once")
    p.add_argument("-k", type=int, default=None, help=f"Number of suggestions (default {TOP_K})")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--scores", action="store_true", help="Show scores next to each suggestion")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if not args.roots and not args.choice:
        p.error("at least one of --roots or --choice is required")

    eng = SuggestionEngine()
    try:
        eng.build(roots=args.roots, choices=args.choice, verbose=args.verbose)

        def run_query(term: str):
            if args.scores:
                rows = eng.explain(term, top_k=args.k)
                if args.json:
                    print(json.dumps(rows, ensure_ascii=False, indent=2))
                    return
                if not rows:
                    print("(no suggestions)"); return
                print("#  Diff  LenDiff  Suggestion")
                for i, r in enumerate(rows, 1):
                    print(f"{i:<2} {r['difference_score']:<5} {r['length_diff']:<8} {r['suggestion']}")
                return

            hits = eng.suggest(term, top_k=args.k)
            if args.json:
                print(json.dumps(hits, ensure_ascii=False))
            elif not hits:
                print("(no suggestions)")
            else:
                for h in hits:
                    print(h)

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a term (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    sys.exit(main())
