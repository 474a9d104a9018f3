import sys, argparse
from detprime import is_prime
from detprime.miller_rabin import STRATEGIES

def process(raw: str, strategy: str) -> int:
    try:
        n = int(raw, 10)
        verdict = is_prime(n, strategy=strategy)
    except ValueError as e:
        print(f"# skip: {raw} ({e})", file=sys.stderr)
        return 1
    print(f"{n}\t{verdict}")
    return 0

def main(argv=None):
    ap = argparse.ArgumentParser(description="Deterministic Miller-Rabin for odd 64-bit n > 3")
    ap.add_argument("--strategy", choices=STRATEGIES, default="squaring",
                    help="how a^(q*2^j) is produced in the witness loop")
    ap.add_argument("N", nargs="*", help="optional list of integers (default: read stdin)")
    args = ap.parse_args(argv)

    rc = 0
    if args.N:
        for raw in args.N:
            rc |= process(raw.strip(), args.strategy)
    else:
        for line in sys.stdin:
            line = line.strip()
            if not line: continue
            rc |= process(line, args.strategy)
    raise SystemExit(rc)

if __name__ == "__main__":
    main()
