"""
dakzg 명령행 도구
=================

  python -m dakzg generate-srs --order 64 --seed S --out srs.bin
  python -m dakzg inspect-srs srs.bin
  python -m dakzg commit data.bin [--production]
"""

import argparse
import json
import sys
from pathlib import Path

from dakzg.blob import Blob
from dakzg.config import configure_logging
from dakzg.errors import KzgError
from dakzg.kzg import blob_to_kzg_commitment
from dakzg.serialization import g1_to_base64, serialize_g1, serialize_g2
from dakzg.srs import SRS, load_srs, setup


def cmd_generate_srs(args):
    srs = SRS.generate(args.order, args.seed, g2_powers=args.g2_powers)
    Path(args.out).write_bytes(srs.to_bytes())
    print(f"wrote {srs!r} to {args.out}")


def cmd_inspect_srs(args):
    srs = load_srs(str(args.path))
    summary = {
        "srs_order": srs.srs_order,
        "g1_count": len(srs.g1),
        "g2_count": len(srs.g2),
        "tau_g2_index": srs.tau_g2_index,
        "g1_head": [serialize_g1(p) for p in srs.g1[:args.head]],
        "g2": [serialize_g2(p) for p in srs.g2],
    }
    print(json.dumps(summary, indent=2))


def cmd_commit(args):
    srs = setup(use_test_parameters=not args.production)
    blob = Blob.from_bytes_and_pad(Path(args.path).read_bytes())
    x, y = g1_to_base64(blob_to_kzg_commitment(blob, srs))
    print(json.dumps({"x": x, "y": y}))


parser = argparse.ArgumentParser(
    prog="dakzg", description="KZG commitments over BN254"
)
subparsers = parser.add_subparsers(dest="command", required=True)

generate = subparsers.add_parser("generate-srs", help="Write a deterministic (insecure) SRS payload")
generate.add_argument("--order", type=int, required=True, help="Number of G1 powers")
generate.add_argument("--seed", type=str, required=True, help="Seed the secret is derived from")
generate.add_argument("--out", type=str, required=True, help="Output path")
generate.add_argument("--g2-powers", type=int, default=2, help="Number of G2 powers (default 2)")
generate.set_defaults(func=cmd_generate_srs)

inspect = subparsers.add_parser("inspect-srs", help="Print a JSON summary of an SRS payload")
inspect.add_argument("path", type=str)
inspect.add_argument("--head", type=int, default=2, help="Number of leading G1 points to print")
inspect.set_defaults(func=cmd_inspect_srs)

commit = subparsers.add_parser("commit", help="Pad a file into a blob and print its commitment")
commit.add_argument("path", type=str)
commit.add_argument("--production", action="store_true", help="Use the production SRS")
commit.set_defaults(func=cmd_commit)


def main(argv=None):
    configure_logging()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except KzgError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
