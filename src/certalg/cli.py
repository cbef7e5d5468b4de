from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization

from .algorithms.catalog import signature_algorithms_for
from .algorithms.normalize import normalize
from .cbom.export import build_inventory
from .curves.resolver import aliases_of, named_curves_map, oid_of
from .keys.classify import classify, key_specification
from .keys.compat import is_compatible
from .utils.logging import get_logger

log = get_logger()


def _load_public_key(path: str) -> Any:
    data = Path(path).read_bytes()
    try:
        return serialization.load_pem_public_key(data)
    except ValueError:
        # private key PEMs are accepted too, only the public half is used
        return serialization.load_pem_private_key(data, password=None).public_key()


def cmd_classify(args: argparse.Namespace) -> int:
    key = _load_public_key(args.pem)
    print(json.dumps({
        "keyAlgorithm": classify(key).value,
        "keySpec": key_specification(key),
        "signatureAlgorithms": signature_algorithms_for(classify(key)),
    }, indent=2))
    return 0


def cmd_algs(args: argparse.Namespace) -> int:
    for name in signature_algorithms_for(args.key_algorithm):
        print(name)
    return 0


def cmd_compat(args: argparse.Namespace) -> int:
    key = _load_public_key(args.pem)
    ok = is_compatible(key, args.alg)
    print(json.dumps({"compatible": ok, "keyAlgorithm": classify(key).value, "signatureAlgorithm": normalize(args.alg)}))
    return 0 if ok else 2


def cmd_normalize(args: argparse.Namespace) -> int:
    print(normalize(args.name))
    return 0


def cmd_curves(args: argparse.Namespace) -> int:
    print(json.dumps(named_curves_map(args.all), indent=2))
    return 0


def cmd_oid(args: argparse.Namespace) -> int:
    oid = oid_of(args.curve)
    if oid is None:
        log.error("unknown curve %s", args.curve)
        return 1
    print(json.dumps({"oid": oid, "aliases": sorted(aliases_of(args.curve), key=str.casefold)}))
    return 0


def cmd_inventory(args: argparse.Namespace) -> int:
    doc = json.dumps(build_inventory(), indent=2)
    if args.output:
        Path(args.output).write_text(doc, encoding="utf-8")
        print(f"wrote {args.output}")
    else:
        print(doc)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser("certalg")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_cls = sub.add_parser("classify")
    p_cls.add_argument("pem")
    p_cls.set_defaults(func=cmd_classify)

    p_algs = sub.add_parser("algs")
    p_algs.add_argument("key_algorithm")
    p_algs.set_defaults(func=cmd_algs)

    p_compat = sub.add_parser("compat")
    p_compat.add_argument("pem")
    p_compat.add_argument("--alg", required=True)
    p_compat.set_defaults(func=cmd_compat)

    p_norm = sub.add_parser("normalize")
    p_norm.add_argument("name")
    p_norm.set_defaults(func=cmd_normalize)

    p_curves = sub.add_parser("curves")
    p_curves.add_argument("--all", action="store_true", help="include disabled sources")
    p_curves.set_defaults(func=cmd_curves)

    p_oid = sub.add_parser("oid")
    p_oid.add_argument("curve")
    p_oid.set_defaults(func=cmd_oid)

    p_inv = sub.add_parser("inventory")
    p_inv.add_argument("--output")
    p_inv.set_defaults(func=cmd_inventory)

    args = p.parse_args(argv)
    try:
        return args.func(args)
    except (OSError, ValueError, TypeError, UnsupportedAlgorithm) as e:
        log.error("%s: %s", args.cmd, e)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
