#!/usr/bin/env python
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from hemodump.formats import FORMATS, decode_file
from hemodump.io.meshexport import save_stl
from hemodump.render.preview import PREVIEW_COUNT
from hemodump.render.report import Report
from hemodump.walker import DatasetWalker, read_record


def _preview_count(value: str) -> int:
    k = int(value)
    if k < 0:
        raise argparse.ArgumentTypeError("preview count must be >= 0")
    return k


def _ensure_parent(path: str | os.PathLike[str]) -> None:
    parent = Path(path).expanduser().parent
    if parent != Path('.'):
        parent.mkdir(parents=True, exist_ok=True)


def _write_or_print(text: str, out: str | None, tag: str) -> None:
    if out is None:
        sys.stdout.write(text)
        return
    _ensure_parent(out)
    Path(out).write_text(text, encoding="utf-8")
    print(f"[{tag}] wrote {out}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hemodump", description="Inspect 4D flow MRI dataset exports")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser("report", help="Summarize a whole dataset directory.")
    report_parser.add_argument("directory", help="Dataset directory (vessels are its subdirectories).")
    report_parser.add_argument("--out", default=None, help="Output text file (default: stdout).")
    report_parser.add_argument("--preview", type=_preview_count, default=PREVIEW_COUNT,
                               help="Leading elements shown per array.")

    show_parser = subparsers.add_parser("show", help="Summarize a single file.")
    show_parser.add_argument("path", help="Input file.")
    show_parser.add_argument("--format", required=True, choices=sorted(FORMATS), help="Record format of the file.")
    show_parser.add_argument("--out", default=None, help="Output text file (default: stdout).")
    show_parser.add_argument("--preview", type=_preview_count, default=PREVIEW_COUNT,
                             help="Leading elements shown per array.")

    stl_parser = subparsers.add_parser("stl", help="Export a vessel mesh file as STL.")
    stl_parser.add_argument("mesh", help="Input vessel mesh file.")
    stl_parser.add_argument("out", help="Output STL path.")

    return parser


def _run_report(args: argparse.Namespace) -> None:
    text = DatasetWalker(args.directory, preview=int(args.preview)).read_all()
    _write_or_print(text, args.out, "report")


def _run_show(args: argparse.Namespace) -> int:
    ok, report = read_record(args.path, args.format, Report(int(args.preview)), depth=0)
    _write_or_print(report.text(), args.out, "show")
    return 0 if ok else 1


def _run_stl(args: argparse.Namespace) -> None:
    mesh = decode_file(args.mesh, "mesh")
    _ensure_parent(args.out)
    save_stl(mesh, args.out)
    print(f"[stl] wrote {args.out} ({mesh.num_points} points, {mesh.num_triangles} triangles)")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "report":
        _run_report(args)
    elif args.command == "show":
        return _run_show(args)
    elif args.command == "stl":
        _run_stl(args)
    else:
        parser.error(f"Unknown command: {args.command}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
