from __future__ import annotations
import argparse, json, sys
from dataclasses import asdict

from corpus_explorer import config as CFG
from corpus_explorer.engine import Explorer
from corpus_explorer.export import format_frequency
from corpus_explorer.loader import CorpusLoadError
from corpus_explorer.models import FilterSettings, SearchSettings


def _print_table(view) -> None:
    if not view.rows:
        print("(no entries)"); return
    label = CFG.SEQUENCE_LABELS[view.ngram_type]
    print(f"{'Rank':<6} {label:<24} {'Counts':>10} {'Frequency':>10}")
    for r in view.rows:
        seq = f'"{r.sequence}"'
        print(f"{r.rank:<6} {seq:<24} {r.frequency:>10,} {format_frequency(r.frequency, view.total) + '%':>10}")
    s = view.stats
    line = f"Total: {s.total:,}"
    if s.has_filters:
        line += f"  Displayed: {s.displayed:,}  {s.percentage:.3f}%"
    print(line)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Corpus n-gram explorer (CLI)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--file", help="Text file to analyze")
    src.add_argument("--preset", choices=list(CFG.PRESET_CORPORA), help="Preset corpus name")
    src.add_argument("--serve", action="store_true", help="Run the Flask service instead")

    p.add_argument("--corpus-dir", default=None, help="Folder holding the preset corpora")
    p.add_argument("--type", default=CFG.DEFAULT_NGRAM_TYPE, choices=list(CFG.NGRAM_TYPES))
    p.add_argument("--keep-whitespace", action="store_true", help="Do not drop sequences with whitespace")
    p.add_argument("--filter-punctuation", action="store_true")
    p.add_argument("--case-sensitive", action="store_true", help="Do not collapse case")
    p.add_argument("--search", default="", help="Only show sequences matching this text")
    p.add_argument("--regex", action="store_true", help="Treat --search as a regular expression")
    p.add_argument("--limit", type=int, default=CFG.DEFAULT_LIMIT, help="Show at most N rows (0 = all)")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--csv", default=None, help="Write the displayed table to this CSV path")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.serve:
        from .web import main as serve
        web_args = ["--host", args.host, "--port", str(args.port)]
        if args.corpus_dir:
            web_args += ["--corpus-dir", args.corpus_dir]
        if args.verbose:
            web_args.append("--verbose")
        return serve(web_args)

    if args.limit < 0:
        p.error("--limit must be >= 0")

    ex = Explorer(corpus_dir=args.corpus_dir, verbose=args.verbose)
    ex.set_filters(FilterSettings(
        filter_whitespace=not args.keep_whitespace,
        filter_punctuation=args.filter_punctuation,
        case_sensitive=args.case_sensitive,
    ))
    ex.set_search(SearchSettings(query=args.search, use_regex=args.regex, limit=args.limit))
    ex.set_type(args.type)

    try:
        if args.file:
            ex.load_file(args.file)
        else:
            ex.load_preset(args.preset)
    except CorpusLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    view = ex.view()
    if view.regex_error:
        print(f"warning: invalid regex ({view.regex_error}); nothing matches", file=sys.stderr)

    if args.csv:
        _, body = ex.export_csv()
        with open(args.csv, "w", encoding=CFG.ENCODING, newline="") as f:
            f.write(body)

    if args.json:
        print(json.dumps({
            "type": view.ngram_type,
            "rows": [asdict(r) for r in view.rows],
            "total": view.total,
            "stats": asdict(view.stats),
        }, ensure_ascii=False, indent=2))
    else:
        _print_table(view)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
