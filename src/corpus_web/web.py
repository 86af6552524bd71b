from __future__ import annotations
import argparse
import logging
import threading
from dataclasses import asdict

from flask import Flask, Response, jsonify, request

from corpus_explorer import config as CFG
from corpus_explorer.engine import Explorer, NoCorpusError, TableView
from corpus_explorer.loader import CorpusLoadError, list_presets

log = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = CFG.MAX_UPLOAD_BYTES
_explorer: Explorer | None = None
# one Explorer per process; requests take turns on it
_lock = threading.Lock()


def get_explorer() -> Explorer:
    global _explorer
    if _explorer is None:
        _explorer = Explorer()
    return _explorer


def _view_payload(ex: Explorer, v: TableView) -> dict:
    analysis = ex.analysis
    corpus = ex.state.corpus
    return {
        "corpus": corpus.name if corpus else None,
        "type": v.ngram_type,
        "label": v.label,
        "rows": [asdict(r) for r in v.rows],
        "total": v.total,
        "stats": asdict(v.stats),
        "regex_error": v.regex_error,
        "totals": analysis.totals.as_dict() if analysis else {},
        "state": ex.to_query(),
    }


# ---------- errors ----------
@app.errorhandler(CorpusLoadError)
def _on_load_error(exc: CorpusLoadError):
    log.warning("Corpus load failed: %s", exc)
    return jsonify({"error": str(exc)}), 404


@app.errorhandler(NoCorpusError)
def _on_no_corpus(exc: NoCorpusError):
    return jsonify({"error": str(exc)}), 409


@app.errorhandler(ValueError)
def _on_bad_value(exc: ValueError):
    return jsonify({"error": str(exc)}), 400


# ---------- API ----------
@app.get("/health")
def health():
    ex = get_explorer()
    corpus = ex.state.corpus
    return jsonify({"ok": True, "corpus": corpus.name if corpus else None})


@app.get("/api/presets")
def api_presets():
    return jsonify(list_presets())


@app.post("/api/analyze")
def api_analyze():
    """Analyze uploaded text (multipart 'file' or JSON {"text": ...}); query string carries the state."""
    upload = request.files.get("file")
    body = None
    if upload is None:
        body = request.get_json(silent=True) or {}
        if not isinstance(body.get("text"), str):
            raise ValueError("expected a 'file' upload or a JSON body with a 'text' string")

    with _lock:
        ex = get_explorer()
        # the request brings its own text, so a ?corpus=<preset> is not loaded
        ex.from_query(request.args, load_corpus=False)
        if upload is not None:
            ex.load_text(upload.read(), name=upload.filename or CFG.CUSTOM_CORPUS_NAME)
        else:
            ex.load_text(body["text"], name=body.get("name") or CFG.CUSTOM_CORPUS_NAME)
        return jsonify(_view_payload(ex, ex.view()))


@app.get("/api/analyze")
def api_analyze_preset():
    """Rebuild state from the query string (loading ?corpus=<preset>) and return the selected table."""
    with _lock:
        ex = get_explorer()
        ex.from_query(request.args)
        return jsonify(_view_payload(ex, ex.view()))


@app.get("/api/export")
def api_export():
    """CSV of the table the query string selects, over the last loaded corpus."""
    with _lock:
        ex = get_explorer()
        ex.from_query(request.args)
        filename, body = ex.export_csv(request.args.get("type", None, type=str))
    return Response(
        body,
        mimetype="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/api/state")
def api_state():
    """Canonical locator for the query string (defaults dropped)."""
    with _lock:
        ex = get_explorer()
        ex.from_query(request.args)
        return jsonify({"query": ex.to_query()})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the corpus explorer JSON service")
    ap.add_argument("--corpus-dir", default=None, help="Folder holding the preset corpora")
    ap.add_argument("--preset", default=None, help="Preset to load at startup")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _explorer
    _explorer = Explorer(corpus_dir=args.corpus_dir, verbose=args.verbose)
    if args.preset:
        _explorer.load_preset(args.preset)

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
