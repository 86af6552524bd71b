"""CLI and Flask service on top of corpus_explorer.Explorer."""
