from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from . import config as CFG
from .models import CorpusData

log = logging.getLogger(__name__)


class CorpusLoadError(RuntimeError):
    """The corpus could not be fetched or decoded; raised before any analysis runs."""


def list_presets() -> List[str]:
    """Preset corpus names, in display order."""
    return list(CFG.PRESET_CORPORA)


def _preset_path(name: str, corpus_dir: Optional[Union[str, Path]]) -> Path:
    if name not in CFG.PRESET_CORPORA:
        raise CorpusLoadError(f"Unknown preset corpus {name!r}")
    root = Path(corpus_dir) if corpus_dir is not None else CFG.CORPUS_DIR
    return root / name


def _decode(data: bytes, name: str) -> str:
    try:
        return data.decode(CFG.READ_ENCODING)
    except UnicodeDecodeError as exc:
        raise CorpusLoadError(f"Failed to read {name!r} as {CFG.READ_ENCODING} text: {exc}") from exc


def load_path(path: Union[str, Path], *, name: Optional[str] = None, is_custom: bool = True) -> CorpusData:
    """Read a whole text file into memory."""
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise CorpusLoadError(f"Error loading corpus {str(p)!r}: {exc}") from exc
    text = _decode(data, p.name)
    log.info("Loaded %s (%d chars)", p, len(text))
    return CorpusData(name=name or p.name, text=text, is_custom=is_custom)


def load_preset(name: str, corpus_dir: Optional[Union[str, Path]] = None) -> CorpusData:
    """Load one of PRESET_CORPORA from the corpus directory."""
    path = _preset_path(name, corpus_dir)
    if not path.is_file():
        raise CorpusLoadError(f"Error loading preset corpus {name!r}: {path} not found")
    log.info("Loading preset %s from %s", name, os.path.dirname(path))
    return load_path(path, name=name, is_custom=False)


def load_custom(data: Union[bytes, str], name: str = CFG.CUSTOM_CORPUS_NAME) -> CorpusData:
    """Wrap user supplied text (an upload or a pasted string)."""
    text = data.removeprefix("\ufeff") if isinstance(data, str) else _decode(data, name)
    log.info("Loaded custom corpus %s (%d chars)", name, len(text))
    return CorpusData(name=name, text=text, is_custom=True)
