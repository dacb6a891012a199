from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
import json
import os
from pathlib import Path

WORDNET_ENV = "WORDNET_PATH"


@dataclass
class SummaryConfig:
    name: str = "summary"
    wordnet_path: Optional[str] = None  # extra nltk data dir holding corpora/wordnet
    default_sentences: int = 3
    max_text_chars: int = 1_000_000
    user_agent: str = "SummaryCLI/0.1"
    timeout_s: float = 20.0
    content_selector: Optional[str] = None  # CSS selector for fetched pages
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SummaryConfig":
        # Simple dict→dataclass conversion; env fills what the file leaves unset
        return SummaryConfig(
            name=data.get("name", "summary"),
            wordnet_path=data.get("wordnet_path") or os.environ.get(WORDNET_ENV) or None,
            default_sentences=int(data.get("default_sentences", 3)),
            max_text_chars=int(data.get("max_text_chars", 1_000_000)),
            user_agent=data.get("user_agent", "SummaryCLI/0.1"),
            timeout_s=float(data.get("timeout_s", 20.0)),
            content_selector=data.get("content_selector"),
            host=data.get("host", "127.0.0.1"),
            port=int(data.get("port", 8000)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    @staticmethod
    def load(path: Optional[Path] = None) -> "SummaryConfig":
        if path is None:
            return SummaryConfig.from_dict({})
        return SummaryConfig.from_dict(json.loads(Path(path).read_text()))

    @staticmethod
    def load_json_str(s: str) -> "SummaryConfig":
        return SummaryConfig.from_dict(json.loads(s))

    def dump(self) -> str:
        return json.dumps(asdict(self), indent=2)


def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(SummaryConfig().dump())
