"""Signpost loader: reads the static "Helpful resources" table from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from wellcheck.core.text.segments import Segment, labelled

logger = logging.getLogger(__name__)

SIGNPOST_FILE = Path(__file__).resolve().parent / "signposts.yaml"


@dataclass(frozen=True)
class SignpostTable:
    signposts: dict[str, str]
    plan_smoking: str
    plan_alcohol: str
    plan_general: tuple[str, ...]
    safety_net: str


def load_signpost_file(path: Path) -> SignpostTable:
    """Parse a signpost YAML file."""
    with open(path) as f:
        data: dict[str, Any] = yaml.safe_load(f)

    plan = data.get("plan_resources", {})
    table = SignpostTable(
        signposts={key: text.strip() for key, text in data["signposts"].items()},
        plan_smoking=plan["smoking"].strip(),
        plan_alcohol=plan["alcohol"].strip(),
        plan_general=tuple(text.strip() for text in plan.get("general", [])),
        safety_net=plan["safety_net"].strip(),
    )
    logger.info("Loaded %d signposts from %s", len(table.signposts), path)
    return table


@lru_cache(maxsize=1)
def signpost_table() -> SignpostTable:
    return load_signpost_file(SIGNPOST_FILE)


def signpost_text(key: str) -> str:
    return signpost_table().signposts[key]


def signpost(key: str) -> Segment:
    """The closing ``Helpful resources:`` segment for a topic."""
    return labelled("Helpful resources", signpost_text(key))
