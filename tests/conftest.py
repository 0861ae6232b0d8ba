"""Conformance fixture loader for meshroute.

Loads YAML fixtures from tests/fixtures/. Each document holds a route spec
in config form and either the expected compiled ``to_dict()`` output
(``expect``) or the name of the error compile must raise (``error``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class RouteFixtureCase:
    """A single compile case from a conformance fixture."""

    fixture_file: str
    name: str
    spec: dict[str, Any]
    expect: dict[str, Any] | None
    error: str | None


def load_route_fixtures() -> list[RouteFixtureCase]:
    """Load every fixture document under tests/fixtures/."""
    cases: list[RouteFixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[RouteFixtureCase]:
    cases: list[RouteFixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            if ("expect" in doc) == ("error" in doc):
                msg = f"{path.name}:{doc.get('name')}: exactly one of 'expect' or 'error'"
                raise ValueError(msg)
            cases.append(
                RouteFixtureCase(
                    fixture_file=path.name,
                    name=doc["name"],
                    spec=doc["spec"],
                    expect=doc.get("expect"),
                    error=doc.get("error"),
                )
            )
    return cases
