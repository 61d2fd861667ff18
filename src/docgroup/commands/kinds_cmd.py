"""List every entity kind with its singular and plural label."""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from docgroup.grouping import get_kind_plural, get_kind_singular
from docgroup.models import EntityKind


def run(args: Namespace) -> None:
    """Run the kinds command."""
    rows = [
        {"kind": kind.value, "singular": get_kind_singular(kind), "plural": get_kind_plural(kind)}
        for kind in EntityKind
    ]
    if getattr(args, "format", "text") == "json":
        json.dump(rows, sys.stdout, indent=2)
        print()
        return
    width = max(len(row["kind"]) for row in rows)
    for row in rows:
        print(f"{row['kind']:<{width}}  {row['singular']} / {row['plural']}")
