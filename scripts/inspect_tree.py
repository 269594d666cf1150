"""
Inspect a Babel JSON dump of a JSX file.

    python scripts/inspect_tree.py elements tree.json --name Button
    python scripts/inspect_tree.py dump tree.json
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich import print
from rich.table import Table
from typer import Typer

from jsx_lib import (
    dump,
    find_elements,
    from_dict,
    get_attributes,
    get_attribute_name,
    get_children_names,
    get_element_name,
    set_debug,
)
from jsx_lib.nodes import Node

app = Typer()


def load_tree(path: Path) -> Node:
    return from_dict(json.loads(path.read_text()))


@app.command()
def elements(
    path: Path,
    name: Annotated[str, typer.Option(help="Only elements with this name")] = "",
    debug: bool = False,
):
    set_debug(debug)
    table = Table("element", "attributes", "children")
    for element in find_elements(load_tree(path), name):
        table.add_row(
            get_element_name(element),
            " ".join(get_attribute_name(attr) for attr in get_attributes(element)),
            " ".join(get_children_names(element)),
        )
    print(table)


@app.command("dump")
def dump_tree(path: Path, indent: int = 2):
    print(dump(load_tree(path), indent=indent))


if __name__ == "__main__":
    app()
