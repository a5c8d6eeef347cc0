from __future__ import annotations

import sys
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel

import tomlquery


class Project(BaseModel):
    LOCATION: ClassVar[str] = "project"

    name: str
    version: str
    dependencies: list[str] = []


def main() -> None:
    tomlquery.configure_logging("DEBUG")

    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("pyproject.toml")
    with path.open("rb") as fp:
        doc = tomlquery.Document.load(fp)

    project = doc.read_partial(Project)
    print("project:", project.name, project.version)
    print("dependencies:", ", ".join(project.dependencies) or "-")

    doc.insert("tool.example.checked", True)
    print("first dependency:", doc.get("project.dependencies.[0]", "-"))
    print("tool tables:", sorted(doc.read("tool")))


if __name__ == "__main__":
    main()
