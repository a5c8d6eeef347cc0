import datetime
import enum
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import chz
import pytest
from pydantic import BaseModel, ValidationError

from tomlquery import (
    ConversionFailure,
    DocumentSerializer,
    NotFound,
    Partial,
    insert_serialized,
    read,
    read_deserialized,
    read_partial,
    set_serialized,
)
from tomlquery.serialization import location_of
from tomlquery.serialization.serializer import _type_adapter

DOCUMENT = """
title = "demo"

[server]
host = "localhost"
port = 8080

[[servers]]
host = "alpha"
port = 1

[[servers]]
host = "beta"
port = 2

[broken]
host = "nowhere"
port = "not a number"
"""


class Server(BaseModel):
    LOCATION: ClassVar[str] = "server"

    host: str
    port: int


class Owner(BaseModel):
    name: str
    email: str | None = None
    since: datetime.date | None = None


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


@dataclass(frozen=True)
class Retry:
    attempts: int
    backoff: float = 0.5


@dataclass
class Job:
    name: str
    color: Color
    retries: list[Retry] = field(default_factory=list)
    workdir: Path | None = None


@chz.chz
class Limits:
    connections: int = chz.field()
    timeout: float = chz.field(default=1.5)


@pytest.fixture()
def doc() -> dict:
    return tomllib.loads(DOCUMENT)


def test_read_partial_uses_declared_location(doc: dict) -> None:
    assert read_partial(doc, Server) == Server(host="localhost", port=8080)


def test_read_partial_with_explicit_path(doc: dict) -> None:
    assert read_partial(doc, Server, "servers.[1]") == Server(host="beta", port=2)
    assert read_deserialized(doc, "servers.[0]", Server).host == "alpha"


def test_read_partial_generic_targets(doc: dict) -> None:
    servers = read_partial(doc, list[Server], "servers")

    assert [server.port for server in servers] == [1, 2]
    assert read_partial(doc, str, "title") == "demo"


def test_read_partial_requires_location_or_path(doc: dict) -> None:
    assert isinstance(Server, Partial)
    assert location_of(Server) == "server"

    with pytest.raises(TypeError):
        read_partial(doc, Owner)


def test_read_partial_resolution_errors_are_not_conversion_errors(doc: dict) -> None:
    with pytest.raises(NotFound):
        read_partial(doc, Server, "missing")


def test_read_partial_conversion_failure(doc: dict) -> None:
    with pytest.raises(ConversionFailure) as excinfo:
        read_partial(doc, Server, "broken")

    assert isinstance(excinfo.value.inner, ValidationError)
    assert excinfo.value.__cause__ is excinfo.value.inner


def test_pydantic_round_trip_drops_none_fields() -> None:
    doc: dict = {}
    owner = Owner(name="Tom", since=datetime.date(1979, 5, 27))

    assert insert_serialized(doc, "owner", owner) is True
    assert doc == {"owner": {"name": "Tom", "since": datetime.date(1979, 5, 27)}}
    assert read_partial(doc, Owner, "owner") == owner


def test_insert_serialized_reports_created(doc: dict) -> None:
    assert insert_serialized(doc, "server", Server(host="example", port=1)) is False
    assert insert_serialized(doc, "backup.server", Server(host="b", port=2)) is True
    assert read(doc, "backup.server.port") == 2


def test_dataclass_round_trip() -> None:
    doc: dict = {}
    job = Job(
        name="build",
        color=Color.BLUE,
        retries=[Retry(attempts=3), Retry(attempts=5, backoff=2.0)],
        workdir=Path("/tmp/build"),
    )

    insert_serialized(doc, "jobs.build", job)

    assert doc["jobs"]["build"] == {
        "name": "build",
        "color": "blue",
        "retries": [
            {"attempts": 3, "backoff": 0.5},
            {"attempts": 5, "backoff": 2.0},
        ],
        "workdir": "/tmp/build",
    }
    assert read_partial(doc, Job, "jobs.build") == job


def test_chz_round_trip() -> None:
    doc: dict = {}
    limits = Limits(connections=10)

    insert_serialized(doc, "limits", limits)

    assert doc == {"limits": {"connections": 10, "timeout": 1.5}}
    restored = read_partial(doc, Limits, "limits")
    assert isinstance(restored, Limits)
    assert (restored.connections, restored.timeout) == (10, 1.5)


def test_chz_defaults_and_lists() -> None:
    doc = {"pools": [{"connections": 1}, {"connections": 2, "timeout": 3.0}]}

    pools = read_partial(doc, list[Limits], "pools")

    assert [(pool.connections, pool.timeout) for pool in pools] == [
        (1, 1.5),
        (2, 3.0),
    ]


def test_chz_missing_and_unexpected_fields() -> None:
    with pytest.raises(ConversionFailure):
        read_partial({"limits": {"timeout": 1.0}}, Limits, "limits")
    with pytest.raises(ConversionFailure):
        read_partial({"limits": {"connections": 1, "extra": 2}}, Limits, "limits")


def test_insert_serialized_failure_leaves_document_unchanged() -> None:
    doc: dict = {"a": 1}

    with pytest.raises(ConversionFailure):
        insert_serialized(doc, "b.c", object())
    with pytest.raises(ConversionFailure):
        insert_serialized(doc, "b.c", [1, None])
    with pytest.raises(ConversionFailure):
        insert_serialized(doc, "b.c", {1: "a"})

    assert doc == {"a": 1}


def test_set_serialized_returns_previous(doc: dict) -> None:
    previous = set_serialized(doc, "server", Server(host="new", port=1))

    assert previous == {"host": "localhost", "port": 8080}
    assert read_partial(doc, Server) == Server(host="new", port=1)


def test_to_value_normalizes_python_types() -> None:
    assert DocumentSerializer.to_value((1, 2)) == [1, 2]
    assert DocumentSerializer.to_value(Color.RED) == "red"
    assert DocumentSerializer.to_value(Path("a/b")) == "a/b"
    assert DocumentSerializer.to_value({"a": None, "b": 1}) == {"b": 1}
    assert DocumentSerializer.to_value(datetime.time(7, 32)) == datetime.time(7, 32)


def test_serialize_rejects_none() -> None:
    with pytest.raises(ConversionFailure):
        DocumentSerializer.serialize(None)


def test_type_adapter_cache_is_bounded() -> None:
    DocumentSerializer.deserialize([1, 2], list[int])

    info = _type_adapter.cache_info()
    assert info.maxsize == 256
    assert info.currsize >= 1
