import orjson
import pytest

from blueprint.chunkers import chunk_kcs
from blueprint.payload import parse_chunks, serialize_chunks

TEXT = (
    "Chunking keeps retrieval focused. Metadata travels with every chunk. "
    "Keywords help humans scan the index. Offsets locate the source span."
)


@pytest.fixture
def chunks():
    return chunk_kcs(TEXT, 60)


def test_jsonl_has_one_parseable_record_per_line(chunks):
    payload = serialize_chunks(chunks, "jsonl")
    lines = payload.split("\n")
    assert len(lines) == len(chunks) > 1
    for line, chunk in zip(lines, chunks):
        assert orjson.loads(line) == chunk.to_record()


def test_json_is_a_single_indented_document(chunks):
    payload = serialize_chunks(chunks, "json")
    assert payload.startswith('{\n  "chunks": [\n')
    doc = orjson.loads(payload)
    assert list(doc) == ["chunks"]
    assert doc["chunks"] == [c.to_record() for c in chunks]


def test_records_use_wire_field_names(chunks):
    record = orjson.loads(serialize_chunks(chunks[:1], "jsonl"))
    assert set(record) == {"id", "chunkIndex", "content", "tokenEstimate", "metadata"}
    assert set(record["metadata"]) == {"startOffset", "endOffset", "keywords"}


@pytest.mark.parametrize("fmt", ["json", "jsonl"])
def test_parse_round_trips(chunks, fmt):
    assert parse_chunks(serialize_chunks(chunks, fmt), fmt) == chunks


def test_empty_collections():
    assert serialize_chunks([], "jsonl") == ""
    assert orjson.loads(serialize_chunks([], "json")) == {"chunks": []}


def test_unknown_format_is_rejected(chunks):
    with pytest.raises(ValueError):
        serialize_chunks(chunks, "csv")
