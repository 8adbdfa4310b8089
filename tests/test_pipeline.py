import orjson

from blueprint.pipeline import chunk, serialize, to_markdown


def test_end_to_end_pipeline():
    # 1. Instructional ruleset -> Markdown
    ir = "# Persona\nBe concise.\n\nRule One"
    assert to_markdown(ir) == "# Persona\n> Be concise.\n\n## Rule One"
    assert to_markdown("") == ""

    # 2. Knowledge compendium -> chunks
    kcs = (
        "Machine learning is great. Deep learning is a subset of machine learning. "
        "Transformers changed natural language processing. Attention weighs tokens."
    )
    chunks = chunk(kcs, 80)
    assert len(chunks) > 1
    assert chunk("", 80) == []
    assert chunk(kcs, 80) == chunks

    # 3. Export
    lines = serialize(chunks, "jsonl").split("\n")
    assert len(lines) == len(chunks)
    doc = orjson.loads(serialize(chunks, "json"))
    assert [c["content"] for c in doc["chunks"]] == [c.content for c in chunks]
    assert "learning" in chunks[0].metadata.keywords
