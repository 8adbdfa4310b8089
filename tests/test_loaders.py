from blueprint.loaders import decode_upload, is_supported, load_upload
from blueprint.markdown import convert_ir_to_markdown
from blueprint.workspace import BlueprintWorkspace
from common.config import BlueprintConfig


def test_supported_types():
    for name in ("notes.txt", "README.MD", "chunks.json", "chunks.jsonl"):
        assert is_supported(name)
    assert not is_supported("scan.pdf")


def test_decode_upload():
    assert decode_upload("a.txt", "héllo".encode("utf-8")) == "héllo"
    assert decode_upload("a.txt", b"ok\xff") == "ok"
    assert decode_upload("photo.png", b"\x89PNG") is None


def test_load_upload(tmp_path):
    path = tmp_path / "persona.md"
    path.write_text("# Persona\nCalm.", encoding="utf-8")
    assert load_upload(path) == "# Persona\nCalm."
    assert load_upload(tmp_path / "missing.txt") is None
    assert load_upload(tmp_path / "data.bin") is None


def test_byte_order_mark_is_stripped():
    text = decode_upload("p.md", b"\xef\xbb\xbf# Persona\nBe concise.")
    assert convert_ir_to_markdown(text) == "# Persona\n> Be concise."


def test_byte_order_mark_never_reaches_compendium(tmp_path):
    path = tmp_path / "kb.txt"
    path.write_bytes(b"\xef\xbb\xbfFirst fact. Second fact.")
    ws = BlueprintWorkspace(config=BlueprintConfig())
    ws.append_upload("kcs", load_upload(path))
    assert "\ufeff" not in ws.blueprint.kcs_raw
    assert ws.chunks[0].content == "First fact. Second fact."
    assert ws.chunks[0].metadata.start_offset == 0
