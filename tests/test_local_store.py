import orjson

from blueprint.document_models import Blueprint
from blueprint.workspace import BlueprintWorkspace, blueprint_state
from common.config import BlueprintConfig
from persistence.local_store import JsonFileStore, KeyValueStore, MemoryStore, PersistentState

KEY = "agentic-blueprint:v1"


class FailingStore(MemoryStore):
    def save(self, key, raw):
        raise OSError("disk full")


def test_stores_satisfy_protocol(tmp_path):
    assert isinstance(MemoryStore(), KeyValueStore)
    assert isinstance(JsonFileStore(tmp_path), KeyValueStore)


def test_missing_value_loads_default_and_sets_ready():
    state = blueprint_state(MemoryStore(), KEY)
    assert not state.ready
    assert state.load() == Blueprint(kcs_format="json", chunk_size=600)
    assert state.ready


def test_blueprint_survives_a_save_and_reload():
    store = MemoryStore()
    ws = BlueprintWorkspace(config=BlueprintConfig())
    ws.update_ir("Persona\nWarm.")
    ws.update_kcs("Facts matter. Sources too.")

    state = blueprint_state(store, KEY)
    state.load()
    assert state.save(ws.blueprint)

    assert blueprint_state(store, KEY).load() == ws.blueprint


def test_corrupt_record_is_discarded():
    store = MemoryStore({KEY: "{not json"})
    state = blueprint_state(store, KEY)
    assert state.load() == Blueprint()
    assert store.load(KEY) is None


def test_incompatible_record_is_discarded():
    store = MemoryStore({KEY: orjson.dumps({"kcsFormat": "xml"}).decode()})
    assert blueprint_state(store, KEY).load() == Blueprint()
    assert store.load(KEY) is None


def test_write_failure_is_reported_not_raised():
    state = blueprint_state(FailingStore(), KEY)
    state.load()
    assert state.save(Blueprint(ir_raw="x")) is False


def test_no_write_before_first_load():
    store = MemoryStore({KEY: orjson.dumps(Blueprint(ir_raw="kept").to_record()).decode()})
    state = blueprint_state(store, KEY)
    assert state.save(Blueprint()) is False
    assert state.load().ir_raw == "kept"


def test_json_file_store(tmp_path):
    store = JsonFileStore(tmp_path / "state")
    assert store.load(KEY) is None
    assert store.save(KEY, '{"a": 1}')
    assert (tmp_path / "state" / "agentic-blueprint_v1.json").exists()
    assert store.load(KEY) == '{"a": 1}'
    store.remove(KEY)
    assert store.load(KEY) is None
    store.remove(KEY)


def test_generic_state_with_plain_values():
    store = MemoryStore()
    state = PersistentState(store, "counts", default=dict)
    assert state.load() == {}
    state.save({"a": 1})
    assert PersistentState(store, "counts", default=dict).load() == {"a": 1}


def test_file_store_keys_that_sanitize_alike_share_a_file(tmp_path):
    store = JsonFileStore(tmp_path)
    store.save("agentic-blueprint:v1", "{}")
    assert [p.name for p in tmp_path.iterdir()] == ["agentic-blueprint_v1.json"]
    assert store.load("agentic-blueprint_v1") == "{}"
    assert store.load("agentic-matrix:v1") is None
