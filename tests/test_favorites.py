import json

from models import ApartmentData
from services.favorites import SavedPropertyStore


def analysis(score=7.2):
    return {"score": score, "label": "Underpriced", "explanation": "Yaxshi bitim"}


def test_empty_store():
    assert SavedPropertyStore({}).load() == []


def test_save_and_reload(listing):
    backend = {}
    store = SavedPropertyStore(backend)
    record = store.save(ApartmentData.model_validate(listing()), analysis(), now_ms=1700000000000)

    assert record["id"] == "1700000000000"
    assert record["timestamp"] == 1700000000000
    assert record["propertyType"] == "sale"
    assert record["totalFloors"] == 9
    assert record["analysis"] == analysis()

    # stored verbatim as a JSON string under one key
    assert json.loads(backend["savedProperties"]) == [record]
    assert SavedPropertyStore(backend).load() == [record]


def test_keeps_ten_most_recent(listing):
    store = SavedPropertyStore({})
    data = ApartmentData.model_validate(listing())

    for i in range(1, 13):
        store.save(data, analysis(score=i), now_ms=i)

    saved = store.load()
    assert len(saved) == 10
    assert [r["id"] for r in saved] == [str(i) for i in range(3, 13)]


def test_delete(listing):
    store = SavedPropertyStore({})
    data = ApartmentData.model_validate(listing())
    store.save(data, analysis(), now_ms=1)
    store.save(data, analysis(), now_ms=2)

    assert store.delete("1") is True
    assert [r["id"] for r in store.load()] == ["2"]
    assert store.delete("1") is False
