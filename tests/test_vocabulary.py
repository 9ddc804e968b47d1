import json

from wordmonster.models import WordPair
from wordmonster.vocabulary import WordStore


def _write(path, content):
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_load_json_records(tmp_path):
    path = _write(
        tmp_path / "words.json",
        json.dumps(
            [{"en": "cat", "zh": "猫"}, {"en": " Dog ", "zh": "狗"}],
            ensure_ascii=False,
        ),
    )
    store = WordStore(path)
    store.load_all()

    assert store.words == (WordPair(en="cat", zh="猫"), WordPair(en="Dog", zh="狗"))
    assert store.words[1].key == "dog"
    assert len(store) == 2


def test_load_csv(tmp_path):
    path = _write(tmp_path / "words.csv", "en,zh\ncat,猫\nbird,\nfish,鱼\n")
    store = WordStore(path)
    store.load_all()

    assert [w.en for w in store] == ["cat", "fish"]


def test_missing_file_yields_empty_store(tmp_path):
    store = WordStore(str(tmp_path / "nope.json"))
    assert store.load_all() == ()


def test_malformed_json_yields_empty_store(tmp_path):
    path = _write(tmp_path / "words.json", "[{\"en\": \"cat\",")
    store = WordStore(path)
    assert store.load_all() == ()


def test_non_text_values_are_dropped(tmp_path):
    path = _write(
        tmp_path / "words.json",
        json.dumps(
            [
                {"en": {"a": 1}, "zh": [1, 2]},
                {"en": "cat", "zh": 7},
                {"en": "dog", "zh": "狗"},
            ],
            ensure_ascii=False,
        ),
    )
    store = WordStore(path)
    assert store.load_all() == (WordPair(en="dog", zh="狗"),)


def test_only_non_text_values_yields_empty_store(tmp_path):
    path = _write(tmp_path / "words.json", json.dumps([{"en": 1, "zh": 2}]))
    assert WordStore(path).load_all() == ()


def test_missing_columns_yields_empty_store(tmp_path):
    path = _write(
        tmp_path / "words.json", json.dumps([{"word": "Hund", "translation": "dog"}])
    )
    store = WordStore(path)
    assert store.load_all() == ()


def test_empty_list_yields_empty_store(tmp_path):
    path = _write(tmp_path / "words.json", "[]")
    assert WordStore(path).load_all() == ()


def test_reload_replaces_previous_words(tmp_path):
    path = tmp_path / "words.json"
    _write(path, json.dumps([{"en": "cat", "zh": "猫"}], ensure_ascii=False))
    store = WordStore(str(path))
    store.load_all()

    path.unlink()
    store.load_all()
    assert store.words == ()


def test_in_memory_words_are_immutable_tuple():
    store = WordStore(words=[WordPair(en="cat", zh="猫")])
    assert isinstance(store.words, tuple)
