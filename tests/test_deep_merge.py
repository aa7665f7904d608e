from namecombo.config import deep_merge_dicts


def test_deep_merge_dicts() -> None:
    a = {"locale": "en-US", "logging": {"level": "WARNING"}, "case": "nominative"}
    b = {"logging": {"level": "DEBUG"}, "locale": "de-DE"}
    merged = deep_merge_dicts(a, b)
    assert merged["logging"]["level"] == "DEBUG"
    assert merged["locale"] == "de-DE"
    assert merged["case"] == "nominative"
    assert a["logging"]["level"] == "WARNING"


def test_non_dict_replaces_dict() -> None:
    assert deep_merge_dicts({"logging": {"level": "INFO"}}, {"logging": None}) == {
        "logging": None
    }
