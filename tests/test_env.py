from oiiashell.env import Environment


def sample():
    return Environment.from_strings(["HOME=/home/user", "SHELL=/bin/sh", "LANG=C"])


def test_from_strings_order_and_values():
    env = sample()
    assert env.items() == [("HOME", "/home/user"), ("SHELL", "/bin/sh"), ("LANG", "C")]
    assert list(env) == ["HOME", "SHELL", "LANG"]
    assert len(env) == 3


def test_from_strings_keeps_second_field_only():
    env = Environment.from_strings(["A=b=c"])
    assert env.get("A") == "b"


def test_from_strings_without_value():
    env = Environment.from_strings(["EMPTY=", "BARE"])
    assert env.get("EMPTY") is None
    assert env.get("BARE") is None
    assert len(env) == 2


def test_from_strings_skips_entries_without_fields():
    env = Environment.from_strings(["", "=", "X=1"])
    assert list(env) == ["X"]


def test_get_missing_and_none_key():
    env = sample()
    assert env.get("NOPE") == ""
    assert env.get(None) == ""


def test_get_requires_exact_key():
    env = sample()
    assert env.get("HOM") == ""
    assert env.get("HOMEX") == ""


def test_set_existing_keeps_position():
    env = sample()
    env.set("SHELL", "/bin/zsh")
    assert list(env) == ["HOME", "SHELL", "LANG"]
    assert env.get("SHELL") == "/bin/zsh"


def test_set_new_appends():
    env = sample()
    env.set("EDITOR", "vi")
    assert list(env)[-1] == "EDITOR"
    assert env.get("EDITOR") == "vi"
    assert len(env) == 4


def test_add_allows_duplicates_and_get_returns_first():
    env = Environment()
    env.add("K", "first")
    env.add("K", "second")
    assert len(env) == 2
    assert env.get("K") == "first"


def test_remove_drops_all_matches():
    env = Environment([("K", "1"), ("J", "2"), ("K", "3")])
    env.remove("K")
    assert env.items() == [("J", "2")]


def test_remove_missing_is_noop():
    env = sample()
    before = env.items()
    env.remove("NOPE")
    env.remove("HOM")
    assert env.items() == before


def test_set_then_remove_round_trip():
    env = sample()
    before = env.items()
    env.set("TMP", "x")
    env.remove("TMP")
    assert env.items() == before