import pytest

from lambpy import FrozenDict, obj


class User:
    def __init__(self, name, age):
        self.name = name
        self.age = age


@pytest.fixture
def user():
    return {"name": "jane", "login": {"user.name": "jdoe", "roles": ["admin", "dev"]}}


def test_enumerables():
    assert obj.enumerables({"a": 1, "b": 2}) == ["a", "b"]
    assert obj.enumerables(User("jane", 30)) == ["name", "age"]
    assert obj.enumerables(3) == []


@pytest.mark.parametrize(
    "source, key, expected",
    [
        ({"a": 1}, "a", 1),
        ({"a": 1}, "b", None),
        ([1, 2, 3], 1, 2),
        ([1, 2, 3], "-1", 3),
        ([1, 2, 3], "5", None),
        ([1, 2, 3], "--1", None),
        ("abc", 0, "a"),
        ([1, 2], True, None),
        ({True: "yes"}, True, "yes"),
    ],
)
def test_get_in(source, key, expected):
    assert obj.get_in(source, key) == expected


def test_get_in_reads_attributes():
    assert obj.get_in(User("jane", 30), "name") == "jane"
    assert obj.get_in(User("jane", 30), "email") is None
    assert obj.get_in(User("jane", 30), 1) is None


def test_get_key():
    assert obj.get_key("a")({"a": 1}) == 1
    assert list(map(obj.get_key(0), ["ab", "cd"])) == ["a", "c"]


def test_get_path(user):
    assert obj.get_path_in(user, "login.roles.1") == "dev"
    assert obj.get_path_in(user, "login/user.name", "/") == "jdoe"
    assert obj.get_path_in(user, "login.missing.deeper") is None
    assert obj.get_path("login.roles.-1")(user) == "dev"


def test_has():
    assert obj.has({"a": None}, "a")
    assert not obj.has({"a": 1}, "b")
    assert obj.has(User("jane", 30), "age")
    assert not obj.has(User("jane", 30), 3)
    assert obj.has_key("a")({"a": 1})
    assert obj.has_key_value("age", 30)(User("jane", 30))
    assert not obj.has_key_value("age", 31)({"age": 30})


def test_has_reads_sequence_indexes_like_get_in():
    assert obj.has([1, 2], 0)
    assert obj.has([1, 2], "-2")
    assert not obj.has([1, 2], 2)
    assert not obj.has([1, 2], "5")
    assert obj.has("abc", "upper")
    assert obj.pick([10, 20, 30], [0, "2", 5]) == {0: 10, "2": 30}


def test_make_and_from_pairs():
    assert obj.make(["a", "b", "c"], [1, 2]) == {"a": 1, "b": 2, "c": None}
    assert obj.make([], [1]) == {}
    assert obj.from_pairs([["a", 1], ("b", 2)]) == {"a": 1, "b": 2}


def test_merge_builds_a_new_dict():
    first = {"a": 1, "b": 2}
    merged = obj.merge(first, {"b": 3}, User("jane", 30))
    assert merged == {"a": 1, "b": 3, "name": "jane", "age": 30}
    assert first == {"a": 1, "b": 2}
    assert obj.merge() == {}


def test_pairs_values_and_tear():
    source = {"a": 1, "b": 2}
    assert obj.pairs(source) == [["a", 1], ["b", 2]]
    assert obj.values(source) == [1, 2]
    assert obj.tear(source) == [["a", "b"], [1, 2]]
    assert obj.from_pairs(obj.pairs(source)) == source
    assert obj.values(User("jane", 30)) == ["jane", 30]


def test_pick_and_skip():
    source = {"a": 1, "b": None, "c": 3}
    assert obj.pick(source, ["a", "b", "z"]) == {"a": 1, "b": None}
    assert obj.skip(source, ["a"]) == {"b": None, "c": 3}
    assert obj.pick_if(lambda value: value is not None)(source) == {"a": 1, "c": 3}
    assert obj.skip_if(lambda value: value is not None)(source) == {"b": None}
    assert obj.pick(User("jane", 30), ["age"]) == {"age": 30}


def test_set_in_leaves_source_untouched():
    source = {"name": "John", "age": 30}
    assert obj.set_in(source, "age", 40) == {"name": "John", "age": 40}
    assert obj.set_key("email", "j@example.com")(source)["email"] == "j@example.com"
    assert source == {"name": "John", "age": 30}


def test_immutable_freezes_deeply(user):
    frozen = obj.immutable(user)
    assert isinstance(frozen, FrozenDict)
    with pytest.raises(TypeError):
        frozen["login"]["roles"].append("root")
