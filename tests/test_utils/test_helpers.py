import pytest

from electrode._utils import _component_name, _dump_str_to_list


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("db", ["db"]),
        (["db", "cache"], ["db", "cache"]),
        (("db", "cache"), ["db", "cache"]),
        ([], []),
    ],
)
def test_dump_str_to_list(value, expected):
    assert _dump_str_to_list(value) == expected


@pytest.mark.parametrize("value", [None, 1, ["db", 2]])
def test_dump_str_to_list_rejects(value):
    with pytest.raises(TypeError, match="string or a list of strings"):
        _dump_str_to_list(value)


def test_dump_str_to_list_returns_a_new_list():
    names = ["db"]
    assert _dump_str_to_list(names) is not names


def test_component_name():
    class Handler:
        def __call__(self, event):
            return event

    def service():
        return None

    assert _component_name(service).endswith("<locals>.service")
    assert _component_name(Handler).endswith("<locals>.Handler")
    assert _component_name(Handler()).endswith("<locals>.Handler")
