import pytest
import keyedlist as kl


@pytest.fixture
def lst(some_data):
    return kl.from_array(some_data)


def test_from_array(lst):
    assert lst.order == ("123", "111", "98")
    assert len(lst) == 3
    assert lst["111"] == {"id": "111", "name": "Alfred", "age": 12}


def test_empty():
    empty = kl.from_array()
    assert empty.order == ()
    assert empty.by_key == {}
    assert kl.to_array(empty) == []
    assert empty == kl.KeyedList()


def test_array_conversion_both_ways(some_data, lst):
    arr = kl.to_array(lst)
    assert arr == some_data
    assert arr is not some_data
    for a, b in zip(arr, some_data):
        assert a is not b


def test_array_conversion_is_immutable(some_data, lst):
    some_data[1]["name"] = "Paul"
    assert lst["111"]["name"] == "Alfred"


def test_returned_elements_are_copies(lst):
    arr = kl.to_array(lst)
    arr[0]["name"] = "Paul"
    lst["123"]["age"] = 0
    lst.by_key["98"]["name"] = "Paul"
    assert lst["123"] == {"id": "123", "name": "John", "age": 51}
    assert lst["98"]["name"] == "Jon"


def test_nested_payload_is_copied():
    tags = ["a", "b"]
    lst = kl.from_array([{"id": "1", "tags": tags}])
    tags.append("c")
    assert lst["1"]["tags"] == ["a", "b"]


def test_duplicated_ids_rejected(some_data):
    some_data.append({"id": "111", "name": "Paul", "age": 3})
    with pytest.raises(kl.DuplicateKeyError) as ex:
        kl.from_array(some_data)
    assert ex.value.key == "111"
    assert isinstance(ex.value, ValueError)


def test_invalid_elements():
    with pytest.raises(kl.InvalidElementError):
        kl.from_array([{"name": "John"}])
    with pytest.raises(kl.InvalidElementError):
        kl.from_array([{"id": 1}])
    with pytest.raises(TypeError):
        kl.from_array([42])


def test_container_protocol(lst):
    assert "111" in lst
    assert "999" not in lst
    assert [x["name"] for x in lst] == ["John", "Alfred", "Jon"]
    assert [k for k, _ in lst.items()] == ["123", "111", "98"]
    keys = lst.keys()
    keys.append("999")
    assert lst.keys() == ["123", "111", "98"]


def test_getitem_missing(lst):
    with pytest.raises(KeyError, match="999"):
        lst["999"]


def test_equality(some_data, lst):
    assert lst == kl.from_array(some_data)
    assert lst != kl.from_array(some_data[::-1])
    assert lst != kl.from_array(some_data[:2])
    assert lst != some_data


def test_attributes_are_read_only(lst):
    with pytest.raises(AttributeError):
        lst.order = ("1",)
    with pytest.raises(AttributeError):
        lst.extra = 1


def test_unhashable(lst):
    with pytest.raises(TypeError):
        hash(lst)


def test_repr(lst):
    assert repr(lst) == "KeyedList(n. elements = 3, ids = ['123', '111', '98'])"
    long = kl.from_array([{"id": str(i)} for i in range(7)])
    assert repr(long).endswith("'4', ...])")
