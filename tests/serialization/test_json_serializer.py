import pytest


def test_write_scalars() -> None:
    from tagcodec.serialization import Serializer
    for value, expected in [(None, b'null'), (True, b'true'), (42, b'42'), ('π', '"π"'.encode('utf-8'))]:
        se = Serializer.build_json_serializer()
        if value is None:
            se.write_null()
        elif isinstance(value, bool):
            se.write_bool(value)
        elif isinstance(value, int):
            se.write_int(value)
        else:
            se.write_str(value)
        assert se.to_bytes() == expected


def test_nested_containers_keep_insertion_order() -> None:
    from tagcodec.serialization import Serializer
    se = Serializer.build_json_serializer()
    obj = se.open_object()
    obj.key('b').write_int(1)
    array = obj.nested_array('a')
    array.append().write_str('x')
    array.append().open_object().key('name').write_str('Request 1')
    assert se.finalize() == {'b': 1, 'a': ['x', {'name': 'Request 1'}]}
    assert se.to_bytes() == b'{"b":1,"a":["x",{"name":"Request 1"}]}'


def test_str_subclasses_are_written_as_plain_str() -> None:
    from enum import StrEnum

    from tagcodec.serialization import Serializer

    class Color(StrEnum):
        RED = 'red'

    se = Serializer.build_json_serializer()
    obj = se.open_object()
    obj.key(Color.RED).write_str(Color.RED)
    result = se.finalize()
    assert result == {'red': 'red'}
    key, = result
    assert type(key) is str
    assert type(result[key]) is str


def test_coding_path_of_slots() -> None:
    from tagcodec.serialization import Serializer
    se = Serializer.build_json_serializer()
    assert se.coding_path() == ()
    array = se.open_object().nested_array('list')
    assert array.coding_path() == ('list',)
    array.append().write_bool(True)
    second = array.append()
    assert second.coding_path() == ('list', 1)
    second.write_bool(False)


def test_duplicate_key_is_rejected() -> None:
    from tagcodec.serialization import DuplicateKeyError, Serializer
    se = Serializer.build_json_serializer()
    obj = se.open_object()
    obj.key('empty').write_bool(True)
    with pytest.raises(DuplicateKeyError) as exc_info:
        obj.key('empty')
    assert str(exc_info.value) == "key 'empty' was already written (at $)"


def test_writing_twice_is_rejected() -> None:
    from tagcodec.serialization import SerializationError, Serializer
    se = Serializer.build_json_serializer()
    se.write_null()
    with pytest.raises(SerializationError, match='already written'):
        se.write_bool(True)


def test_unwritten_slot_is_rejected() -> None:
    from tagcodec.serialization import SerializationError, Serializer
    se = Serializer.build_json_serializer()
    obj = se.open_object()
    obj.key('list')
    with pytest.raises(SerializationError) as exc_info:
        se.finalize()
    assert exc_info.value.path == ('list',)
