import pytest


def test_from_bytes_parses_documents() -> None:
    from tagcodec.serialization import Deserializer
    de = Deserializer.build_json_bytes_deserializer(b'{"editing": "body"}').unwrap()
    obj = de.open_object().unwrap()
    assert obj.keys() == frozenset({'editing'})
    assert obj.decode('editing', lambda d: d.read_str()).unwrap() == 'body'


@pytest.mark.parametrize('data', [
    b'',
    b'{',
    b'{"a": }',
    b'[1, 2',
    b'\xff\xfe',
    b'{"a": 1, "a": 2}',
    pytest.param(b'[' * 100000 + b']' * 100000, id='deep-nesting'),
    pytest.param(b'9' * 5000, id='too-many-digits'),
])
def test_from_bytes_rejects_malformed_input(data: bytes) -> None:
    from tagcodec.serialization import DataCorruptedError, Deserializer, MalformedDataError
    error = Deserializer.build_json_bytes_deserializer(data).unwrap_err()
    assert isinstance(error, MalformedDataError)
    assert isinstance(error, DataCorruptedError)
    assert error.__cause__ is not None


def test_from_bytes_rejects_oversized_input() -> None:
    from tagcodec.serialization import Deserializer, TooLongError
    data = b'"' + b'a' * 100 + b'"'
    error = Deserializer.build_json_bytes_deserializer(data, max_bytes=50).unwrap_err()
    assert isinstance(error, TooLongError)
    # no limit
    assert Deserializer.build_json_bytes_deserializer(data, max_bytes=None).unwrap().read_str().unwrap() == 'a' * 100


@pytest.mark.parametrize('value, reader, expected, found', [
    (1, 'read_bool', 'bool', 'int'),
    (True, 'read_int', 'int', 'bool'),
    (1.5, 'read_int', 'int', 'float'),
    (None, 'read_str', 'str', 'null'),
    ('a', 'read_null', 'null', 'str'),
    ([], 'open_object', 'object', 'array'),
    ({}, 'open_array', 'array', 'object'),
])
def test_type_mismatch(value, reader: str, expected: str, found: str) -> None:
    from tagcodec.serialization import Deserializer, PayloadTypeMismatchError
    de = Deserializer.build_json_deserializer(value)
    error = getattr(de, reader)().unwrap_err()
    assert isinstance(error, PayloadTypeMismatchError)
    assert error.message == f'expected {expected}, found {found}'


def test_missing_key_carries_the_container_path() -> None:
    from tagcodec.serialization import Deserializer, MissingKeyError
    de = Deserializer.build_json_deserializer({'list': [{'other': 1}]})
    array = de.open_object().unwrap().nested_array('list').unwrap()
    obj = array.next().unwrap().open_object().unwrap()
    error = obj.key('name').unwrap_err()
    assert isinstance(error, MissingKeyError)
    assert error.path == ('list', 0)
    assert str(error) == "missing key 'name' (at $.list[0])"


def test_array_reads_in_order_and_reports_truncation() -> None:
    from tagcodec.serialization import Deserializer, TruncatedSequenceError
    array = Deserializer.build_json_deserializer(['a', 'b']).open_array().unwrap()
    assert array.remaining() == 2
    assert array.decode_next(lambda d: d.read_str()).unwrap() == 'a'
    assert array.decode_next(lambda d: d.read_str()).unwrap() == 'b'
    assert array.is_empty()
    assert array.finalize().is_ok()
    error = array.next().unwrap_err()
    assert isinstance(error, TruncatedSequenceError)
    assert error.path == (2,)


def test_array_finalize_reports_trailing_elements() -> None:
    from tagcodec.serialization import Deserializer, TrailingDataError
    array = Deserializer.build_json_deserializer([1, 2, 3]).open_array().unwrap()
    array.next().unwrap()
    error = array.finalize().unwrap_err()
    assert isinstance(error, TrailingDataError)
    assert error.message == '2 trailing element(s) after position 0'


def test_is_null_and_read_any() -> None:
    from tagcodec.serialization import Deserializer
    assert Deserializer.build_json_deserializer(None).is_null()
    assert not Deserializer.build_json_deserializer(False).is_null()
    assert Deserializer.build_json_deserializer({'a': [1]}).read_any().unwrap() == {'a': [1]}
