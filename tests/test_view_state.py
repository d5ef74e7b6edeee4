import unittest
from uuid import UUID

from tagcodec import (
    SAMPLE_VIEW_STATES,
    VIEW_STATE_CODEC_TYPE,
    AmbiguousOrMissingDiscriminatorError,
    Connection,
    DataCorruptedError,
    Editing,
    EditSubview,
    Empty,
    ExchangeHistory,
    Item,
    Listing,
    MalformedDataError,
    PayloadTypeMismatchError,
    TooLongError,
    TrailingDataError,
    TruncatedSequenceError,
    UnknownDiscriminatorError,
    ViewStateCodecType,
    ViewStateKey,
)
from tagcodec.conf.settings import CodecSettings
from tagcodec.types import URL

SELECTED_ID = UUID('e621e1f8-c36c-495a-93fc-0c247a3e6e5f')
URL_TEXT = 'wss://stocks.websocket.demo.cleora.app'


class ViewStateEncodingTest(unittest.TestCase):
    def setUp(self) -> None:
        self.codec = ViewStateCodecType()

    def test_empty(self) -> None:
        self.assertEqual(self.codec.value_to_json(Empty()), {'empty': True})
        self.assertEqual(self.codec.json_to_value({'empty': True}), Empty())

    def test_editing(self) -> None:
        for subview in EditSubview:
            json_value = self.codec.value_to_json(Editing(subview))
            self.assertEqual(json_value, {'editing': subview.value})
            self.assertEqual(self.codec.json_to_value(json_value), Editing(subview))

    def test_exchange_history(self) -> None:
        value = ExchangeHistory(Connection(URL(URL_TEXT), ['connected', 'disconnected']))
        json_value = self.codec.value_to_json(value)
        self.assertEqual(json_value, {
            'exchangeHistory': {'url': URL_TEXT, 'messages': ['connected', 'disconnected']},
        })
        self.assertEqual(self.codec.json_to_value(json_value), value)

    def test_exchange_history_without_connection(self) -> None:
        self.assertEqual(self.codec.to_bytes(ExchangeHistory(None)), b'{"exchangeHistory":null}')
        decoded = self.codec.from_bytes(b'{"exchangeHistory": null}')
        self.assertEqual(decoded, ExchangeHistory(None))
        self.assertIsNone(decoded.connection)

    def test_listing(self) -> None:
        value = Listing(SELECTED_ID, [Item('Request 1')])
        json_value = self.codec.value_to_json(value)
        self.assertEqual(json_value, {'list': [str(SELECTED_ID), [{'name': 'Request 1'}]]})
        self.assertEqual(self.codec.json_to_value(json_value), value)

    def test_listing_without_items(self) -> None:
        value = Listing(SELECTED_ID, [])
        self.assertEqual(self.codec.value_to_json(value), {'list': [str(SELECTED_ID), []]})
        self.assertEqual(self.codec.json_to_value({'list': [str(SELECTED_ID), []]}), value)

    def test_samples_round_trip(self) -> None:
        for value in SAMPLE_VIEW_STATES:
            with self.subTest(value=value):
                self.assertEqual(self.codec.from_bytes(self.codec.to_bytes(value)), value)
                self.assertEqual(VIEW_STATE_CODEC_TYPE.from_bytes(VIEW_STATE_CODEC_TYPE.to_bytes(value)), value)

    def test_exactly_one_key(self) -> None:
        for value in SAMPLE_VIEW_STATES:
            with self.subTest(value=value):
                json_value = self.codec.value_to_json(value)
                self.assertIsInstance(json_value, dict)
                key, = json_value.keys()
                self.assertEqual(key, type(value).key)
                self.assertIn(key, [k.value for k in ViewStateKey])

    def test_sequences_become_tuples(self) -> None:
        value = Listing(SELECTED_ID, [Item('Request 1'), Item('Request 2')])
        self.assertEqual(value.expanded_items, (Item('Request 1'), Item('Request 2')))
        hash(value)

    def test_encoding_rejects_wrong_values(self) -> None:
        with self.assertRaises(TypeError):
            self.codec.to_bytes('empty')
        with self.assertRaises(TypeError):
            self.codec.to_bytes(Editing('body'))
        with self.assertRaises(TypeError):
            self.codec.to_bytes(ExchangeHistory(Connection(URL_TEXT)))
        with self.assertRaises(TypeError):
            self.codec.to_bytes(Listing(str(SELECTED_ID), []))


class ViewStateDecodingErrorsTest(unittest.TestCase):
    def setUp(self) -> None:
        self.codec = ViewStateCodecType()

    def test_zero_keys(self) -> None:
        with self.assertRaises(AmbiguousOrMissingDiscriminatorError) as cm:
            self.codec.from_bytes(b'{}')
        self.assertEqual(cm.exception.path, ())
        self.assertIsInstance(cm.exception, DataCorruptedError)

    def test_two_keys(self) -> None:
        with self.assertRaises(AmbiguousOrMissingDiscriminatorError):
            self.codec.from_bytes(b'{"empty": true, "editing": "body"}')

    def test_unknown_key(self) -> None:
        with self.assertRaises(UnknownDiscriminatorError) as cm:
            self.codec.from_bytes(b'{"history": null}')
        self.assertEqual(str(cm.exception), "unknown ViewStateKey 'history' (at $)")
        self.assertIsInstance(cm.exception, DataCorruptedError)

    def test_not_an_object(self) -> None:
        with self.assertRaises(PayloadTypeMismatchError):
            self.codec.from_bytes(b'["empty"]')

    def test_unit_placeholder_is_ignored(self) -> None:
        self.assertEqual(self.codec.from_bytes(b'{"empty": false}'), Empty())
        self.assertEqual(self.codec.from_bytes(b'{"empty": {}}'), Empty())

    def test_bad_subview(self) -> None:
        with self.assertRaises(PayloadTypeMismatchError) as cm:
            self.codec.from_bytes(b'{"editing": "footer"}')
        self.assertEqual(str(cm.exception), "'footer' is not a valid EditSubview (at $.editing)")

    def test_truncated_list(self) -> None:
        with self.assertRaises(TruncatedSequenceError) as cm:
            self.codec.from_bytes(b'{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f"]}')
        self.assertEqual(cm.exception.path, ('list', 1))

    def test_malformed_uuid(self) -> None:
        with self.assertRaises(PayloadTypeMismatchError) as cm:
            self.codec.from_bytes(b'{"list": ["not-a-uuid", []]}')
        self.assertEqual(cm.exception.path, ('list', 0))

    def test_bad_item_path(self) -> None:
        data = b'{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f", [{"name": "Request 1"}, {"name": 2}]]}'
        with self.assertRaises(PayloadTypeMismatchError) as cm:
            self.codec.from_bytes(data)
        self.assertEqual(str(cm.exception), 'expected str, found int (at $.list[1][1].name)')

    def test_bad_connection_url(self) -> None:
        with self.assertRaises(PayloadTypeMismatchError) as cm:
            self.codec.from_bytes(b'{"exchangeHistory": {"url": "not a url", "messages": []}}')
        self.assertEqual(cm.exception.path, ('exchangeHistory', 'url'))

    def test_trailing_elements_are_ignored_by_default(self) -> None:
        data = b'{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f", [], "extra"]}'
        self.assertEqual(self.codec.from_bytes(data), Listing(SELECTED_ID, []))

    def test_trailing_elements_in_strict_mode(self) -> None:
        codec = ViewStateCodecType.from_settings(CodecSettings(STRICT_SEQUENCE_LENGTH=True))
        data = b'{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f", [], "extra"]}'
        with self.assertRaises(TrailingDataError) as cm:
            codec.from_bytes(data)
        self.assertEqual(cm.exception.path, ('list',))

    def test_malformed_json(self) -> None:
        with self.assertRaises(MalformedDataError):
            self.codec.from_bytes(b'{"empty": tru')

    def test_deeply_nested_json(self) -> None:
        data = b'{"empty": ' + b'[' * 200000 + b']' * 200000 + b'}'
        with self.assertRaises(MalformedDataError) as cm:
            self.codec.from_bytes(data)
        self.assertEqual(str(cm.exception), 'invalid JSON: nesting is too deep (at $)')
        self.assertIsInstance(self.codec.decode_bytes(data).unwrap_err(), MalformedDataError)

    def test_number_with_too_many_digits(self) -> None:
        data = b'{"empty": ' + b'1' * 5000 + b'}'
        with self.assertRaises(MalformedDataError):
            self.codec.from_bytes(data)
        self.assertIsInstance(self.codec.decode_bytes(data).unwrap_err(), MalformedDataError)

    def test_duplicate_keys(self) -> None:
        data = b'{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f", []], "list": ["not-a-uuid", []]}'
        with self.assertRaises(MalformedDataError) as cm:
            self.codec.from_bytes(data)
        self.assertIn("duplicate key 'list'", str(cm.exception))
        with self.assertRaises(MalformedDataError):
            self.codec.from_bytes(b'{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f", [{"name": "a", "name": "b"}]]}')

    def test_too_long(self) -> None:
        with self.assertRaises(TooLongError):
            self.codec.from_bytes(b'{"empty": true}', max_bytes=4)

    def test_decode_json_returns_the_first_error(self) -> None:
        result = self.codec.decode_json({'list': ['not-a-uuid']})
        self.assertTrue(result.is_err())
        self.assertIsInstance(result.unwrap_err(), PayloadTypeMismatchError)


class ViewStateTypeMapTest(unittest.TestCase):
    def test_view_state_field_in_a_record(self) -> None:
        from dataclasses import dataclass

        from tagcodec.codec_types import CodecType
        from tagcodec.view_state import VIEW_STATE_TYPE_MAP, ViewState

        @dataclass(frozen=True)
        class Window:
            title: str
            state: ViewState

        codec_type = CodecType.from_type(Window, type_map=VIEW_STATE_TYPE_MAP)
        value = Window('main', Editing(EditSubview.QUERY))
        json_value = codec_type.value_to_json(value)
        self.assertEqual(json_value, {'title': 'main', 'state': {'editing': 'query'}})
        self.assertEqual(codec_type.json_to_value(json_value), value)

    def test_view_state_is_not_in_the_default_map(self) -> None:
        from tagcodec.codec_types import make_codec_type
        from tagcodec.view_state import ViewState

        with self.assertRaises(TypeError):
            make_codec_type(ViewState)


if __name__ == '__main__':
    unittest.main()
