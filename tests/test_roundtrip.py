from gateway_xml import decode, dump, encode, load


def test_string_only_tree_round_trips():
    data = {
        "transaction": {
            "amount": "10.00",
            "order_id": "A&B <1>",
            "customer": {"first_name": "O'Neil", "last_name": 'Say "hi"'},
            "custom_fields": {"note": ""},
        }
    }
    assert decode(encode(data)) == data


def test_scalars_come_back_as_strings():
    assert decode(encode({"a": {"n": 5, "ok": True}})) == {"a": {"n": "5", "ok": "true"}}


def test_sequences_are_not_reconstructed_without_array_marker():
    assert decode(encode({"a": {"ids": ["1", "2"]}})) == {"a": {"ids": "2"}}


def test_dump_and_load_aliases():
    assert load(dump({"a": "1"})) == {"a": "1"}
