import pytest

from gateway_xml.errors import ElementNameError
from gateway_xml.naming import hyphenate, to_element_name, to_key, underscorize


def test_hyphenate_and_underscorize_are_inverse_for_snake_case():
    assert hyphenate("credit_card") == "credit-card"
    assert underscorize("credit-card") == "credit_card"
    assert to_key(to_element_name("billing_address_id")) == "billing_address_id"


def test_hyphenate_accepts_non_string_keys():
    assert hyphenate(42) == "42"


def test_to_element_name_leaves_plain_names_alone():
    assert to_element_name("transaction") == "transaction"
    assert to_element_name("v1.amount") == "v1.amount"


@pytest.mark.parametrize("key", ["", "1st_item", "_private", "has space", "ns:tag", "a<b", "line\n"])
def test_to_element_name_rejects_invalid_keys(key):
    with pytest.raises(ElementNameError) as exc_info:
        to_element_name(key)
    assert exc_info.value.key == key
