import pytest

from utils.logging_utils import mask_value


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("budi@example.com", "bu***@example.com"),
        ("+628123456789", "+62***89"),
        ("short", "***"),
        (None, None),
    ],
)
def test_mask_value(value, expected):
    assert mask_value(value) == expected
