from __future__ import annotations

import pytest

from app.api.error_handlers import error_key


@pytest.mark.parametrize(
    ("loc", "expected"),
    [
        (("body", "firstName"), "FirstName"),
        (("body", "zip_code"), "ZipCode"),
        (("body", "address1"), "Address1"),
        (("body",), "$"),
        (("body", 12), "$"),
        ((), "$"),
    ],
)
def test_error_key(loc, expected):
    assert error_key(loc) == expected
