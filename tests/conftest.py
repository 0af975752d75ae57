from typing import Any

import pytest

from keypath_parse import ParseMapping


@pytest.fixture
def document() -> dict[str, Any]:
    return {
        "validInt": 123,
        "validIntString": "456",
        "invalidInt": [],
        "invalidIntString": "value",
        "validString": "value",
        "invalidString": 123,
        "validDouble": 10.45,
        "validDoubleString": "87.43",
        "invalidDouble": True,
        "invalidDoubleString": "value",
        "validBool": True,
        "invalidBool": 12.3,
        "invalidBoolString": "value",
        "validDate": "2017-02-08T12:15:00-0800",
        "invalidDate": "value",
        "validDateDifferentFormat": "02-08-2017 12:15",
        "validStringEnum": "one",
        "invalidStringEnum": "value",
        "validIntEnum": 1,
        "invalidIntEnum": 3,
        "validURL": "https://www.google.com",
        "invalidURL": "",
        "validParsable": {"value": "Some value"},
        "invalidParsable": {"value": 123},
        "validParsableList": [{"value": "one"}, {"value": "two"}],
        "invalidParsableList": [{"value": "one"}, {"value": 123}],
        "nullValue": None,
        "nested": {"user": {"name": "alice", "age": "30", "tags": ["a", "b"]}},
    }


@pytest.fixture
def json_data(document: dict[str, Any]) -> ParseMapping:
    return ParseMapping(document)
