import json

import requests


SAMPLE_LOCATION = {
    "place_id": 123,
    "lat": "54.5390",
    "lon": "17.7500",
    "addresstype": "town",
    "name": "Lębork",
    "display_name": "Lębork, powiat lęborski, województwo pomorskie, Polska",
    "address": {
        "town": "Lębork",
        "county": "powiat lęborski",
        "state": "województwo pomorskie",
        "postcode": "84-300",
        "country": "Polska",
        "country_code": "pl",
        "ISO3166-2-lvl4": "PL-22",
    },
    "boundingbox": ["54.5", "54.6", "17.7", "17.8"],
}


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    """Stands in for requests.Session, answering every request with the same response."""

    def __init__(self, payload=None, text=None, status_code=200):
        self.text = json.dumps(payload) if text is None else text
        self.status_code = status_code
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append((url, headers, timeout))
        return FakeResponse(self.text, self.status_code)
