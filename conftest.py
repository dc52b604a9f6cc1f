# conftest.py - shared fixtures
import uuid as uuid_lib

import pytest

from ontaplib import ErrorHandler, RestError, RestQuery, RestResponse

FILTER_KEYS = ["name", "scope", "svm.name", "uuid", "ip.address"]


def _lookup(record, dotted_key):
    value = record
    for part in dotted_key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class FakeOntapClient:
    """In-memory stand-in for RestClient, storing records in wire shape"""
    def __init__(self):
        self.records = []
        self.calls = []
        self.errors = {}      # method name -> RestError to raise
        self.responses = {}   # method name -> (status, response) to return as-is

    def new_query(self):
        return RestQuery()

    def _matching(self, query):
        params = dict(query.to_params()) if query is not None else {}
        result = []
        for record in self.records:
            if all(_lookup(record, key) == params[key] for key in FILTER_KEYS if key in params):
                result.append(record)
        return result

    def _call(self, method, api, query, body):
        self.calls.append({"method": method, "api": api, "query": query, "body": body})
        if method in self.errors:
            raise self.errors[method]
        return self.responses.get(method)

    def get_nil_or_one_record(self, api, query=None, body=None):
        canned = self._call("get_nil_or_one_record", api, query, body)
        if canned is not None:
            return canned
        matches = self._matching(query)
        if len(matches) > 1:
            raise RestError(200, "received more than one record")
        return 200, matches[0] if matches else None

    def get_zero_or_more_records(self, api, query=None, body=None):
        canned = self._call("get_zero_or_more_records", api, query, body)
        if canned is not None:
            return canned
        return 200, list(self._matching(query))

    def call_create_method(self, api, query=None, body=None):
        canned = self._call("call_create_method", api, query, body)
        if canned is not None:
            return canned
        record = {
            "uuid": str(uuid_lib.uuid4()),
            "name": body["name"],
            "scope": "svm",
            "svm": {"name": body["svm"]["name"]},
            "ip": {"address": body["ip"]["address"], "netmask": str(body["ip"]["netmask"])},
        }
        self.records.append(record)
        return 201, RestResponse({"num_records": 1, "records": [record]})

    def call_delete_method(self, api, query=None, body=None):
        canned = self._call("call_delete_method", api, query, body)
        if canned is not None:
            return canned
        uuid = api.rsplit("/", 1)[-1]
        remaining = [r for r in self.records if r["uuid"] != uuid]
        if len(remaining) == len(self.records):
            raise RestError(404, "entry doesn't exist", "4")
        self.records = remaining
        return 200, RestResponse({})

    def add_cluster_lif(self, name, address="10.0.0.10", netmask="24"):
        record = {
            "uuid": str(uuid_lib.uuid4()),
            "name": name,
            "scope": "cluster",
            "ip": {"address": address, "netmask": netmask},
        }
        self.records.append(record)
        return record


@pytest.fixture
def fake_client():
    return FakeOntapClient()


@pytest.fixture
def error_handler():
    return ErrorHandler()
