from odxproxy.schema import ClientRequest, InstanceInfo, KeywordRequest, ServerResponse

INSTANCE = InstanceInfo(url="https://erp", user_id=2, db="d", api_key="k")


def test_to_wire_omits_fn_name_when_unset() -> None:
    request = ClientRequest(
        id="1", action="read", model_id="res.partner", keyword={"context": {"tz": "UTC"}},
        params=[[1, 2]], odoo_instance=INSTANCE,
    )
    wire = request.to_wire()
    assert "fn_name" not in wire
    assert wire == {
        "id": "1",
        "action": "read",
        "model_id": "res.partner",
        "keyword": {"context": {"tz": "UTC"}},
        "params": [[1, 2]],
        "odoo_instance": {"url": "https://erp", "user_id": 2, "db": "d", "api_key": "k"},
    }


def test_to_wire_keeps_none_values_inside_params() -> None:
    request = ClientRequest(
        id="1", action="write", model_id="res.partner", keyword={},
        params=[[1], {"email": None}], fn_name=None, odoo_instance=INSTANCE,
    )
    assert request.to_wire()["params"] == [[1], {"email": None}]


def test_server_response_preserves_extra_fields() -> None:
    resp = ServerResponse.model_validate({"jsonrpc": "2.0", "id": "x", "result": [1], "trace": "abc"})
    assert resp.ok is True
    assert resp.model_dump()["trace"] == "abc"


def test_keyword_request_allows_extra_options() -> None:
    keyword = KeywordRequest.model_validate({"context": {"tz": "UTC", "lang": "en_US"}, "load": "_classic_read"})
    dumped = keyword.model_dump(exclude_unset=True)
    assert dumped == {"context": {"tz": "UTC", "lang": "en_US"}, "load": "_classic_read"}
