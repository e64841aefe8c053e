from sarifkit.web import WebRequest, WebResponse


def test_request_set_header_creates_headers():
    request = WebRequest()
    request.set_header("Accept", "text/html")
    assert request.headers == {"Accept": "text/html"}


def test_request_set_parameter_creates_parameters():
    request = WebRequest()
    request.set_parameter("q", "search")
    request.set_parameter("page", "2")
    assert request.parameters == {"q": "search", "page": "2"}


def test_request_set_header_overwrites():
    request = WebRequest(headers={"Accept": "a"})
    request.set_header("Accept", "b")
    assert request.headers == {"Accept": "b"}


def test_empty_request_serialises_to_empty_object():
    assert WebRequest().to_dict() == {}


def test_request_headers_are_sorted():
    request = WebRequest(method="GET", target="/index", headers={"b": "2", "a": "1"})
    data = request.to_dict()
    assert data == {"headers": {"a": "1", "b": "2"}, "method": "GET", "target": "/index"}
    assert list(data["headers"]) == ["a", "b"]


def test_request_round_trip():
    request = WebRequest(
        headers={"Host": "example.com"},
        index=3,
        method="POST",
        parameters={"id": "7"},
        protocol="http",
        target="/submit",
        version="1.1",
    )
    assert WebRequest.from_dict(request.to_dict()) == request


def test_response_false_flag_is_kept():
    assert WebResponse(no_response_received=False).to_dict() == {
        "noResponseReceived": False
    }


def test_response_zero_status_is_kept():
    assert WebResponse(status_code=0).to_dict() == {"statusCode": 0}


def test_response_properties_come_last():
    response = WebResponse(status_code=200)
    response.add_string("note", "ok")
    assert list(response.to_dict()) == ["statusCode", "properties"]


def test_response_set_header_and_round_trip():
    response = WebResponse(reason_phrase="OK", status_code=200, protocol="http")
    response.set_header("Content-Type", "text/plain")
    assert response.headers == {"Content-Type": "text/plain"}
    assert WebResponse.from_dict(response.to_dict()) == response