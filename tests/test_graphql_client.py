import pytest
import requests
from unittest.mock import patch, MagicMock

from infrastructure.graphql.graphql_client import GraphQLClient, RemoteError


@pytest.fixture
def client():
    return GraphQLClient("https://api.example.com/graphql", timeout=5)


def _response(status_code=200, body=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = ""
    if body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


@patch('requests.post')
def test_execute_returns_data(mock_post, client):
    mock_post.return_value = _response(body={"data": {"me": {"name": "Ann"}}})

    data = client.execute("query Me { me { name } }")

    assert data == {"me": {"name": "Ann"}}
    args, kwargs = mock_post.call_args
    assert args[0] == "https://api.example.com/graphql"
    assert kwargs["json"] == {"query": "query Me { me { name } }", "variables": {}}
    assert kwargs["timeout"] == 5


@patch('requests.post')
def test_execute_without_token_sends_no_authorization(mock_post, client):
    mock_post.return_value = _response(body={"data": {}})

    client.execute("query", variables={"email": "a@b.com"})

    headers = mock_post.call_args.kwargs["headers"]
    assert "Authorization" not in headers
    assert mock_post.call_args.kwargs["json"]["variables"] == {"email": "a@b.com"}


@patch('requests.post')
def test_execute_with_token_sends_bearer_header(mock_post, client):
    mock_post.return_value = _response(body={"data": {}})

    client.execute("query", auth_token="tok-123")

    assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer tok-123"


@patch('requests.post')
def test_graphql_unauthenticated_error_is_classified(mock_post, client):
    mock_post.return_value = _response(body={
        "data": None,
        "errors": [{
            "message": "Unauthorized",
            "extensions": {"code": "UNAUTHENTICATED", "originalError": {"error": "Unauthorized", "statusCode": 401}},
        }],
    })

    with pytest.raises(RemoteError) as excinfo:
        client.execute("query")

    assert excinfo.value.status_code == "UNAUTHENTICATED"
    assert excinfo.value.message == "Unauthorized"
    assert excinfo.value.name == "Unauthorized"


@patch('requests.post')
def test_graphql_error_without_details(mock_post, client):
    mock_post.return_value = _response(body={"errors": [{}]})

    with pytest.raises(RemoteError) as excinfo:
        client.execute("query")

    assert excinfo.value.message is None
    assert excinfo.value.name is None
    assert excinfo.value.status_code is None


@patch('requests.post')
def test_network_error(mock_post, client):
    mock_post.side_effect = requests.ConnectionError("Connection Refused")

    with pytest.raises(RemoteError) as excinfo:
        client.execute("query")

    assert excinfo.value.status_code == "NETWORK_ERROR"
    assert "Connection Refused" in excinfo.value.message
    mock_post.assert_called_once()


@patch('requests.post')
def test_http_401_without_body_is_unauthenticated(mock_post, client):
    mock_post.return_value = _response(status_code=401)

    with pytest.raises(RemoteError) as excinfo:
        client.execute("query")

    assert excinfo.value.status_code == "UNAUTHENTICATED"


@patch('requests.post')
def test_http_500_with_json_body(mock_post, client):
    mock_post.return_value = _response(status_code=500, body={"message": "boom"})

    with pytest.raises(RemoteError) as excinfo:
        client.execute("query")

    assert excinfo.value.status_code == "500"


@patch('requests.post')
def test_non_json_response(mock_post, client):
    mock_post.return_value = _response(status_code=502)

    with pytest.raises(RemoteError) as excinfo:
        client.execute("query")

    assert excinfo.value.status_code == "BAD_RESPONSE"


@patch('requests.post')
def test_missing_data_object(mock_post, client):
    mock_post.return_value = _response(body={"data": None})

    with pytest.raises(RemoteError) as excinfo:
        client.execute("query")

    assert excinfo.value.status_code == "BAD_RESPONSE"
