"""Integration tests for the view routes."""

from view_partials import __version__


def test_health(test_client, templates_dir):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__, "templates_dir": str(templates_dir)}


def test_partial_in_default_directory(test_client):
    """Names without a directory resolve under the default controller path."""
    response = test_client.get("/partials/flash", params={"message": "Saved"})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert response.text == "<p>Saved</p>"


def test_partial_escapes_query_values(test_client):
    response = test_client.get("/partials/flash", params={"message": "<script>"})

    assert response.text == "<p>&lt;script&gt;</p>"


def test_partial_with_directory(test_client):
    response = test_client.get("/partials/advertiser/account", params={"account": "Acme"})

    assert response.text == '<div class="account">Acme:1</div>'


def test_partial_counter_from_query(test_client):
    response = test_client.get("/partials/advertiser/account", params={"account": "Acme", "account_counter": "5"})

    assert response.text == '<div class="account">Acme:5</div>'


def test_missing_partial_returns_404(test_client):
    response = test_client.get("/partials/advertiser/missing")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "TEMPLATE_NOT_FOUND"
    assert error["details"]["template"] == "advertiser/_missing.html"


def test_template_syntax_error_returns_500(test_client):
    response = test_client.get("/partials/advertiser/syntax_error")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "TEMPLATE_RENDER_ERROR"


def test_collection(test_client):
    response = test_client.get("/collections/advertiser/ad", params={"items": ["a", "b", "c"]})

    assert response.status_code == 200
    assert response.text == "<li>0:a</li><li>1:b</li><li>2:c</li>"


def test_collection_with_spacer(test_client):
    response = test_client.get(
        "/collections/advertiser/ad",
        params={"items": ["a", "b"], "spacer": "shared/divider"},
    )

    assert response.text == "<li>0:a</li><hr><li>1:b</li>"


def test_collection_local_assigns_override_element(test_client):
    """Extra query parameters are local bindings and win over the element."""
    response = test_client.get("/collections/advertisement/ad", params={"items": ["a"], "ad": "pinned"})

    assert response.text == "<article>pinned</article>"


def test_empty_collection_returns_204(test_client):
    response = test_client.get("/collections/advertiser/ad")

    assert response.status_code == 204
    assert response.content == b""


def test_view_binds_query_as_controller_state(test_client):
    response = test_client.get("/views/advertiser/account", params={"account": "Acme"})

    assert response.status_code == 200
    assert response.text == '<main><div class="account">Acme:1</div></main>'


def test_view_with_missing_partial(test_client):
    response = test_client.get("/views/advertiser/broken")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TEMPLATE_NOT_FOUND"


def test_missing_view(test_client):
    response = test_client.get("/views/advertiser/nothing")

    assert response.status_code == 404
