def test_pages_redirect_anonymous_to_login(client):
    for url in ("/", "/inventory", "/inventory-add"):
        resp = client.get(url, follow_redirects=False)
        assert resp.status_code == 303, url
        assert resp.headers["location"] == "/login"


def test_anonymous_redirect_lands_on_login_form(client):
    resp = client.get("/inventory")
    assert resp.status_code == 200
    assert 'action="/login"' in resp.text


def test_home_shows_user_and_role(member_client):
    resp = member_client.get("/")
    assert resp.status_code == 200
    assert "bob" in resp.text
    assert "member" in resp.text


def test_inventory_page_lists_items(member_client, sample_item):
    member_client.post("/api/inventory", json=sample_item)
    resp = member_client.get("/inventory")
    assert resp.status_code == 200
    assert sample_item["name"] in resp.text
    # members get no delete buttons
    assert 'class="delete"' not in resp.text


def test_inventory_page_admin_sees_delete(admin_client, sample_item):
    admin_client.post("/api/inventory", json=sample_item)
    resp = admin_client.get("/inventory")
    assert 'class="delete"' in resp.text


def test_inventory_add_page(member_client):
    resp = member_client.get("/inventory-add")
    assert resp.status_code == 200
    assert 'id="add-item"' in resp.text


def test_security_headers(client):
    resp = client.get("/login")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_cors_preflight_allows_configured_origin(client):
    resp = client.options(
        "/api/inventory",
        headers={"Origin": "http://frontend.test", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://frontend.test"
    assert resp.headers["access-control-allow-credentials"] == "true"


def test_empty_inventory_row_spans_all_columns(admin_client, member_client):
    assert 'colspan="7"' in admin_client.get("/inventory").text
    assert 'colspan="6"' in member_client.get("/inventory").text
