def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_sitemap_redirects_to_index(client):
    response = client.get("/sitemap.xml", follow_redirects=False)

    assert response.status_code == 301
    assert response.headers["location"] == "http://testserver/sitemap-index.xml"
    assert response.headers["cache-control"] == "public, max-age=3600"


def test_www_host_redirects_to_bare_domain(client):
    response = client.get("http://www.example.com/projects?tab=ml", follow_redirects=False)

    assert response.status_code == 301
    assert response.headers["location"] == "https://example.com/projects?tab=ml"
    assert response.headers["cache-control"] == "public, max-age=31536000, immutable"


def test_www_redirect_applies_to_api_routes(client):
    response = client.post("http://www.example.com/api/contact", json={}, follow_redirects=False)

    assert response.status_code == 301
    assert response.headers["location"] == "https://example.com/api/contact"


def test_bare_domain_is_not_redirected(client):
    response = client.get("http://example.com/health", follow_redirects=False)

    assert response.status_code == 200
