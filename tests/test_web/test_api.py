from __future__ import annotations

import pytest

from stylesweep import __version__


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok", "version": __version__}


class TestDialectsAPI:
    def test_lists_all_dialects(self, client):
        response = client.get("/api/dialects")
        assert response.status_code == 200
        data = response.get_json()
        assert [d["id"] for d in data] == ["jsx", "tsx", "js", "ts", "php", "html", "vue"]
        assert data[0]["name"] == "JSX"
        assert "className" in data[0]["attributes"]

    def test_cors_headers(self, client):
        response = client.get("/api/dialects")
        assert response.headers["Access-Control-Allow-Origin"] == "*"


class TestValidateAPI:
    def test_returns_diagnostics(self, client):
        response = client.post(
            "/api/validate",
            json={"source": '<div class="foo">\nconst x = 1', "dialect": "jsx"},
        )
        assert response.status_code == 200
        data = response.get_json()
        assert len(data["errors"]) == 1
        assert data["errors"][0]["suggestion"] == 'className="foo"'
        assert data["errors"][0]["category"] == "attribute"
        assert data["warnings"][0]["line"] == 2

    def test_default_dialect_from_config(self, client):
        response = client.post("/api/validate", json={"source": "# nope"})
        assert response.status_code == 200
        assert len(response.get_json()["errors"]) == 1

    def test_missing_source_returns_400(self, client):
        response = client.post("/api/validate", json={"dialect": "jsx"})
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_unknown_dialect_returns_400(self, client):
        response = client.post("/api/validate", json={"source": "x", "dialect": "cobol"})
        assert response.status_code == 400
        assert "Unknown dialect" in response.get_json()["error"]

    def test_no_json_returns_400(self, client):
        response = client.post("/api/validate", data="source=x")
        assert response.status_code == 400

    def test_preflight(self, client):
        response = client.options("/api/validate")
        assert response.status_code == 204


class TestClassesAPI:
    def test_lists_classes(self, client):
        response = client.post(
            "/api/classes", json={"markup": '<p className="b a"><i className={x ? "c" : "d"} /></p>'}
        )
        assert response.get_json() == {"classes": ["a", "b", "c", "d"], "count": 4}

    def test_html_dialect(self, client):
        response = client.post(
            "/api/classes", json={"markup": '<p class="x">', "dialect": "html"}
        )
        assert response.get_json()["classes"] == ["x"]

    def test_missing_markup(self, client):
        assert client.post("/api/classes", json={}).status_code == 400


class TestOptimizeAPI:
    def test_css_only(self, client):
        response = client.post(
            "/api/optimize", json={"css": ".a{color:red}\n.a{top:0}\n.b{color:blue}"}
        )
        assert response.status_code == 200
        data = response.get_json()
        assert data["output"] == ".a{color:red;top:0;}.b{color:blue;}"
        assert data["error"] is None
        assert data["stats"]["used_class_count"] is None
        assert data["stats"]["original_size"] == 38

    def test_with_markup_filters(self, client):
        response = client.post(
            "/api/optimize",
            json={"css": ".a{color:red}.b{color:blue}", "markup": '<div className="a"/>'},
        )
        data = response.get_json()
        assert data["output"] == ".a{color:red;}"
        assert data["stats"]["used_class_count"] == 1

    def test_blank_markup_does_not_filter(self, client):
        response = client.post("/api/optimize", json={"css": ".a{color:red}", "markup": "  "})
        assert response.get_json()["output"] == ".a{color:red;}"

    def test_non_string_css_reports_error(self, client):
        response = client.post("/api/optimize", json={"css": 42})
        assert response.status_code == 200
        data = response.get_json()
        assert data["output"].startswith("/* Error: ")
        assert data["stats"] is None
        assert data["error"]

    def test_missing_css(self, client):
        assert client.post("/api/optimize", json={"markup": "x"}).status_code == 400

    def test_body_too_large(self, client):
        response = client.post("/api/optimize", json={"css": "a" * 20_000})
        assert response.status_code == 413


class TestDownloadAPI:
    def test_download_attachment(self, client):
        response = client.post("/api/optimize/download", json={"css": ".a { top: 0 }"})
        assert response.status_code == 200
        assert response.mimetype == "text/css"
        assert 'filename="optimized.css"' in response.headers["Content-Disposition"]
        assert response.get_data(as_text=True) == ".a{top:0;}"


class TestNonObjectBody:
    @pytest.mark.parametrize(
        "path", ["/api/validate", "/api/classes", "/api/optimize", "/api/optimize/download"]
    )
    @pytest.mark.parametrize("body", [[1], "css", 3])
    def test_returns_400(self, client, path, body):
        response = client.post(path, json=body)
        assert response.status_code == 400
        assert "error" in response.get_json()
