"""Tests for the color tool endpoints."""

import pytest
from fastapi.testclient import TestClient

from bigcolor import BigColor
from bigcolor.config import Settings, get_settings
from main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestConvert:
    """POST /convert_color_code"""

    @pytest.mark.parametrize(
        "code,target,expected",
        [
            ("red", "hex", "#ff0000"),
            ("#ff0000", "rgb", "rgb(255, 0, 0)"),
            ("rgb(255, 0, 0)", "hsl", "hsl(0, 100%, 50%)"),
            ("hsl(0, 100%, 50%)", "cmyk", "cmyk(0%, 100%, 100%, 0%)"),
            ("red", "oklch", "oklch(62.8% 0.26 29)"),
            ("#ff000080", "hex8", "#ff000080"),
            (" #ff0000 ", "named", "red"),
            ("rgba(255, 0, 0, 0.5)", "argb", "#80ff0000"),
        ],
    )
    def test_convert(self, client, code, target, expected):
        response = client.post("/convert_color_code", json={"code": code, "target": target})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": expected}

    def test_no_named_match(self, client):
        response = client.post("/convert_color_code", json={"code": "#123456", "target": "named"})
        assert response.status_code == 400

    def test_invalid_code(self, client):
        response = client.post("/convert_color_code", json={"code": "nope", "target": "hex"})
        assert response.status_code == 400
        assert "Invalid unknown format" in response.json()["detail"]

    @pytest.mark.parametrize(
        "code", ["lch(50 30 1e308turn)", "hsl(1e308turn, 50%, 50%)", "1e400 50% 50%", "lab(nan 0 0)"]
    )
    def test_non_finite_numbers(self, client, code):
        response = client.post("/convert_color_code", json={"code": code, "target": "hex"})
        assert response.status_code == 400

    @pytest.mark.parametrize("code", ["lab(50 1e200 0)", "oklch(0.5 1e200 30)", "oklab(0.5 1e200 0)"])
    def test_huge_components_are_bounded(self, client, code):
        response = client.post("/convert_color_code", json={"code": code, "target": "hex"})
        assert response.status_code == 200
        assert response.json()["message"].startswith("#")

    @pytest.mark.parametrize(
        "payload",
        [{"code": "red", "target": "pantone"}, {"code": "   ", "target": "hex"}, {"target": "hex"}],
    )
    def test_validation(self, client, payload):
        assert client.post("/convert_color_code", json=payload).status_code == 422


class TestManipulate:
    """POST /manipulate_color"""

    def test_keeps_input_notation(self, client):
        response = client.post(
            "/manipulate_color", json={"code": "black", "operation": "lighten", "amount": 100}
        )
        assert response.json()["message"] == "white"

    def test_greyscale(self, client):
        response = client.post("/manipulate_color", json={"code": "#ff0000", "operation": "grayscale"})
        assert response.status_code == 200
        assert response.json()["message"] == BigColor("#ff0000").greyscale().to_string()

    def test_default_amount_from_settings(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(default_amount=50)
        response = client.post("/manipulate_color", json={"code": "#000000", "operation": "lighten"})
        assert response.json()["message"] == BigColor("#000000").lighten(50).to_string()

    def test_bad_operation(self, client):
        response = client.post("/manipulate_color", json={"code": "red", "operation": "invert"})
        assert response.status_code == 422


class TestScheme:
    """POST /color_scheme"""

    @pytest.mark.parametrize(
        "scheme,count,length",
        [
            ("analogous", None, 6),
            ("analogous", 4, 4),
            ("monochromatic", None, 6),
            ("complement", None, 2),
            ("split_complement", None, 3),
            ("triad", None, 3),
            ("tetrad", None, 4),
            ("polyad", None, 5),
            ("polyad", 8, 8),
        ],
    )
    def test_lengths(self, client, scheme, count, length):
        response = client.post("/color_scheme", json={"code": "red", "scheme": scheme, "count": count})
        assert response.status_code == 200
        colors = response.json()["colors"]
        assert len(colors) == length
        assert all(c.startswith("#") for c in colors)

    def test_bad_count(self, client):
        response = client.post("/color_scheme", json={"code": "red", "scheme": "polyad", "count": 0})
        assert response.status_code == 422


class TestContrast:
    """POST /contrast_ratio"""

    def test_black_on_white(self, client):
        response = client.post("/contrast_ratio", json={"foreground": "black", "background": "white"})
        assert response.json() == {
            "success": True,
            "ratio": 21.0,
            "readable": True,
            "level": "AA",
            "size": "small",
        }

    def test_level_and_size(self, client):
        response = client.post(
            "/contrast_ratio",
            json={"foreground": "#777777", "background": "#fff", "level": "AAA", "size": "large"},
        )
        body = response.json()
        assert body["ratio"] == 4.48
        assert body["readable"] is False

    def test_settings_level(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(wcag_size="large")
        response = client.post("/contrast_ratio", json={"foreground": "#777777", "background": "#fff"})
        assert response.json()["readable"] is True

    def test_invalid_background(self, client):
        response = client.post("/contrast_ratio", json={"foreground": "black", "background": "#zz"})
        assert response.status_code == 400


class TestMix:
    """POST /mix_colors"""

    def test_mix(self, client):
        response = client.post("/mix_colors", json={"first": "red", "second": "blue"})
        assert response.json() == {"success": True, "message": "#800080"}

    def test_amount(self, client):
        response = client.post("/mix_colors", json={"first": "red", "second": "blue", "amount": 0})
        assert response.json()["message"] == "#ff0000"

    def test_amount_out_of_range(self, client):
        response = client.post("/mix_colors", json={"first": "red", "second": "blue", "amount": 150})
        assert response.status_code == 422
