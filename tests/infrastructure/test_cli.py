"""Tests for the click command line interface."""

import json

from click.testing import CliRunner

from parcelfit.infrastructure.cli.main import cli


def _run(*args):
    return CliRunner().invoke(cli, list(args))


class TestBoxCommands:

    def test_box_list(self):
        result = _run("box", "list")
        assert result.exit_code == 0
        assert "Small Satchel" in result.output
        assert "$11.30" in result.output
        assert "by kg" in result.output

    def test_box_price(self):
        result = _run("box", "price", "--id", "box-medium", "--weight", "5", "--express")
        assert result.exit_code == 0
        assert "Medium Box (Express Post, 5kg): $25.00" in result.output

    def test_box_price_unknown_box(self):
        result = _run("box", "price", "--id", "box-huge", "--weight", "1")
        assert result.exit_code == 1
        assert "Box 'box-huge' not found" in result.output

    def test_box_list_from_json_catalog(self, tmp_path):
        path = tmp_path / "boxes.json"
        path.write_text(json.dumps([{
            "id": "tube", "name": "Poster Tube", "length": 90, "width": 8,
            "height": 8, "max_weight": 2, "type": "box",
        }]), encoding="utf-8")
        result = _run("--catalog", str(path), "box", "list")
        assert result.exit_code == 0
        assert "Poster Tube" in result.output
        assert "Small Satchel" not in result.output


class TestQuoteCommand:

    def test_quote_recommends_small_box(self):
        result = _run(
            "quote", "--length", "15", "--width", "10", "--height", "8", "--weight", "0.25",
        )
        assert result.exit_code == 0
        assert "Recommended: Small Box" in result.output
        assert "$8.80" in result.output

    def test_quote_weight_in_grams(self):
        result = _run(
            "quote", "--length", "30", "--width", "20", "--height", "1.5",
            "--weight", "400", "--grams",
        )
        assert result.exit_code == 0
        assert "Recommended: Small Satchel" in result.output

    def test_quote_custom_shipping(self):
        result = _run(
            "quote", "--length", "8", "--width", "8", "--height", "25", "--weight", "0.452",
        )
        assert result.exit_code == 0
        assert "Custom shipping required" in result.output

    def test_quote_rotate(self):
        result = _run(
            "quote", "--length", "8", "--width", "8", "--height", "25",
            "--weight", "0.452", "--rotate",
        )
        assert result.exit_code == 0
        assert "Recommended: Medium Box" in result.output

    def test_quote_invalid_dimensions(self):
        result = _run(
            "quote", "--length", "0", "--width", "8", "--height", "25", "--weight", "1",
        )
        assert result.exit_code == 1
        assert "length must be positive" in result.output

    def test_quote_with_packaging(self):
        result = _run(
            "quote", "--length", "15", "--width", "10", "--height", "8",
            "--weight", "0.25", "--packaging", "Bx1",
        )
        assert result.exit_code == 0
        assert "Packaging Bx1" in result.output
        assert "$3.50" in result.output
        assert "$12.65" in result.output

    def test_quote_unknown_packaging(self):
        result = _run(
            "quote", "--length", "15", "--width", "10", "--height", "8",
            "--weight", "0.25", "--packaging", "Bx9",
        )
        assert result.exit_code == 1
        assert "Packaging 'Bx9' not found" in result.output


class TestInputEdgeCases:

    def test_box_price_infinite_weight(self):
        result = _run("box", "price", "--id", "box-medium", "--weight", "inf")
        assert result.exit_code == 1
        assert "weight must be finite" in result.output
        assert "$inf" not in result.output

    def test_box_packaging_list(self):
        result = _run("box", "packaging")
        assert result.exit_code == 0
        assert "ToughPak" in result.output
        assert "$4.95" in result.output

    def test_catalog_with_nan_price(self, tmp_path):
        path = tmp_path / "boxes.json"
        path.write_text(
            '[{"id": "s", "name": "S", "length": 30, "width": 20, "height": 2, '
            '"max_weight": 5, "parcel_post_price": NaN, "express_post_price": 9, '
            '"type": "satchel"}]',
            encoding="utf-8",
        )
        result = _run("--catalog", str(path), "box", "list")
        assert result.exit_code == 1
        assert "Invalid box record #0" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_catalog_with_null_name(self, tmp_path):
        path = tmp_path / "boxes.json"
        path.write_text(json.dumps([{
            "id": "tube", "name": None, "length": 90, "width": 8,
            "height": 8, "max_weight": 2, "type": "box",
        }]), encoding="utf-8")
        result = _run("--catalog", str(path), "box", "list")
        assert result.exit_code == 1
        assert "Invalid box record #0" in result.output
