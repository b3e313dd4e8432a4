"""Tests for CatalogExporter."""
import json
from unittest.mock import patch

import pytest

from opcatalog.exporter.json_exporter import CatalogExporter
from opcatalog.introspection import Catalog, CatalogBuilder, OperationShape

from sample_clients import WidgetClient


@pytest.fixture
def catalog():
    return CatalogBuilder().build(WidgetClient, service="widgets")


class TestCatalogExporter:
    """Test catalog export."""

    def test_render_shape(self):
        catalog = Catalog(
            service="widgets",
            operations={
                "PutWidget": OperationShape(request={"size": "int", "Name": "str"}),
                "GetWidget": OperationShape(request={"Name": "str"}, response={"size": "int"}),
            },
        )

        rendered = CatalogExporter().render(catalog)

        assert json.loads(rendered) == {
            "GetWidget": {
                "requestParameters": {"Name": "str"},
                "responseElements": {"size": "int"},
            },
            "PutWidget": {
                "requestParameters": {"Name": "str", "size": "int"},
                "responseElements": None,
            },
        }
        # Keys sorted at every level
        assert rendered.index('"GetWidget"') < rendered.index('"PutWidget"')
        assert rendered.index('"Name"') < rendered.index('"size"')
        assert '\n  "GetWidget": {' in rendered

    def test_render_is_byte_identical(self, catalog):
        rebuilt = CatalogBuilder().build(WidgetClient, service="widgets")

        assert CatalogExporter().render(catalog) == CatalogExporter().render(rebuilt)

    def test_output_path(self, tmp_path):
        assert CatalogExporter().output_path("s3", tmp_path) == tmp_path / "s3_operations.json"
        assert (
            CatalogExporter(file_prefix="aws_").output_path("ec2", tmp_path)
            == tmp_path / "aws_ec2_operations.json"
        )

    def test_export_writes_file(self, catalog, tmp_path):
        output_dir = tmp_path / "nested" / "out"

        path = CatalogExporter().export(catalog, output_dir)

        assert path == output_dir / "widgets_operations.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["GetWidget"]["responseElements"] == {"size": "int"}
        assert data["ListWidgets"]["requestParameters"] is None

    def test_render_failure_writes_nothing(self, catalog, tmp_path, caplog):
        with patch.object(CatalogExporter, "render", side_effect=TypeError("not serializable")):
            path = CatalogExporter().export(catalog, tmp_path)

        assert path is None
        assert not (tmp_path / "widgets_operations.json").exists()
        assert "not serializable" in caplog.text

    def test_write_failure_returns_none(self, catalog, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        assert CatalogExporter().export(catalog, blocker) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
