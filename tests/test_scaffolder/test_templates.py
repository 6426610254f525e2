"""Tests for TemplateRenderer and its custom filters."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from springgen.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


class TestPackagedTemplates:
    def test_lists_every_artifact_template(self, renderer):
        assert renderer.list_templates() == [
            "build/build.gradle.j2",
            "build/pom.xml.j2",
            "build/settings.gradle.j2",
            "java/Application.java.j2",
            "java/Controller.java.j2",
            "java/Entity.java.j2",
            "java/OpenApiConfig.java.j2",
            "java/Repository.java.j2",
            "java/Service.java.j2",
            "resources/application.properties.j2",
            "resources/application.yml.j2",
        ]

    def test_list_by_prefix(self, renderer):
        assert renderer.list_templates("resources") == [
            "resources/application.properties.j2",
            "resources/application.yml.j2",
        ]

    def test_unknown_prefix(self, renderer):
        assert renderer.list_templates("missing") == []

    def test_missing_variable_is_an_error(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("build/settings.gradle.j2", {})


class TestCustomTemplates:
    @pytest.fixture
    def custom(self, tmp_path: Path) -> TemplateRenderer:
        (tmp_path / "dq.j2").write_text('value: "{{ value | yaml_dq }}"\n', encoding="utf-8")
        (tmp_path / "xml.j2").write_text("<name>{{ value | xml_escape }}</name>", encoding="utf-8")
        (tmp_path / "raw.j2").write_text("{{ value }}", encoding="utf-8")
        return TemplateRenderer(tmp_path)

    def test_yaml_dq_escapes_quotes_and_backslashes(self, custom):
        assert custom.render("dq.j2", {"value": 'a"b\\c'}) == 'value: "a\\"b\\\\c"\n'

    def test_xml_escape(self, custom):
        assert custom.render("xml.j2", {"value": "R&D <x>"}) == "<name>R&amp;D &lt;x&gt;</name>"

    def test_no_html_autoescape(self, custom):
        assert custom.render("raw.j2", {"value": "a<b>&c"}) == "a<b>&c"

    def test_trailing_newline_kept(self, custom):
        assert custom.render("dq.j2", {"value": ""}).endswith('""\n')
