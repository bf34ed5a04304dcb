"""Tests for RendererFactory, CompilationPolicy and the Sanic integration."""
import pytest

from sanic_render import renderer
from sanic_render.exceptions import TemplateCompileError
from sanic_render.middleware import CompilationPolicy, RendererFactory
from sanic_render.support import Environment
from sanic_render.view import Renderer


class TestCompilationPolicy:

    def test_development_recompiles(self, development_policy):
        assert development_policy.should_recompile() is True

    def test_production_reuses(self, production_policy):
        assert production_policy.should_recompile() is False

    @pytest.mark.parametrize("value, expected", [
        (None, True),
        ("", True),
        ("development", True),
        ("production", False),
        ("staging", False),
        ("test", False),
    ])
    def test_default_policy_reads_app_env(self, monkeypatch, value, expected):
        if value is not None:
            monkeypatch.setenv("APP_ENV", value)

        assert CompilationPolicy().should_recompile() is expected


class TestRendererFactory:

    def test_compiles_at_construction(self, template_dir, options_for, production_policy):
        root = template_dir({"layout.tmpl": "x", "page.tmpl": "y"})

        factory = RendererFactory(options_for(root), policy=production_policy)

        assert factory.templates.names() == ["layout", "page"]

    def test_compile_error_propagates_from_constructor(self, template_dir, options_for, production_policy):
        root = template_dir({"layout.tmpl": "{% endif %}"})

        with pytest.raises(TemplateCompileError):
            RendererFactory(options_for(root), policy=production_policy)

    def test_renderer_gets_a_clone(self, template_dir, options_for, production_policy):
        root = template_dir({"layout.tmpl": "x"})
        factory = RendererFactory(options_for(root), policy=production_policy)

        first = factory.renderer()
        second = factory.renderer()

        assert isinstance(first, Renderer)
        assert first.templates is not factory.templates
        assert first.templates is not second.templates
        assert first.writer is not second.writer

    def test_production_keeps_first_compilation(self, template_dir, options_for, production_policy):
        root = template_dir({"layout.tmpl": "x"})
        factory = RendererFactory(options_for(root), policy=production_policy)
        compiled = factory.templates

        template_dir({"added.tmpl": "new"})
        r = factory.renderer()

        assert factory.templates is compiled
        assert "added" not in r.templates

    def test_development_recompiles_each_request(self, template_dir, options_for, development_policy):
        root = template_dir({"layout.tmpl": "{{ yield() }}", "page.tmpl": "old"})
        factory = RendererFactory(options_for(root), policy=development_policy)
        before = factory.renderer()

        template_dir({"page.tmpl": "new", "added.tmpl": "added"})
        after = factory.renderer()

        assert "added" in after.templates
        assert after.html(200, "page").body == b"new"
        # A renderer taken before the swap keeps its snapshot
        assert before.html(200, "page").body == b"old"

    def test_development_recompile_error_propagates(self, template_dir, options_for, development_policy):
        root = template_dir({"layout.tmpl": "ok"})
        factory = RendererFactory(options_for(root), policy=development_policy)

        template_dir({"layout.tmpl": "{% for %}"})

        with pytest.raises(TemplateCompileError):
            factory.renderer()

    def test_defaults_to_templates_directory(self, tmp_path, production_policy):
        (tmp_path / "templates").mkdir()
        (tmp_path / "templates" / "layout.tmpl").write_text("x")

        factory = renderer(policy=production_policy)

        assert factory.options.directory == "templates"
        assert factory.templates.names() == ["layout"]


class TestSanicIntegration:
    """End-to-end through a Sanic app."""

    def test_install_registers_request_middleware_only(self, app, template_dir, options_for, production_policy):
        root = template_dir({"layout.tmpl": "x"})
        factory = RendererFactory(options_for(root), policy=production_policy)

        assert factory.install(app) is factory
        assert list(app.request_middleware) == [factory.before_request]
        assert len(app.response_middleware) == 0

    @pytest.fixture
    def client_app(self, app, template_dir, options_for, production_policy):
        root = template_dir({
            "layout.tmpl": "<html>{{ yield() }}</html>",
            "users/show.tmpl": "<p>{{ name }}</p>",
        })
        RendererFactory(options_for(root), policy=production_policy).install(app)

        @app.get("/json")
        async def json_handler(request):
            return request.ctx.render.json(200, {"hello": "world"})

        @app.get("/html")
        async def html_handler(request):
            return request.ctx.render.html(200, "users/show", {"name": "Ada"})

        @app.get("/missing")
        async def missing_handler(request):
            return request.ctx.render.html(200, "users/missing", {"name": "Ada"})

        @app.get("/gone")
        async def gone_handler(request):
            return request.ctx.render.error(404)

        @app.get("/cycle")
        async def cycle_handler(request):
            value = []
            value.append(value)
            return request.ctx.render.json(200, value)

        return app

    def test_json_response(self, client_app):
        _, response = client_app.test_client.get("/json")

        assert response.status == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json == {"hello": "world"}

    def test_html_response(self, client_app):
        _, response = client_app.test_client.get("/html")

        assert response.status == 200
        assert response.headers["content-type"] == "text/html"
        assert response.text == "<html><p>Ada</p></html>"

    def test_missing_content_is_not_a_server_error(self, client_app):
        _, response = client_app.test_client.get("/missing")

        assert response.status == 200
        assert response.text == "<html>nope</html>"

    def test_status_only_response(self, client_app):
        _, response = client_app.test_client.get("/gone")

        assert response.status == 404
        assert response.body == b""

    def test_serialization_failure(self, client_app):
        _, response = client_app.test_client.get("/cycle")

        assert response.status == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.strip()


def test_environment_enum_values():
    assert Environment.from_value("DEVELOPMENT") is Environment.DEVELOPMENT
    assert Environment.from_value("production") is Environment.PRODUCTION
