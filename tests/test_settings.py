import logging

import pytest

from slingdeploy.modules.bundlesupport.deploy import (
    SlingPostDeployMethod,
    WebConsoleDeployMethod,
    WebDavDeployMethod,
    create_deploy_method,
    resolve_deployment_method,
)
from slingdeploy.modules.bundlesupport.domain import BundleDeploymentMethod
from slingdeploy.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.sling_url == "http://localhost:8080/system/console"
    assert settings.sling_mime_type == "application/java-archive"
    assert settings.sling_bundle_start_level == "20"
    assert settings.sling_fail_on_error
    assert settings.sling_deploy_method is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SLING_URL", "https://author.example.com/system/console")
    monkeypatch.setenv("SLING_DEPLOY_METHOD", "webdav")
    monkeypatch.setenv("SLING_FAIL_ON_ERROR", "false")
    monkeypatch.setenv("SLING_HTTP_RESPONSE_TIMEOUT_SEC", "5")

    settings = Settings(_env_file=None)

    assert settings.sling_url == "https://author.example.com/system/console"
    assert resolve_deployment_method(settings.sling_deploy_method) is BundleDeploymentMethod.WEB_DAV
    assert not settings.sling_fail_on_error
    assert settings.sling_http_response_timeout_sec == 5


@pytest.mark.parametrize(
    "value, expected",
    [
        ("WebConsole", BundleDeploymentMethod.WEB_CONSOLE),
        ("webdav", BundleDeploymentMethod.WEB_DAV),
        ("SLINGPOSTSERVLET", BundleDeploymentMethod.SLING_POST_SERVLET),
        ("sling_post_servlet", BundleDeploymentMethod.SLING_POST_SERVLET),
    ],
)
def test_parse_deployment_method(value, expected):
    assert BundleDeploymentMethod.parse(value) is expected


def test_parse_unknown_method():
    with pytest.raises(ValueError, match="WebConsole, WebDAV, SlingPostServlet"):
        BundleDeploymentMethod.parse("scp")


def test_default_method_is_web_console():
    assert resolve_deployment_method(None) is BundleDeploymentMethod.WEB_CONSOLE


def test_use_put_selects_webdav_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        assert resolve_deployment_method(None, use_put=True) is BundleDeploymentMethod.WEB_DAV
    assert "use_put" in caplog.text


def test_each_method_has_a_strategy():
    assert isinstance(create_deploy_method(BundleDeploymentMethod.WEB_CONSOLE), WebConsoleDeployMethod)
    assert isinstance(create_deploy_method(BundleDeploymentMethod.WEB_DAV), WebDavDeployMethod)
    assert isinstance(create_deploy_method(BundleDeploymentMethod.SLING_POST_SERVLET), SlingPostDeployMethod)
