"""Tests for seo_tools.config.load_site_config."""

import pydantic
import pytest

from seo_tools.errors import ConfigurationError
from seo_tools.config import load_site_config

_ENV = {
    "SEO_SITE_NAME": "Acme",
    "SEO_SITE_URL": "https://acme.example",
}


class TestLoadSiteConfig:
    def test_minimal_environment(self):
        config = load_site_config(_ENV)
        assert config.name == "Acme"
        assert config.url == "https://acme.example"
        assert config.logo_url is None
        assert config.social_media_links == ()
        assert config.locale == "sv_SE"

    def test_full_environment(self):
        env = dict(
            _ENV,
            SEO_SITE_LOGO_URL="https://acme.example/logo.png",
            SEO_SITE_DESCRIPTION="Tools",
            SEO_SITE_AUTHOR="Jane Doe",
            SEO_SITE_SOCIAL_LINKS="https://twitter.com/acme, https://github.com/acme,",
            SEO_OG_LOCALE="en_US",
        )
        config = load_site_config(env)
        assert config.logo_url == "https://acme.example/logo.png"
        assert config.description == "Tools"
        assert config.author == "Jane Doe"
        assert config.social_media_links == ("https://twitter.com/acme", "https://github.com/acme")
        assert config.locale == "en_US"

    @pytest.mark.parametrize("missing", ["SEO_SITE_NAME", "SEO_SITE_URL"])
    def test_missing_required_variable(self, missing):
        env = {k: v for k, v in _ENV.items() if k != missing}
        with pytest.raises(ConfigurationError, match=missing):
            load_site_config(env)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SEO_SITE_NAME", "From Env")
        monkeypatch.setenv("SEO_SITE_URL", "https://env.example")
        assert load_site_config().name == "From Env"

    def test_config_is_immutable(self):
        config = load_site_config(_ENV)
        with pytest.raises(pydantic.ValidationError):
            config.name = "Other"
