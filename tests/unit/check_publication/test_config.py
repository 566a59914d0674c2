"""Tests for check_publication.config module."""

import pytest

from check_publication.config import ConfigError, load_config

ENV = {
    "MANIFEST_URL": "https://kindle.example.com/manifest",
    "KINDLE_BUCKET": "kindle-bucket",
    "STAGE": "PROD",
    "SOURCE_ADDRESS": "kindle@example.com",
    "PASS_TARGET_ADDRESSES": "team@example.com, lead@example.com",
    "FAILURE_TARGET_ADDRESSES": "oncall@example.com",
    "MINIMUM_ARTICLE_COUNT": "50",
    "RUN_HOURS": "0,1",
}


class TestLoadConfig:
    def test_parses_environment(self) -> None:
        config = load_config(ENV, today="2023-05-02")

        assert config.manifest_url == "https://kindle.example.com/manifest"
        assert config.bucket == "kindle-bucket"
        assert config.stage == "PROD"
        assert config.today == "2023-05-02"
        assert config.minimum_article_count == 50
        assert config.pass_target_addresses == ("team@example.com", "lead@example.com")
        assert config.failure_target_addresses == ("oncall@example.com",)
        assert config.run_hours == frozenset({0, 1})
        assert config.log_group_name == "/aws/lambda/kindle-gen-PROD"

    def test_defaults(self) -> None:
        config = load_config(ENV, today="2023-05-02")

        assert config.return_path is None
        assert config.region == "eu-west-1"
        assert config.timezone == "Europe/London"
        assert config.http_timeout == 10

    def test_optional_overrides(self) -> None:
        env = {
            **ENV,
            "RETURN_PATH": "bounces@example.com",
            "AWS_REGION": "us-east-1",
            "HTTP_TIMEOUT_SECONDS": "2.5",
        }
        config = load_config(env, today="2023-05-02")

        assert config.return_path == "bounces@example.com"
        assert config.region == "us-east-1"
        assert config.http_timeout == 2.5

    def test_today_defaults_to_local_date(self) -> None:
        config = load_config(ENV)
        assert len(config.today) == 10
        assert config.today[4] == "-" and config.today[7] == "-"

    def test_missing_variables_are_named(self) -> None:
        env = {k: v for k, v in ENV.items() if k not in ("STAGE", "RUN_HOURS")}

        with pytest.raises(ConfigError, match="STAGE, RUN_HOURS"):
            load_config(env)

    def test_bad_article_count(self) -> None:
        with pytest.raises(ConfigError, match="MINIMUM_ARTICLE_COUNT"):
            load_config({**ENV, "MINIMUM_ARTICLE_COUNT": "lots"})

    def test_bad_run_hours(self) -> None:
        with pytest.raises(ConfigError, match="RUN_HOURS"):
            load_config({**ENV, "RUN_HOURS": "1,25"})

    def test_blank_address_list(self) -> None:
        with pytest.raises(ConfigError, match="FAILURE_TARGET_ADDRESSES"):
            load_config({**ENV, "FAILURE_TARGET_ADDRESSES": " , "})

    def test_unknown_timezone(self) -> None:
        with pytest.raises(ConfigError, match="TIMEZONE"):
            load_config({**ENV, "TIMEZONE": "Europe/Londn"}, today="2023-05-02")

    def test_malformed_today(self) -> None:
        with pytest.raises(ConfigError, match="date must be YYYY-MM-DD"):
            load_config(ENV, today="26/03/2023")
