import pytest
from pydantic import ValidationError

from garden_assistant.shared.config.settings import Settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_choices_are_normalized():
    settings = make_settings(ENVIRONMENT="Production", LOG_LEVEL="debug", LOG_FORMAT="TEXT")

    assert settings.ENVIRONMENT == "production"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"
    assert not settings.is_testing


@pytest.mark.parametrize(
    "overrides",
    [
        {"ENVIRONMENT": "qa"},
        {"LOG_LEVEL": "LOUD"},
        {"LOG_FORMAT": "xml"},
        {"CORS_ORIGINS": "localhost:3000"},
        {"MODEL_REQUEST_TIMEOUT": 0},
        {"MAX_IMAGE_SIZE": -1},
    ],
)
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValidationError):
        make_settings(**overrides)


def test_derived_values():
    settings = make_settings(
        CORS_ORIGINS="http://a.test, https://b.test,",
        GOOGLE_GEMINI_API_KEY="key",
        MODEL_REQUEST_TIMEOUT=30,
    )

    assert settings.cors_origins_list == ["http://a.test", "https://b.test"]
    assert settings.model_configured
    assert settings.get_model_api_config()["timeout"] == 30
