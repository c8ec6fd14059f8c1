import copy
import pickle

import pytest
from dotenv import dotenv_values
from pydantic import ValidationError

from meilisdk import (
    ClientSettings,
    Dump,
    DumpStatus,
    Index,
    MeiliSearchApiError,
    MeiliSearchParseError,
    MeiliSearchTransportError,
)
from meilisdk.core import config
from meilisdk.core.config import write_user_env_vars
from meilisdk.core.domain import parse_entities, parse_entity


def test_parse_index_with_aliases():
    index = parse_entity('{"uid": "movies", "primaryKey": "id", "unknown": 1}', Index)

    assert index.uid == "movies"
    assert index.primary_key == "id"


def test_missing_uid_is_a_parse_error():
    with pytest.raises(MeiliSearchParseError):
        parse_entity('{"primaryKey": "id"}', Index)


def test_invalid_json_is_a_parse_error():
    with pytest.raises(MeiliSearchParseError):
        parse_entity("not json", Index)


def test_empty_body_is_a_parse_error():
    with pytest.raises(MeiliSearchParseError):
        parse_entity("", Dump)


def test_parse_entities_requires_a_list():
    assert [i.uid for i in parse_entities('[{"uid": "a"}, {"uid": "b"}]', Index)] == ["a", "b"]
    with pytest.raises(MeiliSearchParseError):
        parse_entities('{"uid": "a"}', Index)


def test_unknown_dump_status_is_rejected():
    with pytest.raises(MeiliSearchParseError):
        parse_entity('{"uid": "d1", "status": "exploded"}', Dump)


@pytest.mark.parametrize(
    "raw, finished",
    [
        ("in_progress", False),
        ("processing", False),
        ("failed", True),
        ("done", True),
    ],
)
def test_dump_status_values(raw, finished):
    assert DumpStatus(raw).finished is finished


def test_settings_are_immutable():
    settings = ClientSettings(host_url="http://meili.test", api_key="k")

    with pytest.raises(ValidationError):
        settings.api_key = "other"


def test_settings_read_env(monkeypatch):
    monkeypatch.setenv("MEILI_HOST_URL", "http://search.internal:7700")
    monkeypatch.setenv("MEILI_API_KEY", "secret")

    settings = ClientSettings()

    assert settings.host_url == "http://search.internal:7700"
    assert settings.api_key == "secret"


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("MEILI_HOST_URL", "MEILI_API_KEY", "MEILI_TIMEOUT_SECONDS", "MEILI_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)


def test_write_user_env_vars_merges(tmp_path, clean_env):
    env_path = tmp_path / "meilisdk" / ".env"
    write_user_env_vars({"MEILI_HOST_URL": "http://a:7700"}, env_path=env_path)
    write_user_env_vars({"MEILI_API_KEY": "k", "MEILI_HOST_URL": None}, env_path=env_path)

    assert env_path.read_text(encoding="utf-8").startswith("#")
    assert dotenv_values(env_path) == {"MEILI_HOST_URL": "http://a:7700", "MEILI_API_KEY": "k"}


def test_written_api_key_survives_reload(tmp_path, clean_env):
    env_path = tmp_path / ".env"
    key = 'abc #def "quoted" it\'s'

    write_user_env_vars({"MEILI_API_KEY": key}, env_path=env_path)

    assert ClientSettings(_env_file=env_path).api_key == key


def test_project_env_file_overrides_user_env_file(tmp_path, monkeypatch, clean_env):
    user_dir = tmp_path / "user"
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    monkeypatch.setattr(config, "get_user_config_dir", lambda: user_dir)
    monkeypatch.chdir(project_dir)

    write_user_env_vars({"MEILI_HOST_URL": "http://user-level:7700", "MEILI_API_KEY": "user-key"})
    (project_dir / ".env").write_text("MEILI_HOST_URL=http://project-level:7700\n", encoding="utf-8")

    settings = ClientSettings(_env_file=config.default_env_files())

    assert settings.host_url == "http://project-level:7700"
    assert settings.api_key == "user-key"
    assert ClientSettings.model_config["env_file"][-1] == ".env"


def test_api_error_survives_pickle_and_copy():
    err = MeiliSearchApiError(
        status_code=404,
        message="Index movies not found",
        error_code="index_not_found",
        error_type="invalid_request_error",
        error_link="https://docs.meilisearch.com/errors#index_not_found",
    )

    for clone in (pickle.loads(pickle.dumps(err)), copy.copy(err)):
        assert type(clone) is MeiliSearchApiError
        assert (clone.status_code, clone.error_code, clone.message) == (404, "index_not_found", err.message)
        assert clone.error_link == err.error_link
        assert str(clone) == str(err)


def test_transport_error_survives_pickle():
    err = MeiliSearchTransportError(status_code=502, body="Bad Gateway")

    clone = pickle.loads(pickle.dumps(err))

    assert (clone.status_code, clone.body) == (502, "Bad Gateway")
