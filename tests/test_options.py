"""Options validation and environment resolution."""

from __future__ import annotations

import pytest

from trycall import ConfigurationError, Options

pytestmark = pytest.mark.unit


def test_defaults_match_message_contract() -> None:
    options = Options()

    assert options.anonymous_label == "anonymous function"
    assert options.message_prefix == "Unknown error: from "
    assert options.offload_sync is False


def test_options_are_frozen() -> None:
    options = Options()

    with pytest.raises(AttributeError):
        options.offload_sync = True  # type: ignore[misc]


@pytest.mark.parametrize("label", ["", None, 3])
def test_rejects_invalid_anonymous_label(label: object) -> None:
    with pytest.raises(ConfigurationError) as exc:
        Options(anonymous_label=label)  # type: ignore[arg-type]

    assert exc.value.hint is not None


def test_rejects_non_string_prefix() -> None:
    with pytest.raises(ConfigurationError):
        Options(message_prefix=None)  # type: ignore[arg-type]


def test_rejects_non_bool_offload() -> None:
    with pytest.raises(ConfigurationError, match="offload_sync must be a bool"):
        Options(offload_sync="yes")  # type: ignore[arg-type]


def test_from_env_without_variables_uses_defaults() -> None:
    assert Options.from_env() == Options()


def test_from_env_reads_trycall_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCALL_ANONYMOUS_LABEL", "<fn>")
    monkeypatch.setenv("TRYCALL_MESSAGE_PREFIX", "failed in ")
    monkeypatch.setenv("TRYCALL_OFFLOAD_SYNC", "yes")

    options = Options.from_env()

    assert options == Options(
        anonymous_label="<fn>", message_prefix="failed in ", offload_sync=True
    )


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("on", True), ("0", False)])
def test_from_env_coerces_bool(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("TRYCALL_OFFLOAD_SYNC", raw)

    assert Options.from_env().offload_sync is expected


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCALL_ANONYMOUS_LABEL", "<fn>")

    assert Options.from_env(anonymous_label="cb").anonymous_label == "cb"


def test_from_env_reads_explicit_dotenv_file(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("TRYCALL_ANONYMOUS_LABEL=from-file\nTRYCALL_OFFLOAD_SYNC=true\n")

    options = Options.from_env(dotenv_path=env_file)

    assert options.anonymous_label == "from-file"
    assert options.offload_sync is True


def test_environment_wins_over_dotenv_file(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("TRYCALL_ANONYMOUS_LABEL=from-file\n")
    monkeypatch.setenv("TRYCALL_ANONYMOUS_LABEL", "from-env")

    assert Options.from_env(dotenv_path=env_file).anonymous_label == "from-env"


@pytest.mark.allow_dotenv
def test_from_env_discovers_dotenv_in_cwd(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".env").write_text("TRYCALL_MESSAGE_PREFIX=cwd>\n")
    monkeypatch.chdir(tmp_path)

    assert Options.from_env().message_prefix == "cwd>"


def test_invalid_env_value_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCALL_ANONYMOUS_LABEL", "")

    with pytest.raises(ConfigurationError):
        Options.from_env()
