import pytest
import typer

from hangar.commands.targets import delete_target, list_targets, save_target, use_target
from hangar.utils.target_store import TargetStore

MODULE = "hangar.commands.targets"


@pytest.fixture
def store(mocker, tmp_path):
    mocker.patch("platform.system", return_value="Linux")
    mocker.patch.dict("os.environ", {"XDG_CONFIG_HOME": str(tmp_path)})
    store = TargetStore()
    mocker.patch(f"{MODULE}.target_store", store)
    return store


def test_save_target(mocker, store):
    mocker.patch(f"{MODULE}.success")
    mocker.patch(f"{MODULE}.info")

    save_target(
        name="ci", api_url="ci.example.com/", team_name="devs", token="tok", insecure=True
    )

    saved = store.get_target("ci")
    assert saved.api_url == "https://ci.example.com"
    assert saved.team_name == "devs"
    assert saved.insecure is True
    assert saved.token == "tok"
    assert store.get_current_target() == "ci"


def test_save_target_prompts_for_token(mocker, store):
    mock_prompt = mocker.patch(f"{MODULE}.Prompt.ask", return_value="prompted")
    mocker.patch(f"{MODULE}.success")
    mocker.patch(f"{MODULE}.info")

    save_target(name="ci", api_url="https://ci", team_name="main", token=None, insecure=False)

    mock_prompt.assert_called_once_with("Bearer token", password=True)
    assert store.get_token("ci") == "prompted"


def test_save_target_keeps_current_selection(mocker, store):
    mocker.patch(f"{MODULE}.success")
    mocker.patch(f"{MODULE}.info")
    store.set_current_target("other")

    save_target(name="ci", api_url="https://ci", team_name="main", token="t", insecure=False)

    assert store.get_current_target() == "other"


def test_save_target_empty_token(mocker, store):
    mocker.patch(f"{MODULE}.Prompt.ask", return_value="")
    mock_error = mocker.patch(f"{MODULE}.error")

    with pytest.raises(typer.Exit):
        save_target(name="ci", api_url="https://ci", team_name="main", token=None, insecure=False)

    mock_error.assert_called_once_with("A token is required to save a target")
    assert store.get_targets() == {}


def test_save_target_empty_url(mocker, store):
    mock_error = mocker.patch(f"{MODULE}.error")

    with pytest.raises(typer.Exit):
        save_target(name="ci", api_url=" ", team_name="main", token="t", insecure=False)

    mock_error.assert_called_once_with("--api-url must not be empty")


def test_use_target(mocker, store, target):
    mocker.patch(f"{MODULE}.success")
    store.save_target(target)

    use_target("ci")

    assert store.get_current_target() == "ci"


def test_use_unknown_target(mocker, store):
    mock_error = mocker.patch(f"{MODULE}.error")

    with pytest.raises(typer.Exit) as exc_info:
        use_target("nope")

    assert exc_info.value.exit_code == 1
    mock_error.assert_called_once_with("Target 'nope' not found")


def test_delete_target(mocker, store, target):
    mock_success = mocker.patch(f"{MODULE}.success")
    store.save_target(target)

    delete_target("ci")

    assert store.get_targets() == {}
    mock_success.assert_called_once_with("Target 'ci' deleted successfully")


def test_list_targets_empty(mocker, store):
    mock_info = mocker.patch(f"{MODULE}.info")

    list_targets()

    mock_info.assert_called_once()


def test_list_targets_marks_active(mocker, store, target):
    mock_print = mocker.patch(f"{MODULE}.console.print")
    store.save_target(target)
    store.set_current_target("ci")

    list_targets()

    table = mock_print.call_args.args[0]
    assert table.row_count == 1
    status_cells = list(table.columns[3].cells)
    assert status_cells == ["🟢 Active"]
