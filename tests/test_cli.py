"""Tests for the obsd command line."""

import pytest
from typer.testing import CliRunner

from obsd import __version__
from obsd.cli import app

runner = CliRunner()


@pytest.fixture
def cli(config_file):
    """Invoke the CLI against the temporary vault."""

    def _invoke(*args: str):
        return runner.invoke(app, list(args))

    return _invoke


def test_version() -> None:
    """Test that --version prints the package version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_init(cli, vault) -> None:
    """Test that init creates folders and AGENTS.md."""
    result = cli("init")

    assert result.exit_code == 0
    assert "Vault initialized with 11 new directories" in result.output
    assert (vault / "AGENTS.md").is_file()

    again = cli("init")
    assert again.exit_code == 0
    assert "All directories already exist." in again.output


def test_new_project(cli, vault) -> None:
    """Test that new project reports the generated prefix."""
    result = cli("new", "project", "My Website")

    assert result.exit_code == 0
    assert "Generated prefix:" in result.output
    assert "Created project: My Website" in result.output
    created = list((vault / "00_projects").iterdir())
    assert len(created) == 1
    assert created[0].name.endswith("_my-website")


def test_new_default_title(cli, vault) -> None:
    """Test that the title defaults to Untitled."""
    result = cli("new", "resource")

    assert result.exit_code == 0
    assert (vault / "02_resources" / "untitled.md").is_file()


def test_new_resource_twice(cli, vault) -> None:
    """Test that an existing target exits with status 1."""
    assert cli("new", "resource", "X", "--content", "first").exit_code == 0

    result = cli("new", "resource", "X", "--content", "second")

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert "first" in (vault / "02_resources" / "x.md").read_text(encoding="utf-8")


def test_new_unknown_type(cli) -> None:
    """Test that an unknown template exits with status 1."""
    result = cli("new", "widget", "Thing")

    assert result.exit_code == 1
    assert "Template 'widget' not found" in result.output


def test_new_work_requires_prefix(cli) -> None:
    """Test that validation failures exit with status 1."""
    result = cli("new", "work", "Task")

    assert result.exit_code == 1
    assert "--prefix required for work type" in result.output


def test_new_post_with_area(cli, area) -> None:
    """Test the post flow through the CLI."""
    result = cli("new", "post", "Hello", "--area", "pb")

    assert result.exit_code == 0
    posts = list((area / "posts" / "backlog").iterdir())
    assert len(posts) == 1
    assert posts[0].name.endswith("_hello.md")


def test_archive(cli, vault, project) -> None:
    """Test that archive moves the project."""
    result = cli("archive", "project", "ab_my-site")

    assert result.exit_code == 0
    assert "Archived project: ab_my-site" in result.output
    assert (vault / "03_archive" / "projects" / "ab_my-site").is_dir()
    assert not project.exists()


def test_archive_invalid_type(cli) -> None:
    """Test that only project, area and resource can be archived."""
    result = cli("archive", "post", "abc_hello")

    assert result.exit_code == 1
    assert "Invalid type: post" in result.output
    assert "project, area, resource" in result.output


def test_archive_missing(cli) -> None:
    """Test that a missing folder exits with status 1."""
    result = cli("archive", "area", "zz_nothing")

    assert result.exit_code == 1
    assert "Folder not found" in result.output


def test_mark_work_done(cli, project, make_item) -> None:
    """Test mark work through the CLI."""
    make_item(project, "work", "active", "xy_task.md", "---\nstatus: Active\ntags:\n  - status/active\n---\n- status/active\n")

    result = cli("mark", "work", "--prefix", "ab", "--item", "xy", "--status", "done")

    assert result.exit_code == 0
    assert "Marked work xy as done" in result.output
    done = project / "work" / "done" / "task.md"
    assert done.read_text(encoding="utf-8") == "---\nstatus: Done\ntags:\n---\n- status/active\n"
    assert not (project / "work" / "active" / "xy_task.md").exists()


def test_mark_post_active(cli, area, make_item) -> None:
    """Test mark post through the CLI."""
    make_item(area, "posts", "backlog", "abc_hello.md", "---\ntags:\n  - status/backlog\n---\n")

    result = cli("mark", "post", "--prefix", "pb", "--item", "abc", "--status", "active")

    assert result.exit_code == 0
    moved = area / "posts" / "active" / "abc_hello.md"
    assert moved.read_text(encoding="utf-8") == "---\ntags:\n  - status/active\n---\n"


@pytest.mark.parametrize(
    "args",
    [
        ["mark", "work", "--prefix", "ab", "--item", "xy"],
        ["mark", "work", "--prefix", "ab", "--item", "xy", "--status", "blocked"],
        ["mark", "task", "--prefix", "ab", "--item", "xy", "--status", "done"],
        ["mark", "post", "--prefix", "ab", "--item", "xy", "--status", "done"],
    ],
)
def test_mark_validation_failures(cli, project, args) -> None:
    """Test that bad mark options exit with status 1."""
    result = cli(*args)

    assert result.exit_code == 1


def test_missing_config(monkeypatch, tmp_path) -> None:
    """Test that a missing config names the attempted paths and exits 1."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OBSD_CONFIG_FILENAME", "absent.yml")

    result = runner.invoke(app, ["init"])

    assert result.exit_code == 1
    assert "Templates file not found!" in result.output
    assert "absent.yml" in result.output


def test_config_command(cli, config_file, vault) -> None:
    """Test that config shows the resolved file and vault."""
    result = cli("config")

    assert result.exit_code == 0
    assert "Configuration" in result.output
    assert "solo_episode" in result.output


def test_config_lists_every_template(cli, config) -> None:
    """Test that no template name is cut off at the terminal width."""
    result = cli("config")

    assert result.exit_code == 0
    for name in config.templates:
        assert f"- {name}\n" in result.output


def test_mark_stray_item_name(cli, project, make_item) -> None:
    """Test that a file without a slug gives a one-line error, not a traceback."""
    make_item(project, "work", "backlog", "xy_", "stray")

    result = cli("mark", "work", "--prefix", "ab", "--item", "xy", "--status", "active")

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "No work item 'xy' found" in result.output


@pytest.mark.parametrize("name", [".", "..", "../01_areas"])
def test_archive_rejects_root_names(cli, vault, project, name) -> None:
    """Test that archive never moves a root folder."""
    result = cli("archive", "project", name)

    assert result.exit_code == 1
    assert "Invalid archive name" in result.output
    assert project.is_dir()
    assert not (vault / "03_archive").exists()
