"""Test configuration and fixtures for lsdirp."""

import os

import pytest

SAMPLE_DIR = "tests/sample_dir"


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path, monkeypatch):
    """Create a project containing tests/sample_dir and make it the working directory.

    Layout below tests/sample_dir (11 listable files, 4 listable directories):

        .env
        README.md
        assets/
        src/.eslintrc, src/index.ts, src/app.ts, src/file.js, src/style.css
        src/sub_dir/helper.ts
        utils/file.js, utils/format.js, utils/notes.txt
        node_modules/pkg/index.js   (always ignored)
        .git/HEAD                   (always ignored)

    The project root also holds src/main.py, node_modules/ and .git/.
    """
    sample = tmp_path / "tests" / "sample_dir"
    files = [
        ".env",
        "README.md",
        "src/.eslintrc",
        "src/index.ts",
        "src/app.ts",
        "src/file.js",
        "src/style.css",
        "src/sub_dir/helper.ts",
        "utils/file.js",
        "utils/format.js",
        "utils/notes.txt",
        "node_modules/pkg/index.js",
        ".git/HEAD",
    ]
    for name in files:
        path = sample / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"// {name}\n")
    (sample / "assets").mkdir()

    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('main')\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("module.exports = {}\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]\n")

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def symlink_tree(tmp_path, monkeypatch):
    """Create a tree with directory symlinks, one of them forming a cycle.

        tree/real/data.txt
        tree/real/inner/loop -> tree/real   (cycle)
        tree/alias -> tree/real
        tree/data-link -> tree/real/data.txt
    """
    tree = tmp_path / "tree"
    (tree / "real" / "inner").mkdir(parents=True)
    (tree / "real" / "data.txt").write_text("data\n")

    try:
        os.symlink(tree / "real", tree / "real" / "inner" / "loop", target_is_directory=True)
        os.symlink(tree / "real", tree / "alias", target_is_directory=True)
        os.symlink(tree / "real" / "data.txt", tree / "data-link")
    except (OSError, NotImplementedError):
        # On some platforms (like Windows) creating symlinks might require special permissions
        pytest.skip("Symlink creation not supported on this platform/environment")

    monkeypatch.chdir(tmp_path)
    return tree
