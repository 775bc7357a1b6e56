import json
from pathlib import Path

import pytest

import create_comet.paths as paths
import create_comet.templates as templates
from create_comet.services.errors import IoFailedError, ValidationFailedError


def _make_template(root: Path) -> Path:
    template = root / "template"
    (template / "src" / "app").mkdir(parents=True)
    (template / "nested").mkdir()
    (template / "empty-dir").mkdir()
    (template / "package.json").write_text(
        json.dumps({"name": "placeholder", "version": "1.0.0", "scripts": {"dev": "next dev"}}),
        encoding="utf-8",
    )
    (template / ".gitignore").write_text("node_modules\n", encoding="utf-8")
    (template / "src" / "app" / "page.tsx").write_text("export default 1;\n", encoding="utf-8")
    (template / "nested" / "package.json").write_text('{"name": "inner"}', encoding="utf-8")
    (template / "logo.bin").write_bytes(bytes(range(256)))
    return template


def test_list_template_files_includes_dotfiles(tmp_path: Path) -> None:
    template = _make_template(tmp_path)

    files = templates.list_template_files(template)

    assert files == [
        ".gitignore",
        "logo.bin",
        "nested/package.json",
        "package.json",
        "src/app/page.tsx",
    ]


def test_list_template_files_missing_root(tmp_path: Path) -> None:
    with pytest.raises(IoFailedError):
        templates.list_template_files(tmp_path / "missing")


def test_rewrite_manifest_keeps_key_order() -> None:
    text = '{"version": "0.1.0", "name": "x", "private": true}'

    rewritten = templates.rewrite_manifest(text, "demo")

    assert list(json.loads(rewritten)) == ["version", "name", "private"]
    assert json.loads(rewritten)["name"] == "demo"
    assert rewritten.startswith('{\n  "version"')
    assert not rewritten.endswith("\n")


def test_rewrite_manifest_adds_missing_name() -> None:
    rewritten = templates.rewrite_manifest('{"private": true}', "demo")

    assert json.loads(rewritten) == {"private": True, "name": "demo"}


def test_rewrite_manifest_keeps_non_ascii() -> None:
    rewritten = templates.rewrite_manifest('{"name": "x", "description": "café"}', "demo")

    assert "café" in rewritten


@pytest.mark.parametrize("text", ["not json", "[1, 2]"])
def test_rewrite_manifest_rejects_invalid(text: str) -> None:
    with pytest.raises(ValidationFailedError):
        templates.rewrite_manifest(text, "demo")


def test_copy_template_mirrors_tree(tmp_path: Path) -> None:
    template = _make_template(tmp_path)
    dest = tmp_path / "out"
    dest.mkdir()

    written = templates.copy_template(template, dest, "demo")

    assert written == templates.list_template_files(template)
    for relative in written:
        assert (dest / relative).is_file()
    assert not (dest / "empty-dir").exists()
    assert (dest / "logo.bin").read_bytes() == bytes(range(256))
    assert (dest / ".gitignore").read_bytes() == (template / ".gitignore").read_bytes()
    assert (dest / "nested" / "package.json").read_text(encoding="utf-8") == '{"name": "inner"}'
    manifest = json.loads((dest / "package.json").read_text(encoding="utf-8"))
    assert manifest == {"name": "demo", "version": "1.0.0", "scripts": {"dev": "next dev"}}


def test_copy_template_invalid_manifest_aborts(tmp_path: Path) -> None:
    template = _make_template(tmp_path)
    (template / "package.json").write_text("{broken", encoding="utf-8")
    dest = tmp_path / "out"
    dest.mkdir()

    with pytest.raises(ValidationFailedError):
        templates.copy_template(template, dest, "demo")


def test_copy_template_write_failure_aborts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    template = _make_template(tmp_path)
    dest = tmp_path / "out"
    dest.mkdir()

    def fail_copy(source: Path, target: Path) -> None:
        raise PermissionError(f"denied: {target}")

    monkeypatch.setattr(templates.shutil, "copyfile", fail_copy)

    with pytest.raises(IoFailedError) as excinfo:
        templates.copy_template(template, dest, "demo")

    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert excinfo.value.code == "io_failed"


def test_copy_default_template(tmp_path: Path) -> None:
    root = paths.template_dir("default")
    dest = tmp_path / "demo"
    dest.mkdir()

    written = templates.copy_template(root, dest, "demo")

    assert "package.json" in written
    assert ".gitignore" in written
    assert ".env.local" in written
    manifest = json.loads((dest / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "demo"
    assert manifest["scripts"]["dev"].startswith("next dev")


def test_copy_template_manifest_not_utf8(tmp_path: Path) -> None:
    template = _make_template(tmp_path)
    (template / "package.json").write_bytes(b'{"name": "\xff"}')
    dest = tmp_path / "out"
    dest.mkdir()

    with pytest.raises(ValidationFailedError, match="not valid UTF-8") as excinfo:
        templates.copy_template(template, dest, "demo")

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
