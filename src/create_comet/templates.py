"""Bundled template enumeration and copying."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from . import log, paths
from .services.errors import IoFailedError, ServiceError, ValidationFailedError


def list_template_files(template_root: Path) -> list[str]:
    """Return every file under ``template_root`` as a relative POSIX path.

    Hidden files are included. Directories themselves are not listed, so an
    empty directory in the template has no entry.

    Args:
        template_root: Root of the template tree.

    Returns:
        Sorted relative paths such as ``"src/app/page.tsx"``.

    Raises:
        IoFailedError: If the template root is missing or unreadable.
    """
    if not template_root.is_dir():
        raise IoFailedError(f"template directory not found: {template_root}")
    try:
        return sorted(
            path.relative_to(template_root).as_posix()
            for path in template_root.rglob("*")
            if path.is_file()
        )
    except OSError as exc:
        raise IoFailedError(f"failed to read template directory: {template_root}") from exc


def rewrite_manifest(text: str, project_name: str) -> str:
    """Set the ``name`` field of a JSON package manifest.

    Key order is kept; a missing ``name`` key is appended.

    Example:
        >>> rewrite_manifest('{"name": "x", "private": true}', "demo")
        '{\\n  "name": "demo",\\n  "private": true\\n}'
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationFailedError(f"{paths.MANIFEST_FILENAME} is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise ValidationFailedError(f"{paths.MANIFEST_FILENAME} must contain a JSON object")
    payload["name"] = project_name
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _copy_file(source: Path, dest: Path, relative: str, project_name: str) -> None:
    paths.ensure_dir(dest.parent)
    if relative == paths.MANIFEST_FILENAME:
        try:
            text = source.read_bytes().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationFailedError(f"{relative} is not valid UTF-8") from exc
        dest.write_text(rewrite_manifest(text, project_name), encoding="utf-8")
        return
    shutil.copyfile(source, dest)


def copy_template(template_root: Path, project_path: Path, project_name: str) -> list[str]:
    """Copy the template tree into ``project_path``.

    Every file is copied byte for byte except the root manifest, whose
    ``name`` is replaced with ``project_name``. The first failing file aborts
    the copy.

    Args:
        template_root: Root of the template tree.
        project_path: Destination directory.
        project_name: Name written into the manifest.

    Returns:
        Relative paths of the files written.

    Raises:
        IoFailedError: A file could not be read or written.
        ValidationFailedError: The manifest could not be parsed.
    """
    written: list[str] = []
    try:
        with log.status("Setting up project files..."):
            for relative in list_template_files(template_root):
                source = template_root / relative
                dest = project_path / relative
                log.trace(f"copy {relative}")
                try:
                    _copy_file(source, dest, relative, project_name)
                except OSError as exc:
                    raise IoFailedError(f"failed to copy template file: {relative}") from exc
                written.append(relative)
    except ServiceError:
        log.error("✗ Failed to copy template files.")
        raise
    log.success("✓ Project files set up successfully.")
    return written
