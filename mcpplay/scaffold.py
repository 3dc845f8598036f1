"""Scaffolding for adding new command files to a project."""

from __future__ import annotations

import os
import time
from pathlib import Path

TEMPLATES_FOLDER = Path(".meta/templates")
COMMANDS_FOLDER = Path("src/commands")
TEMPLATE_NAME = "command.rs"
REGISTRY_NAME = "commands.rs"
MAIN_NAME = "main.rs"

SCAFFOLD_VARIANT_MARKER = "Scaffold(scaffold::Arguments)"
SCAFFOLD_RUN_MARKER = "Commands::Scaffold(args) => scaffold::run(args)"

_STEP_DELAY = 0.5


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class CommandFileExistsError(ScaffoldError):
    """The command file to be created is already present."""

    def __init__(self) -> None:
        super().__init__("The command file already exists")


class MissingCommandTemplateError(ScaffoldError):
    """The command template could not be read."""

    def __init__(self) -> None:
        super().__init__("The template file is missing, check .meta/templates/command.rs")


def normalize_name(name: str) -> str:
    """Lower-case a name and replace every non-alphanumeric character with ``_``."""
    return "".join(c if c.isalnum() else "_" for c in name.lower())


def title_case(name: str) -> str:
    """Upper-case the first character when it is ASCII."""
    if not name:
        return name
    first = name[0]
    return (first.upper() if first.isascii() else first) + name[1:]


def _announce(message: str) -> None:
    print(f"🤞 {message}...", end="", flush=True)
    time.sleep(_STEP_DELAY)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _register(registry: Path, name: str) -> None:
    with registry.open("r+b") as fh:
        size = fh.seek(0, os.SEEK_END)
        if size > 0:
            fh.seek(-1, os.SEEK_END)
            needs_newline = fh.read(1) != b"\n"
            fh.seek(0, os.SEEK_END)
            if needs_newline:
                fh.write(b"\n")
        fh.write(f"pub(crate) mod {name};\n".encode())


def _wire_into_main(main_path: Path, name: str) -> None:
    title = title_case(name)
    output: list[str] = []
    for line in _lines(main_path.read_text(encoding="utf-8")):
        output.append(line)
        if SCAFFOLD_VARIANT_MARKER in line:
            output.append(f"    {title}({name}::Arguments),")
        if SCAFFOLD_RUN_MARKER in line:
            output.append(f"            Commands::{title}(args) => {name}::run(args),")
    tmp_path = main_path.with_name(f"{main_path.name}.tmp")
    tmp_path.write_text("".join(f"{line}\n" for line in output), encoding="utf-8")
    os.replace(tmp_path, main_path)


def scaffold_command(name: str, project_dir: str | os.PathLike | None = None) -> None:
    """Create a command file from the template and register it in the project."""
    name = normalize_name(name)
    root = Path(project_dir) if project_dir is not None else Path.cwd()
    commands_dir = root / COMMANDS_FOLDER

    _announce(f"Creating {name} command")
    try:
        contents = (root / TEMPLATES_FOLDER / TEMPLATE_NAME).read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingCommandTemplateError() from exc

    target = commands_dir / f"{name}.rs"
    if target.exists():
        print(f"\r❌ Failed to create {name} command", flush=True)
        raise CommandFileExistsError()
    target.write_text(contents, encoding="utf-8")
    print(f"\r✅ Created {name}.rs in {COMMANDS_FOLDER.as_posix()}!", flush=True)

    _announce(f"Writing to {REGISTRY_NAME}")
    _register(commands_dir.parent / REGISTRY_NAME, name)
    print(f"\r✅ Added {name} to {REGISTRY_NAME}!", flush=True)

    _announce(f"Writing to {MAIN_NAME}")
    _wire_into_main(root / "src" / MAIN_NAME, name)
    print(f"\r✅ Added {name} to {MAIN_NAME}!", flush=True)

    print(f"🎉 Command {name} created successfully!")