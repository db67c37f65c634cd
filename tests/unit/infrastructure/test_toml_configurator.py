"""
Unit tests for the TOML slash command configurators

Tests verify:
- Static path tables per tool
- Rendered TOML layout and managed metadata
- generate_all overwrite semantics
- update_existing never creates files
- Deterministic rendering
"""

import tomllib

import pytest

from openspec.core.domain.constants import OPENSPEC_MARKERS
from openspec.core.domain.errors import ConfiguratorDefinitionError
from openspec.core.domain.slash_commands import (
    ALL_COMMANDS,
    COMMAND_DESCRIPTIONS,
    SlashCommandId,
)
from openspec.infrastructure.slash_commands import (
    GEMINI_FILE_PATHS,
    QWEN_FILE_PATHS,
    TomlSlashCommandConfigurator,
    create_gemini_configurator,
    create_qwen_configurator,
)
from openspec.infrastructure.file_system import FileSystemUtils

FACTORIES = {
    "gemini": create_gemini_configurator,
    "qwen": create_qwen_configurator,
}


def _fixed_body(command_id: SlashCommandId) -> str:
    return f"Body for {command_id.value}."


class RecordingLogger:
    """Logger double capturing (level, event, fields)."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def debug(self, event: str, **kwargs) -> None:
        self.records.append(("debug", event, kwargs))

    def info(self, event: str, **kwargs) -> None:
        self.records.append(("info", event, kwargs))

    def warning(self, event: str, **kwargs) -> None:
        self.records.append(("warning", event, kwargs))

    def events(self, level: str) -> list[tuple[str, dict]]:
        return [(event, fields) for lvl, event, fields in self.records if lvl == level]


class FailingSecondWriteFileSystem(FileSystemUtils):
    """Real file system whose second write raises PermissionError."""

    def __init__(self) -> None:
        super().__init__()
        self.write_attempts = 0

    async def write_file(self, path: str, content: str) -> None:
        self.write_attempts += 1
        if self.write_attempts == 2:
            raise PermissionError(f"permission denied: {path}")
        await super().write_file(path, content)


@pytest.fixture(params=sorted(FACTORIES))
def tool_id(request) -> str:
    return request.param


@pytest.mark.parametrize("command_id", ALL_COMMANDS)
def test_relative_paths_contain_tool_dir_and_command(tool_id, command_id):
    configurator = FACTORIES[tool_id]()

    path = configurator.get_relative_path(command_id)

    assert path == f".{tool_id}/commands/openspec_{command_id.value}.toml"


def test_targets_follow_path_tables():
    gemini = create_gemini_configurator()
    qwen = create_qwen_configurator()

    assert [t.path for t in gemini.get_targets()] == [GEMINI_FILE_PATHS[c] for c in ALL_COMMANDS]
    assert [t.path for t in qwen.get_targets()] == [QWEN_FILE_PATHS[c] for c in ALL_COMMANDS]
    assert gemini.tool_id == "gemini" and gemini.is_available
    assert qwen.tool_id == "qwen" and qwen.is_available


@pytest.mark.parametrize("command_id", ALL_COMMANDS)
def test_frontmatter_is_always_none(tool_id, command_id):
    assert FACTORIES[tool_id]().get_frontmatter(command_id) is None


def test_incomplete_path_table_fails_at_construction():
    with pytest.raises(ConfiguratorDefinitionError):
        TomlSlashCommandConfigurator(
            "broken", {SlashCommandId.PROPOSAL: ".broken/openspec_proposal.toml"}
        )


def test_proposal_scenario_renders_description_and_prompt():
    configurator = create_gemini_configurator()

    content = configurator.generate_toml_content(SlashCommandId.PROPOSAL, "Do the thing.")

    assert content == (
        'description = "Scaffold a new OpenSpec change and validate strictly"\n'
        "\n"
        'prompt = """\n'
        "---\n"
        "description: Scaffold a new OpenSpec change and validate strictly\n"
        "---\n"
        "\n"
        "Do the thing.\n"
        '"""\n'
        "\n"
        "[openspec]\n"
        "managed = true\n"
        'version = "1.0"\n'
        'markers = { start = "<!-- OPENSPEC:START -->", end = "<!-- OPENSPEC:END -->" }\n'
    )


@pytest.mark.parametrize("command_id", ALL_COMMANDS)
def test_rendered_content_is_valid_toml_with_managed_table(tool_id, command_id):
    configurator = FACTORIES[tool_id]()
    body = configurator.get_body(command_id)

    content = configurator.generate_toml_content(command_id, body)
    parsed = tomllib.loads(content)

    description = COMMAND_DESCRIPTIONS[command_id]
    assert parsed["description"] == description
    assert parsed["prompt"] == f"---\ndescription: {description}\n---\n\n{body}\n"
    assert parsed["openspec"] == {
        "managed": True,
        "version": "1.0",
        "markers": {"start": OPENSPEC_MARKERS.start, "end": OPENSPEC_MARKERS.end},
    }
    assert content.count("[openspec]") == 1


def test_rendering_is_deterministic(tool_id):
    configurator = FACTORIES[tool_id]()

    first = configurator.generate_toml_content(SlashCommandId.APPLY, "Same body")
    second = configurator.generate_toml_content(SlashCommandId.APPLY, "Same body")

    assert first == second


def test_body_with_delimiter_is_emitted_unescaped_and_warned():
    logger = RecordingLogger()
    configurator = create_qwen_configurator(logger=logger)

    content = configurator.generate_toml_content(SlashCommandId.APPLY, 'say """hi"""')

    assert 'say """hi"""' in content
    assert logger.events("warning") == [
        ("toml.delimiter_collision", {"command": "apply", "delimiter": '"""'})
    ]


def test_regular_body_logs_no_warning():
    logger = RecordingLogger()
    configurator = create_gemini_configurator(logger=logger)

    configurator.generate_toml_content(SlashCommandId.PROPOSAL, "Do the thing.")

    assert logger.events("warning") == []


def test_body_provider_is_used_and_stripped():
    configurator = create_gemini_configurator(body_provider=lambda c: f"\n  {c.value} body  \n")

    assert configurator.get_body(SlashCommandId.ARCHIVE) == "archive body"


@pytest.mark.asyncio
async def test_generate_all_writes_every_target(tmp_path, recording_fs, tool_id):
    configurator = FACTORIES[tool_id](body_provider=_fixed_body, file_system=recording_fs)

    paths = await configurator.generate_all(str(tmp_path), "openspec")

    expected = [t.path for t in configurator.get_targets()]
    assert paths == expected
    assert len(recording_fs.writes) == 3
    for command_id, relative_path in zip(ALL_COMMANDS, expected):
        written = (tmp_path / relative_path).read_text(encoding="utf-8")
        assert written == configurator.generate_toml_content(
            command_id, _fixed_body(command_id)
        )


@pytest.mark.asyncio
async def test_generate_all_overwrites_existing_files(tmp_path, tool_id):
    configurator = FACTORIES[tool_id](body_provider=_fixed_body)
    target = configurator.get_targets()[0]
    file_path = tmp_path / target.path
    file_path.parent.mkdir(parents=True)
    file_path.write_text("hand edited", encoding="utf-8")

    paths = await configurator.generate_all(str(tmp_path), "openspec")

    assert len(paths) == 3
    assert file_path.read_text(encoding="utf-8") == configurator.generate_toml_content(
        target.id, _fixed_body(target.id)
    )


@pytest.mark.asyncio
async def test_update_existing_without_files_writes_nothing(tmp_path, recording_fs, tool_id):
    configurator = FACTORIES[tool_id](file_system=recording_fs)

    paths = await configurator.update_existing(str(tmp_path), "openspec")

    assert paths == []
    assert recording_fs.writes == []
    assert len(recording_fs.exists_checks) == 3
    assert not (tmp_path / f".{tool_id}").exists()


@pytest.mark.asyncio
async def test_update_existing_only_touches_present_files(tmp_path, recording_fs, tool_id):
    configurator = FACTORIES[tool_id](body_provider=_fixed_body, file_system=recording_fs)
    apply_path = configurator.get_relative_path(SlashCommandId.APPLY)
    file_path = tmp_path / apply_path
    file_path.parent.mkdir(parents=True)
    file_path.write_text("stale", encoding="utf-8")

    paths = await configurator.update_existing(str(tmp_path), "openspec")

    assert paths == [apply_path]
    assert len(recording_fs.writes) == 1
    assert file_path.read_text(encoding="utf-8") == configurator.generate_toml_content(
        SlashCommandId.APPLY, _fixed_body(SlashCommandId.APPLY)
    )
    proposal_path = configurator.get_relative_path(SlashCommandId.PROPOSAL)
    assert not (tmp_path / proposal_path).exists()


@pytest.mark.asyncio
async def test_generate_then_update_is_idempotent(tmp_path, tool_id):
    configurator = FACTORIES[tool_id]()

    generated = await configurator.generate_all(str(tmp_path), "openspec")
    before = {p: (tmp_path / p).read_text(encoding="utf-8") for p in generated}
    updated = await configurator.update_existing(str(tmp_path), "openspec")
    after = {p: (tmp_path / p).read_text(encoding="utf-8") for p in updated}

    assert updated == generated
    assert after == before


@pytest.mark.asyncio
async def test_tools_write_disjoint_paths(tmp_path):
    gemini_paths = await create_gemini_configurator().generate_all(str(tmp_path), "openspec")
    qwen_paths = await create_qwen_configurator().generate_all(str(tmp_path), "openspec")

    assert set(gemini_paths).isdisjoint(qwen_paths)
    assert sorted(p.name for p in (tmp_path / ".gemini" / "commands").iterdir()) == [
        "openspec_apply.toml",
        "openspec_archive.toml",
        "openspec_proposal.toml",
    ]


@pytest.mark.asyncio
async def test_generate_all_write_failure_propagates_and_keeps_earlier_files(tmp_path, tool_id):
    fs = FailingSecondWriteFileSystem()
    configurator = FACTORIES[tool_id](body_provider=_fixed_body, file_system=fs)

    with pytest.raises(PermissionError):
        await configurator.generate_all(str(tmp_path), "openspec")

    proposal = tmp_path / configurator.get_relative_path(SlashCommandId.PROPOSAL)
    assert proposal.read_text(encoding="utf-8") == configurator.generate_toml_content(
        SlashCommandId.PROPOSAL, _fixed_body(SlashCommandId.PROPOSAL)
    )
    assert not (tmp_path / configurator.get_relative_path(SlashCommandId.APPLY)).exists()
    assert not (tmp_path / configurator.get_relative_path(SlashCommandId.ARCHIVE)).exists()
    assert fs.write_attempts == 2


@pytest.mark.asyncio
async def test_update_existing_write_failure_propagates_and_keeps_earlier_files(
    tmp_path, tool_id
):
    fs = FailingSecondWriteFileSystem()
    configurator = FACTORIES[tool_id](body_provider=_fixed_body, file_system=fs)
    for target in configurator.get_targets():
        file_path = tmp_path / target.path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("stale", encoding="utf-8")

    with pytest.raises(PermissionError):
        await configurator.update_existing(str(tmp_path), "openspec")

    proposal = tmp_path / configurator.get_relative_path(SlashCommandId.PROPOSAL)
    assert proposal.read_text(encoding="utf-8") == configurator.generate_toml_content(
        SlashCommandId.PROPOSAL, _fixed_body(SlashCommandId.PROPOSAL)
    )
    for command_id in (SlashCommandId.APPLY, SlashCommandId.ARCHIVE):
        path = tmp_path / configurator.get_relative_path(command_id)
        assert path.read_text(encoding="utf-8") == "stale"
    assert fs.write_attempts == 2
