"""
Slash Command Templates

Markdown bodies for the OpenSpec slash commands. Every tool embeds the
same body; only the wrapper format differs per tool.
"""

from openspec.core.domain.slash_commands import SlashCommandId, check_exhaustive

BASE_GUARDRAILS = """**Guardrails**
- Favor straightforward, minimal implementations first and add complexity only when it is requested or clearly required.
- Keep changes tightly scoped to the requested outcome.
- Refer to `openspec/AGENTS.md` (located inside the `openspec/` directory; run `ls openspec` or `openspec update` if you don't see it) if you need additional OpenSpec conventions or clarifications."""

PROPOSAL_GUARDRAILS = f"""{BASE_GUARDRAILS}
- Identify any vague or ambiguous details and ask the necessary follow-up questions before editing files.
- Do not write any code during the proposal stage. Only create design documents (proposal.md, tasks.md, design.md, and spec deltas)."""

PROPOSAL_STEPS = """**Steps**
1. Review `openspec/project.md`, run `openspec list` and `openspec list --specs`, and inspect related code or docs (e.g., via `rg`/`ls`) to ground the proposal in current behaviour; note any gaps that require clarification.
2. Choose a unique verb-led `change-id` and scaffold `proposal.md`, `tasks.md`, and `design.md` (when needed) under `openspec/changes/<id>/`.
3. Map the change into concrete capabilities or requirements, breaking multi-scope efforts into distinct spec deltas with clear relationships and sequencing.
4. Capture architectural reasoning in `design.md` when the solution spans multiple systems, introduces new patterns, or demands trade-off discussion before committing to specs.
5. Draft spec deltas in `changes/<id>/specs/<capability>/spec.md` (one folder per capability) using `## ADDED|MODIFIED|REMOVED Requirements` with at least one `#### Scenario:` per requirement and cross-reference related capabilities when relevant.
6. Draft `tasks.md` as an ordered list of small, verifiable work items that deliver user-visible progress, include validation (tests, tooling), and highlight dependencies or parallelizable work.
7. Validate with `openspec validate <id> --strict` and resolve every issue before sharing the proposal."""

PROPOSAL_REFERENCES = """**Reference**
- Use `openspec show <id> --json --deltas-only` or `openspec show <spec> --type spec` to inspect details when validation fails.
- Search existing requirements with `rg -n "Requirement:|Scenario:" openspec/specs` before writing new ones.
- Explore the codebase with `rg <keyword>`, `ls`, or direct file reads so proposals align with current implementation realities."""

APPLY_STEPS = """**Steps**
Track these steps as TODOs and complete them one by one.
1. Read `changes/<id>/proposal.md`, `design.md` (if present), and `tasks.md` to confirm scope and acceptance criteria.
2. Work through tasks sequentially, keeping edits minimal and focused on the requested change.
3. Confirm completion before updating statuses; make sure every item in `tasks.md` is finished.
4. Update the checklist after all work is done so each task is marked `- [x]` and reflects reality.
5. Reference `openspec list` or `openspec show <item>` when additional context is required."""

APPLY_REFERENCES = """**Reference**
- Use `openspec show <id> --json --deltas-only` if you need additional context from the proposal while implementing."""

ARCHIVE_STEPS = """**Steps**
1. Determine the change ID to archive:
   - If this prompt already includes a specific change ID, use that value after trimming whitespace.
   - If the conversation references a change loosely (for example by title or summary), run `openspec list` to surface likely IDs, share the relevant candidates, and confirm which one the user intends.
   - Otherwise, review the conversation, run `openspec list`, and ask the user which change to archive; wait for a confirmed change ID before proceeding.
   - If you still cannot identify a single change ID, stop and tell the user you cannot archive anything yet.
2. Validate the change ID by running `openspec list` (or `openspec show <id>`) and stop if the change is missing, already archived, or otherwise not ready to archive.
3. Run `openspec archive <id> --yes` so the CLI moves the change and applies spec updates without prompts (use `--skip-specs` only for tooling-only work).
4. Review the command output to confirm the target specs were updated and the change landed in `changes/archive/`.
5. Validate with `openspec validate --strict` and inspect with `openspec show <id>` if anything looks off."""

ARCHIVE_REFERENCES = """**Reference**
- Use `openspec list` to confirm change IDs before archiving.
- Inspect refreshed specs with `openspec list --specs` and address any validation issues before handing off."""

SLASH_COMMAND_SECTIONS: dict[SlashCommandId, tuple[str, ...]] = {
    SlashCommandId.PROPOSAL: (PROPOSAL_GUARDRAILS, PROPOSAL_STEPS, PROPOSAL_REFERENCES),
    SlashCommandId.APPLY: (BASE_GUARDRAILS, APPLY_STEPS, APPLY_REFERENCES),
    SlashCommandId.ARCHIVE: (BASE_GUARDRAILS, ARCHIVE_STEPS, ARCHIVE_REFERENCES),
}

check_exhaustive(SLASH_COMMAND_SECTIONS, "SLASH_COMMAND_SECTIONS")


def get_slash_command_body(command_id: SlashCommandId) -> str:
    """
    Build the markdown body for a slash command.

    Args:
        command_id: Command to render

    Returns:
        Guardrails, steps and references separated by blank lines
    """
    return "\n\n".join(SLASH_COMMAND_SECTIONS[command_id]).strip()
