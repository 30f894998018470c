"""Editor commands built on the pure text transforms.

Responsibilities:
- Clean the selection or the fenced block under the cursor.
- Select the fenced block under the cursor.
- Decide how a plain-text paste should be inserted.

Key types:
- `PasteCleanerCommands`: command surface bound to one host editor and settings.
"""

from __future__ import annotations

from .config import CleanerSettings
from .editor.host import EditorHost
from .models.datatypes import CommandOutcome, PasteDecision
from .telemetry.logger import CommandLogger
from .text.cleaners import clean_block, clean_selection
from .text.code_blocks import locate_in_text

CLEANED_SELECTION_NOTICE = "Cleaned trailing whitespace in selection"
UNCHANGED_SELECTION_NOTICE = "No trailing whitespace found in selection"
CLEANED_BLOCK_NOTICE = "Cleaned trailing whitespace in code block"
UNCHANGED_BLOCK_NOTICE = "No trailing whitespace found in code block"
NO_BLOCK_FOR_CLEAN_NOTICE = (
    "Cursor is not inside a code block. Select text or place cursor in a code block."
)
BLOCK_SELECTED_NOTICE = "Code block selected"
NO_BLOCK_NOTICE = "Cursor is not inside a code block"


class PasteCleanerCommands:
    """Run whitespace-cleaning commands against a host editor."""

    def __init__(
        self,
        editor: EditorHost,
        settings: CleanerSettings | None = None,
        command_logger: CommandLogger | None = None,
    ) -> None:
        """Bind commands to an editor, shared settings, and an optional logger."""

        self.editor = editor
        self.settings = settings if settings is not None else CleanerSettings()
        self._logger = command_logger

    def clean_code_block(self) -> CommandOutcome:
        """Clean the selection, or the fenced block under the cursor without one."""

        command = "clean-code-block"
        self._log_start(command)
        selection = self.editor.get_selection()
        if selection:
            cleaned = clean_selection(selection)
            if cleaned != selection:
                self.editor.replace_selection(cleaned)
                return self._finish(command, True, CLEANED_SELECTION_NOTICE, target="selection")
            return self._finish(command, False, UNCHANGED_SELECTION_NOTICE, target="selection")

        span = locate_in_text(self.editor.get_value(), self.editor.get_cursor().line)
        if span is None:
            return self._finish(command, False, NO_BLOCK_FOR_CLEAN_NOTICE, target="none")

        cleaned = clean_block(span.text)
        if cleaned != span.text:
            self.editor.replace_range(cleaned, span.start, span.end)
            return self._finish(command, True, CLEANED_BLOCK_NOTICE, target="block")
        return self._finish(command, False, UNCHANGED_BLOCK_NOTICE, target="block")

    def select_code_block(self) -> CommandOutcome:
        """Select the fenced block under the cursor, fences included."""

        self._log_start("select-code-block")
        span = locate_in_text(self.editor.get_value(), self.editor.get_cursor().line)
        if span is None:
            return self._finish("select-code-block", False, NO_BLOCK_NOTICE)
        self.editor.set_selection(span.start, span.end)
        return self._finish("select-code-block", True, BLOCK_SELECTED_NOTICE)

    def handle_paste(self, clipboard_text: str | None) -> PasteDecision:
        """Return how the host should insert a plain-text clipboard payload."""

        if not self.settings.auto_clean_on_paste or not clipboard_text:
            decision = PasteDecision.pass_through()
        else:
            cleaned = clean_selection(clipboard_text)
            if cleaned != clipboard_text:
                decision = PasteDecision.replace_with(cleaned)
            else:
                decision = PasteDecision.pass_through()

        if self._logger is not None:
            self._logger.log_command_outcome(
                "paste",
                not decision.passes_through,
                auto_clean=self.settings.auto_clean_on_paste,
            )
        return decision

    def apply_paste(self, clipboard_text: str | None) -> bool:
        """Act on `handle_paste`; return whether default insertion is suppressed."""

        decision = self.handle_paste(clipboard_text)
        if decision.replacement is None:
            return False
        self.editor.replace_selection(decision.replacement)
        return True

    def _log_start(self, command: str) -> None:
        if self._logger is not None:
            self._logger.log_command_start(command)

    def _finish(
        self, command: str, changed: bool, notice: str, **context: object
    ) -> CommandOutcome:
        """Notify the user, log the outcome, and build the command result."""

        self.editor.notify(notice)
        if self._logger is not None:
            self._logger.log_command_outcome(command, changed, **context)
        return CommandOutcome(changed=changed, notice=notice)
