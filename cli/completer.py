"""Custom completer for the splitter CLI with path autocompletion."""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from cli.constants import COMMANDS, CONFIG_KEYS


class SplitterCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Filesystem path completion for 'split' (file argument) and 'join'
    - Key completion for 'config'
    """

    def __init__(self):
        self._paths = PathCompleter(expanduser=True)

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        current_word = "" if is_typing_new_token else tokens[-1]
        position = len(tokens) if is_typing_new_token else len(tokens) - 1

        if command == "join" or (command == "split" and position == 1):
            yield from self._complete_paths(current_word, complete_event)
        elif command == "config" and position == 1:
            yield from self._complete_config_keys(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_config_keys(self, partial: str) -> Iterable[Completion]:
        for key in CONFIG_KEYS:
            if key.startswith(partial):
                yield Completion(key, start_position=-len(partial))

    def _complete_paths(self, partial: str, complete_event) -> Iterable[Completion]:
        """Complete filesystem paths relative to the working directory."""
        word_document = Document(partial, len(partial))
        yield from self._paths.get_completions(word_document, complete_event)
