"""prompt_toolkit integration: run the dispatcher as the input lexer."""

from __future__ import annotations

from collections.abc import Callable, Hashable

from prompt_toolkit.application.current import get_app
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.formatted_text.utils import split_lines
from prompt_toolkit.lexers import Lexer
from prompt_toolkit.selection import SelectionType

from .editor import EditorSnapshot, PathConventions, RegionType
from .system import SystemHighlighter

_REGION_TYPES = {
    SelectionType.CHARACTERS: RegionType.CHAR,
    SelectionType.LINES: RegionType.LINE,
    SelectionType.BLOCK: RegionType.CHAR,
}


def snapshot_from_app(
    document: Document,
    conventions: PathConventions,
    *,
    use_forward_slash: bool = False,
) -> EditorSnapshot:
    """Capture search, selection and validation state of the running application."""

    app = get_app()
    search_term = app.current_search_state.text if app.layout.is_searching else None

    region, region_range = RegionType.NONE, None
    if document.selection is not None:
        region = _REGION_TYPES.get(document.selection.type, RegionType.CHAR)
        region_range = document.selection_range()

    error = app.current_buffer.validation_error
    return EditorSnapshot(
        search_term=search_term,
        region=region,
        region_range=region_range,
        error_index=error.cursor_position if error is not None else -1,
        use_forward_slash=use_forward_slash,
        conventions=conventions,
    )


class SystemLexer(Lexer):
    def __init__(
        self,
        highlighter: SystemHighlighter,
        conventions: PathConventions | None = None,
        *,
        use_forward_slash: bool = False,
    ) -> None:
        self.highlighter = highlighter
        self.conventions = conventions or PathConventions.native()
        self.use_forward_slash = use_forward_slash

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        snapshot = snapshot_from_app(document, self.conventions, use_forward_slash=self.use_forward_slash)
        lines = list(split_lines(self.highlighter.highlight(document.text, snapshot)))

        def get_line(lineno: int) -> StyleAndTextTuples:
            try:
                return lines[lineno]
            except IndexError:
                return []

        return get_line

    def invalidation_hash(self) -> Hashable:
        # Combined with the document text as prompt_toolkit's line cache key.
        app = get_app()
        buffer = app.current_buffer
        error = buffer.validation_error
        selection = None
        if buffer.selection_state is not None:
            selection = (buffer.selection_state.type, buffer.document.selection_range())
        return (
            app.layout.is_searching,
            selection,
            app.current_search_state.text,
            error.cursor_position if error is not None else -1,
        )
