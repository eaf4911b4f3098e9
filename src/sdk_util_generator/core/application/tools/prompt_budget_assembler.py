from collections.abc import Sequence

from sdk_util_generator.core.domain.workspace import PromptBudget, ScannedFile

DEFAULT_MAX_CONTEXT_LENGTH = 50_000


class PromptBudgetAssembler:
    """Greedily packs scanned files into one text block below a character budget.

    Files are taken in scan order. Packing stops at the first file whose block
    would bring the total to the budget or beyond; later, smaller files are not
    tried. Lengths are ``str`` lengths in code points, not encoded bytes.
    """

    def __init__(self, max_context_length: int = DEFAULT_MAX_CONTEXT_LENGTH) -> None:
        self._max_context_length = max_context_length

    def assemble(
        self, files: Sequence[ScannedFile], max_context_length: int | None = None
    ) -> PromptBudget:
        budget = self._max_context_length if max_context_length is None else max_context_length
        parts: list[str] = []
        total_length = 0

        for scanned in files:
            block = self.format_block(scanned)
            if total_length + len(block) >= budget:
                break
            parts.append(block)
            total_length += len(block)

        return PromptBudget(
            included_count=len(parts),
            total_files_seen=len(files),
            assembled_text="".join(parts),
        )

    @staticmethod
    def format_block(scanned: ScannedFile) -> str:
        return f"File: {scanned.path}\n```\n{scanned.content}\n```\n\n"
