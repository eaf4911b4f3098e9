from dataclasses import dataclass


@dataclass(frozen=True)
class PromptBudget:
    """Outcome of packing scanned files into a size-limited prompt section."""

    included_count: int
    total_files_seen: int
    assembled_text: str

    @property
    def omitted_count(self) -> int:
        return self.total_files_seen - self.included_count

    @property
    def summary(self) -> str:
        if self.included_count < self.total_files_seen:
            return (
                f"(Showing {self.included_count} of {self.total_files_seen} files "
                "due to size limits)"
            )
        return f"(All {self.total_files_seen} files included)"
