from sdk_util_generator.core.domain.workspace.prompt_budget import PromptBudget
from sdk_util_generator.core.domain.workspace.scan_config import ScanConfig
from sdk_util_generator.core.domain.workspace.scanned_file import ScannedFile

__all__ = ["PromptBudget", "ScanConfig", "ScannedFile"]
