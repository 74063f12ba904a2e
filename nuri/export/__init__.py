from .preview import format_preview, print_palette
from .report import generate_readability_report

__all__ = ["format_preview", "generate_readability_report", "print_palette"]
