"""Find duplicate files in a folder by content hash and move the extra copies to the trash."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "duplicate_manager",
    "file_scanner",
    "hash_calculator",
    "input_handler",
    "report_generator",
    "utilities",
]