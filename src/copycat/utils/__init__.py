from copycat.utils.formatting import format_age, truncate_preview

__all__ = ["format_age", "truncate_preview"]
