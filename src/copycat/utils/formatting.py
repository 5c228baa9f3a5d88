PREVIEW_LIMIT = 50
PREVIEW_KEEP = 47
ELLIPSIS = "..."


def truncate_preview(content: str) -> str:
    if len(content) > PREVIEW_LIMIT:
        return content[:PREVIEW_KEEP] + ELLIPSIS
    return content


def format_age(timestamp: int, now: int) -> str:
    # clock skew can put the entry in the future
    diff = max(0, now - timestamp)

    if diff < 60:
        return f"{diff}s ago"
    elif diff < 3600:
        return f"{diff // 60}m ago"
    elif diff < 86400:
        return f"{diff // 3600}h ago"
    return f"{diff // 86400}d ago"
