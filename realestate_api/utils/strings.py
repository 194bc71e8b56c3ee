from typing import Optional


def norm_str(s: Optional[str]) -> Optional[str]:
    if isinstance(s, str):
        s = s.strip()
        return s or None
    return None


def escape_like(s: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so ``s`` matches literally."""
    return (
        s.replace(escape, escape * 2)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )


def contains_pattern(s: str, escape: str = "\\") -> str:
    return f"%{escape_like(s, escape)}%"
