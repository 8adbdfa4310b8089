

def normalize_text(s: str) -> str:
    """Unify line endings and strip the whole text. Chunk offsets index into this."""
    s = s.replace("\r\n", "\n").replace("\r", "\n")
    return s.strip()
