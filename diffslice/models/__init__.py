from .change import ANCHOR_TOKEN, HUNK_MARKER, LINE_SEPARATOR, Change, Hunk

__all__ = ["Change", "Hunk", "ANCHOR_TOKEN", "HUNK_MARKER", "LINE_SEPARATOR"]
