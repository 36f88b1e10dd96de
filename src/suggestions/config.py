TOP_K: int = 5

# Tie-break ordering for equal scores: "codepoint" or "locale"
COLLATION: str = "codepoint"

# Choice files picked up when a root is a directory
CHOICE_FILE_EXTS: tuple[str, ...] = (".txt",)

# Lines starting with this are skipped by the loader
COMMENT_PREFIX: str = "#"
