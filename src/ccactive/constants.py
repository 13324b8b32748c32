"""Fixed values shared across detection."""

# Exact command name of a Claude Code process as reported by ps.
TARGET_PROCESS_NAME = "claude"

PS_LIST_COMMAND = ["ps", "-eo", "pid,comm"]
