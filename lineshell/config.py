import os

PROMPT = "$ "

STATEMENT_SEPARATOR = ";"
PIPE_SEPARATOR = "|"

# Same layout as `date` on Unix: "Mon Jan  2 15:04:05 MST 2006"
DATE_FORMAT = "%a %b {day:>2} %H:%M:%S %Z %Y"

USER_ENV_VAR = "USER"

CLEAR_COMMAND = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]

INTERRUPT_MESSAGE = "\nReceived interrupt signal. Exiting..."

# Seconds to wait for children after SIGTERM before killing them
CHILD_TERMINATE_TIMEOUT = 0.2
