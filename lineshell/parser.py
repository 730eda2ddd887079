from lineshell.config import STATEMENT_SEPARATOR, PIPE_SEPARATOR


def split_statements(line):
    """
    Split an input line into statements on every ';'.
    There is no quoting: a ';' inside quotes still separates.
    """
    if not line:
        return []
    return line.split(STATEMENT_SEPARATOR)


def split_stages(statement):
    """Split a statement into pipe stages on every '|'. Stages are not trimmed."""
    if not statement:
        return []
    return statement.split(PIPE_SEPARATOR)


def tokenize(stage):
    """
    Split one stage into [command, arg1, arg2, ...] on runs of whitespace.
    Returns [] for a blank stage.
    """
    return stage.split()


def parse_line(line):
    """
    Parse a whole input line.
    Returns: list of statements, each a list of stage token lists
    """
    parsed = []
    for statement in split_statements(line):
        statement = statement.strip()
        parsed.append([tokenize(stage) for stage in split_stages(statement)])
    return parsed
