import os
import subprocess
import sys
from collections import namedtuple
from datetime import datetime

from lineshell.config import DATE_FORMAT, USER_ENV_VAR, CLEAR_COMMAND

# handler(shell, args) -> exit code
Builtin = namedtuple("Builtin", ["name", "handler", "description"])


def builtin_exit(shell, args):
    """Exit the shell (arguments are ignored)"""
    sys.stdout.flush()
    raise SystemExit(0)


def builtin_cd(shell, args):
    """Change directory"""
    if not args:
        print("cd: missing directory")
        return 1
    try:
        os.chdir(args[0])
        return 0
    except (OSError, ValueError) as e:
        print(f"cd: {e}")
        return 1


def builtin_history(shell, args):
    """Show command history"""
    shell.history.for_each(lambda i, line: print(f"{i}\t{line}"))
    return 0


def builtin_ls(shell, args):
    path = args[0] if args else "."
    try:
        names = sorted(os.listdir(path))
    except (OSError, ValueError) as e:
        print(f"ls: {e}")
        return 1
    for name in names:
        print(name)
    return 0


def builtin_pwd(shell, args):
    try:
        print(os.getcwd())
        return 0
    except (OSError, ValueError) as e:
        print(f"pwd: {e}")
        return 1


def builtin_mkdir(shell, args):
    if not args:
        print("mkdir: missing directory name")
        return 1
    try:
        os.mkdir(args[0], 0o755)
        return 0
    except (OSError, ValueError) as e:
        print(f"mkdir: {e}")
        return 1


def builtin_rmdir(shell, args):
    if not args:
        print("rmdir: missing directory name")
        return 1
    try:
        os.rmdir(args[0])
        return 0
    except (OSError, ValueError) as e:
        print(f"rmdir: {e}")
        return 1


def builtin_rm(shell, args):
    """Remove files one by one; a failure does not stop the rest"""
    if not args:
        print("rm: missing file name")
        return 1
    status = 0
    for name in args:
        try:
            os.remove(name)
        except (OSError, ValueError) as e:
            print(f"rm: {e}")
            status = 1
    return status


def builtin_cat(shell, args):
    """Print files one by one; a failure does not stop the rest"""
    if not args:
        print("cat: missing file name")
        return 1
    status = 0
    for name in args:
        try:
            with open(name, "r", errors="replace") as f:
                data = f.read()
        except (OSError, ValueError) as e:
            print(f"cat: {e}")
            status = 1
            continue
        print(data, end="" if data.endswith("\n") else "\n")
    return status


def builtin_echo(shell, args):
    print(" ".join(args))
    return 0


def builtin_date(shell, args):
    now = datetime.now().astimezone()
    print(now.strftime(DATE_FORMAT.format(day=now.day)))
    return 0


def builtin_whoami(shell, args):
    print(os.environ.get(USER_ENV_VAR, ""))
    return 0


def builtin_env(shell, args):
    for key, value in os.environ.items():
        print(f"{key}={value}")
    return 0


def builtin_clear(shell, args):
    sys.stdout.flush()
    try:
        res = subprocess.run(CLEAR_COMMAND)
    except (OSError, ValueError) as e:
        print(f"clear: {e}")
        return 1
    if res.returncode != 0:
        print(f"clear: exited with status {res.returncode}")
        return 1
    return 0


def builtin_help(shell, args):
    """Print help message"""
    print("Available commands:")
    for b in BUILTINS.values():
        print(f"  {b.name:<8}- {b.description}")
    return 0


BUILTINS = {b.name: b for b in [
    Builtin("exit", builtin_exit, "Exit the shell"),
    Builtin("cd", builtin_cd, "Change directory"),
    Builtin("history", builtin_history, "Show command history"),
    Builtin("ls", builtin_ls, "List files in directory"),
    Builtin("pwd", builtin_pwd, "Print current directory"),
    Builtin("mkdir", builtin_mkdir, "Create a directory"),
    Builtin("rmdir", builtin_rmdir, "Remove a directory"),
    Builtin("rm", builtin_rm, "Remove file(s)"),
    Builtin("cat", builtin_cat, "Concatenate and display file(s)"),
    Builtin("echo", builtin_echo, "Display message"),
    Builtin("date", builtin_date, "Print current date and time"),
    Builtin("whoami", builtin_whoami, "Print current user"),
    Builtin("env", builtin_env, "Print environment variables"),
    Builtin("clear", builtin_clear, "Clear the screen"),
    Builtin("help", builtin_help, "Display this help message"),
]}


def lookup(name):
    return BUILTINS.get(name)


def execute_builtin(shell, tokens):
    """
    Execute built-in command if it matches.
    Returns (executed: bool, exit_code: int)
    """
    if not tokens:
        return False, 0

    builtin = lookup(tokens[0])
    if builtin is None:
        return False, 0
    return True, builtin.handler(shell, tokens[1:])
